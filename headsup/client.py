"""A bot client that joins a table over WebSocket and plays at random."""

import json
import os
import sys

import websocket

from . import delay
from .random_strategy import RandomStrategy
from .serialization import WelcomeMessage
from .stack_management import should_top_up

_ACTION_FIELDS = ("hand_id", "possible_actions", "call_amount", "min_raise", "max_raise")


class ProtocolError(Exception):
    """The server sent something the client cannot accept."""


def _dump(message):
    return json.dumps(message, separators=(",", ":"))


def _parse(text, what):
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"Failed to parse {what}: {exc}") from None
    return data if isinstance(data, dict) else {}


def _payload(data):
    payload = data.get("payload")
    return payload if isinstance(payload, dict) else None


def _int(value, field):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProtocolError(f"{field} must be a number")
    return int(value)


def _str(value, field):
    if not isinstance(value, str):
        raise ProtocolError(f"{field} must be a string")
    return value


class Client:
    """Connects to a poker server, joins a seat and answers action requests."""

    def __init__(self, host, port, name="Bot"):
        self.host = host
        self.port = str(port)
        self.name = name
        self.player_id = ""
        self.stack = 0
        self.seat = None
        self.strategy = RandomStrategy()

    @property
    def url(self):
        return f"ws://{self.host}:{self.port}/"

    def _expect(self, text, expected_type, field):
        data = _parse(text, f"{expected_type} message")
        if data.get("type") != expected_type:
            raise ProtocolError(f"Expected {expected_type} message, got: {text}")
        payload = _payload(data)
        if payload is None or field not in payload:
            raise ProtocolError(
                f"Invalid {expected_type} message: missing payload or {field}"
            )
        return payload

    def _handshake(self, ws):
        payload = self._expect(ws.recv(), "welcome", "player_id")
        try:
            welcome = WelcomeMessage.from_json(payload)
        except (TypeError, KeyError) as exc:
            raise ProtocolError(f"Invalid welcome message: {exc}") from None
        self.player_id = welcome.player_id
        print(f"Assigned player ID: {self.player_id}")

        ws.send(_dump({"type": "join", "payload": {"name": self.name}}))

        payload = self._expect(ws.recv(), "join_ack", "seat")
        self.seat = _int(payload["seat"], "seat")
        print(f"Joined table at seat {self.seat}")

    def _on_action_request(self, data):
        payload = _payload(data)
        if payload is None:
            raise ProtocolError("action_request missing payload")
        if any(name not in payload for name in _ACTION_FIELDS):
            raise ProtocolError("action_request missing required fields")
        hand_id = _str(payload["hand_id"], "hand_id")
        possible = payload["possible_actions"]
        if not isinstance(possible, list):
            raise ProtocolError("possible_actions must be an array")
        actions = [_str(action, "possible action") for action in possible]
        call_amount = _int(payload["call_amount"], "call_amount")
        min_raise = _int(payload["min_raise"], "min_raise")
        max_raise = _int(payload["max_raise"], "max_raise")

        try:
            action, amount = self.strategy.choose_action(
                actions, call_amount, min_raise, max_raise
            )
        except ValueError as exc:
            raise ProtocolError(str(exc)) from None

        delay.random_delay()
        print(f"Sent action: {action} amount {amount}")
        return [
            {
                "type": "action",
                "payload": {"hand_id": hand_id, "action": action, "amount": amount},
            }
        ]

    def _on_hand_completed(self, data, text):
        print(f"Hand completed: {text}")
        payload = _payload(data)
        if payload is None:
            raise ProtocolError("hand_completed missing payload")
        if "updated_stacks" not in payload:
            raise ProtocolError("hand_completed missing updated_stacks")
        stacks = payload["updated_stacks"]
        if not isinstance(stacks, dict) or self.player_id not in stacks:
            return []
        self.stack = _int(stacks[self.player_id], "stack")
        if should_top_up(self.stack):
            print(f"Sent top-up request (stack={self.stack})")
            return [{"type": "top_up", "payload": {}}]
        return []

    def _on_top_up_ack(self, data):
        payload = _payload(data)
        if payload is None or "new_stack" not in payload:
            raise ProtocolError("top_up_ack missing required fields")
        self.stack = _int(payload["new_stack"], "new_stack")
        print(f"Stack topped up to {self.stack}")
        return []

    def handle_message(self, message):
        """Process one message from the server and return the replies to send.

        Raises ProtocolError for malformed messages and for server errors.
        """
        data = _parse(message, "message")
        if "type" not in data:
            raise ProtocolError(f"Message missing 'type' field: {message}")
        kind = _str(data["type"], "type")

        if kind == "hand_started":
            print("Hand started")
            return []
        if kind == "action_request":
            return self._on_action_request(data)
        if kind == "action_applied":
            print(f"Action applied: {message}")
            return []
        if kind == "hand_completed":
            return self._on_hand_completed(data, message)
        if kind == "top_up_ack":
            return self._on_top_up_ack(data)
        if kind == "error":
            raise ProtocolError(f"Server error: {message}")
        print(f"Unknown message type: {kind}")
        return []

    def run(self):
        """Connect, join the table and play until the session ends."""
        try:
            ws = websocket.create_connection(self.url)
        except (OSError, websocket.WebSocketException) as exc:
            print(f"Client error: {exc}", file=sys.stderr)
            return
        print(f"Connected to server at {self.host}:{self.port}")
        try:
            self._handshake(ws)
            while ws.connected:
                for reply in self.handle_message(ws.recv()):
                    ws.send(_dump(reply))
        except websocket.WebSocketConnectionClosedException:
            print("Connection closed by server", file=sys.stderr)
        except ProtocolError as exc:
            print(str(exc), file=sys.stderr)
        except (OSError, websocket.WebSocketException) as exc:
            print(f"Client error: {exc}", file=sys.stderr)
        finally:
            ws.close()


def main(argv=None):
    """Run the bot: <host> <port> [name]."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    if len(argv) < 2:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "headsup"
        print(f"Usage: {prog} <host> <port> [name]", file=sys.stderr)
        return 1
    host, port = argv[0], argv[1]
    name = argv[2] if len(argv) >= 3 else "Bot"
    Client(host, port, name).run()
    return 0