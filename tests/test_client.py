import json
import random
from unittest import mock

import pytest
import websocket

from headsup.client import Client, ProtocolError, main
from headsup.random_strategy import RandomStrategy


class FakeSocket:
    def __init__(self, incoming):
        self.incoming = list(incoming)
        self.sent = []
        self.connected = True
        self.closed = False

    def recv(self):
        if not self.incoming:
            self.connected = False
            raise websocket.WebSocketConnectionClosedException("closed")
        return self.incoming.pop(0)

    def send(self, text):
        self.sent.append(json.loads(text))

    def close(self, *args, **kwargs):
        self.connected = False
        self.closed = True


def msg(kind, payload=None):
    data = {"type": kind}
    if payload is not None:
        data["payload"] = payload
    return json.dumps(data)


def action_request(actions, call_amount=4, min_raise=8, max_raise=100):
    return msg(
        "action_request",
        {
            "hand_id": "h1",
            "possible_actions": actions,
            "call_amount": call_amount,
            "min_raise": min_raise,
            "max_raise": max_raise,
        },
    )


@pytest.fixture
def client():
    c = Client("localhost", "9000", "Tester")
    c.player_id = "p1"
    c.strategy = RandomStrategy(random.Random(7))
    return c


def test_hand_completed_low_stack_requests_top_up(client):
    replies = client.handle_message(msg("hand_completed", {"updated_stacks": {"p1": 10}}))
    assert client.stack == 10
    assert replies == [{"type": "top_up", "payload": {}}]


def test_hand_completed_healthy_stack_no_reply(client):
    replies = client.handle_message(msg("hand_completed", {"updated_stacks": {"p1": 400}}))
    assert replies == []
    assert client.stack == 400


def test_hand_completed_other_player_only(client):
    replies = client.handle_message(msg("hand_completed", {"updated_stacks": {"p2": 5}}))
    assert replies == []
    assert client.stack == 0


def test_hand_completed_missing_stacks(client):
    with pytest.raises(ProtocolError):
        client.handle_message(msg("hand_completed", {}))


def test_top_up_ack_sets_stack(client):
    assert client.handle_message(msg("top_up_ack", {"new_stack": 400})) == []
    assert client.stack == 400


def test_top_up_ack_missing_field(client):
    with pytest.raises(ProtocolError):
        client.handle_message(msg("top_up_ack", {}))


@mock.patch("time.sleep")
def test_action_request_fold(sleep, client):
    replies = client.handle_message(action_request(["fold"]))
    assert replies == [
        {"type": "action", "payload": {"hand_id": "h1", "action": "fold", "amount": 0}}
    ]
    assert sleep.call_count == 1


@mock.patch("time.sleep")
def test_action_request_call_uses_call_amount(sleep, client):
    replies = client.handle_message(action_request(["call"], call_amount=12))
    assert replies[0]["payload"]["action"] == "call"
    assert replies[0]["payload"]["amount"] == 12


@mock.patch("time.sleep")
def test_action_request_raise_in_range(sleep, client):
    for _ in range(20):
        (reply,) = client.handle_message(action_request(["raise"], min_raise=8, max_raise=20))
        assert 8 <= reply["payload"]["amount"] <= 20


def test_action_request_missing_fields(client):
    bad = msg("action_request", {"hand_id": "h1"})
    with pytest.raises(ProtocolError):
        client.handle_message(bad)


@mock.patch("time.sleep")
def test_action_request_unknown_action(sleep, client):
    with pytest.raises(ProtocolError):
        client.handle_message(action_request(["check"]))


def test_error_message_raises(client):
    with pytest.raises(ProtocolError, match="Server error"):
        client.handle_message(msg("error", {"message": "bad"}))


def test_invalid_json_raises(client):
    with pytest.raises(ProtocolError, match="Failed to parse"):
        client.handle_message("{not json")


def test_missing_type_raises(client):
    with pytest.raises(ProtocolError):
        client.handle_message(json.dumps({"payload": {}}))


def test_unknown_and_informational_types(client):
    assert client.handle_message(msg("mystery")) == []
    assert client.handle_message(msg("hand_started", {})) == []
    assert client.handle_message(msg("action_applied", {})) == []


def test_run_full_session():
    ws = FakeSocket(
        [
            msg("welcome", {"player_id": "abc"}),
            msg("join_ack", {"seat": 1}),
            msg("hand_completed", {"updated_stacks": {"abc": 3}}),
        ]
    )
    c = Client("localhost", "9000", "Tester")
    with mock.patch("websocket.create_connection", return_value=ws) as connect:
        c.run()
    connect.assert_called_once_with("ws://localhost:9000/")
    assert c.player_id == "abc"
    assert c.seat == 1
    assert c.stack == 3
    assert ws.sent == [
        {"type": "join", "payload": {"name": "Tester"}},
        {"type": "top_up", "payload": {}},
    ]
    assert ws.closed


def test_run_rejects_wrong_welcome(capsys):
    ws = FakeSocket([msg("join_ack", {"seat": 0})])
    c = Client("localhost", "9000", "Tester")
    with mock.patch("websocket.create_connection", return_value=ws):
        c.run()
    assert ws.sent == []
    assert ws.closed
    assert "Expected welcome message" in capsys.readouterr().err


def test_run_stops_on_server_error():
    ws = FakeSocket(
        [
            msg("welcome", {"player_id": "abc"}),
            msg("join_ack", {"seat": 0}),
            msg("error", {}),
            msg("top_up_ack", {"new_stack": 400}),
        ]
    )
    c = Client("localhost", "9000", "Tester")
    with mock.patch("websocket.create_connection", return_value=ws):
        c.run()
    assert c.stack == 0
    assert len(ws.incoming) == 1
    assert ws.closed


def test_main_usage(capsys):
    assert main(["localhost"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_connection_failure(capsys):
    with mock.patch("websocket.create_connection", side_effect=ConnectionRefusedError("refused")):
        assert main(["localhost", "9000"]) == 0
    assert "Client error" in capsys.readouterr().err