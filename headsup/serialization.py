"""JSON encoding of cards, hand ranks and protocol messages."""

import json
from dataclasses import dataclass

from .card import Card
from .hand_ranking import HandRank, rank_to_string


def card_to_json(card):
    """Encode a card as its two-character notation."""
    return str(card)


def card_from_json(value):
    """Decode a card from its two-character notation."""
    if not isinstance(value, str):
        raise TypeError("Card must be a string")
    return Card.from_string(value)


def hand_rank_to_json(rank):
    """Encode a hand rank as its upper-case name."""
    return rank_to_string(rank)


def hand_rank_from_json(value):
    """Decode a hand rank from its upper-case name."""
    if not isinstance(value, str):
        raise TypeError("HandRank must be a string")
    try:
        return HandRank[value]
    except KeyError:
        raise ValueError("Invalid HandRank string") from None


def cards_to_json(cards):
    """Encode a sequence of cards as a list of strings."""
    return [card_to_json(card) for card in cards]


def cards_from_json(value):
    """Decode a list of card strings."""
    if not isinstance(value, list):
        raise TypeError("Cards must be an array")
    return [card_from_json(item) for item in value]


@dataclass
class WelcomeMessage:
    """Payload of the server's welcome message."""

    player_id: str

    def to_json(self):
        return {"player_id": self.player_id}

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict):
            raise TypeError("WelcomeMessage must be an object")
        player_id = data["player_id"]
        if not isinstance(player_id, str):
            raise TypeError("player_id must be a string")
        return cls(player_id=player_id)


def _to_json(obj):
    if isinstance(obj, Card):
        return card_to_json(obj)
    if isinstance(obj, HandRank):
        return hand_rank_to_json(obj)
    if isinstance(obj, WelcomeMessage):
        return obj.to_json()
    if isinstance(obj, (list, tuple)):
        return cards_to_json(obj)
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


_DECODERS = {
    Card: card_from_json,
    HandRank: hand_rank_from_json,
    WelcomeMessage: WelcomeMessage.from_json,
    list: cards_from_json,
}


def serialize(obj):
    """Encode a card, hand rank, card list or WelcomeMessage as compact JSON text."""
    return json.dumps(_to_json(obj), separators=(",", ":"))


def deserialize(text, kind):
    """Decode JSON text into kind: Card, HandRank, WelcomeMessage or list (of cards)."""
    try:
        decoder = _DECODERS[kind]
    except (KeyError, TypeError):
        raise TypeError(f"Cannot deserialize into {kind!r}") from None
    return decoder(json.loads(text))