"""Heads-up Texas hold'em: cards, hand ranking, betting rules, pots, hand flow and a random-strategy bot client."""

__version__ = "0.1.0"