"""Poker hand evaluation.

This module provides:
- Card and rank definitions, token parsing (cards.py)
- Hand classification, ordering and winner selection (hands.py)
"""

from .cards import (
    Rank,
    Suit,
    Card,
    CardParseError,
    ACE_LOW,
    ACE_HIGH,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    parse_cards,
    get_rank_counts,
    create_standard_deck,
    sort_by_high_rank,
)

from .hands import (
    CARDS_PER_HAND,
    HandType,
    HandCategory,
    HandParseError,
    Hand,
    classify,
    compare_hands,
    winning_hands,
)

__all__ = [
    # Cards
    "Rank",
    "Suit",
    "Card",
    "CardParseError",
    "ACE_LOW",
    "ACE_HIGH",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "parse_cards",
    "get_rank_counts",
    "create_standard_deck",
    "sort_by_high_rank",
    # Hands
    "CARDS_PER_HAND",
    "HandType",
    "HandCategory",
    "HandParseError",
    "Hand",
    "classify",
    "compare_hands",
    "winning_hands",
]
