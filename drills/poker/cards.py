"""Card rank and suit definitions, plus token parsing.

Card tokens are a rank token followed by a single suit character,
e.g. "4S", "10H", "QD", "AC".

Aces are stored as rank 1 so that A-2-3-4-5 can be recognised as a straight.
Every other evaluation treats an ace as 14 (see ``Card.high_rank``).

This module provides:
- Rank and suit constants
- Card representation and parsing
- Rank counting and sorting helpers
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List


class Rank(IntEnum):
    """Card ranks as parsed. Ace is low here; use ``Card.high_rank`` to compare."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class Suit(IntEnum):
    """Card suits. Suits never rank against each other."""

    CLUB = 0
    SPADE = 1
    HEART = 2
    DIAMOND = 3


# Numeric value of an ace at either end of a straight
ACE_LOW = 1
ACE_HIGH = 14

# Rank tokens used in card strings
RANK_SYMBOLS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

# Suit characters used in card strings
SUIT_SYMBOLS = {
    Suit.CLUB: "C",
    Suit.SPADE: "S",
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
}

# Suit glyphs for display
SUIT_GLYPHS = {
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
}

# Token to rank/suit mappings (for parsing). "1" is an alias for the ace.
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["1"] = Rank.ACE
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


class CardParseError(ValueError):
    """Raised when a card token cannot be parsed."""

    pass


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Immutable and hashable. Cards order by parsed rank (ace low), then suit;
    hand evaluation never relies on this ordering.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_GLYPHS[self.suit]})"

    @property
    def high_rank(self) -> int:
        """Rank value with the ace counted high (14)."""
        if self.rank == Rank.ACE:
            return ACE_HIGH
        return int(self.rank)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like '4S' or '10H'.

        Args:
            s: Card token in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            CardParseError: If the token is not 2 or 3 characters long, or the
                rank or suit is unknown
        """
        if len(s) not in (2, 3):
            raise CardParseError(f"Card should be 2 or 3 characters: {s!r}")

        rank_str = s[:-1].upper()
        suit_char = s[-1].upper()

        if rank_str not in SYMBOL_TO_RANK:
            raise CardParseError(f"Invalid rank in card {s!r}: {rank_str}")
        if suit_char not in SYMBOL_TO_SUIT:
            raise CardParseError(f"Invalid suit in card {s!r}: {suit_char}")

        return cls(rank=SYMBOL_TO_RANK[rank_str], suit=SYMBOL_TO_SUIT[suit_char])


def parse_cards(s: str) -> List[Card]:
    """Parse cards from a space-separated string like "4S 5H 6C 8D KH"."""
    return [Card.from_string(token) for token in s.split()]


def get_rank_counts(ranks: Iterable[int]) -> Dict[int, int]:
    """Count occurrences of each rank value.

    Args:
        ranks: Rank values (ace-high or ace-low, the caller decides)

    Returns:
        Dict mapping rank value to count
    """
    counts: Dict[int, int] = {}
    for rank in ranks:
        counts[rank] = counts.get(rank, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck (13 ranks x 4 suits)."""
    return [Card(rank=rank, suit=suit) for rank in Rank for suit in Suit]


def sort_by_high_rank(cards: Iterable[Card]) -> List[Card]:
    """Sort cards from highest to lowest, counting the ace high."""
    return sorted(cards, key=lambda c: (c.high_rank, c.suit), reverse=True)
