"""Five-card hand classification, ordering, and winner selection.

Hand categories (strongest first):
- Straight flush: five consecutive ranks, all one suit
- Four of a kind: four cards of one rank + kicker
- Full house: three of one rank + two of another
- Flush: all one suit
- Straight: five consecutive ranks
- Three of a kind: three of one rank + two unmatched
- Two pair: two distinct pairs + kicker
- One pair: one pair + three unmatched
- High card: none of the above

Comparison rules:
- A hand category is ordered by (category strength, tie-break tuple)
- Aces count high (14) except in A-2-3-4-5, which is a 5-high straight
- Hands with equal categories fall back to all five ranks, grouped by
  multiplicity then value
"""

import logging
from dataclasses import dataclass
from enum import IntEnum, auto
from functools import total_ordering
from typing import List, Optional, Sequence, Tuple

from .cards import (
    ACE_HIGH,
    ACE_LOW,
    Card,
    CardParseError,
    get_rank_counts,
    parse_cards,
)

logger = logging.getLogger(__name__)

# Number of cards in an evaluated hand
CARDS_PER_HAND = 5


class HandType(IntEnum):
    """Hand categories, ordered by strength (higher value = stronger)."""

    HIGH_CARD = auto()
    ONE_PAIR = auto()
    TWO_PAIR = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()


# Display template for each category's tie-break fields
_DESCRIPTIONS = {
    HandType.STRAIGHT_FLUSH: "StraightFlush (top card: {})",
    HandType.FOUR_OF_A_KIND: "FourOfAKind (4 cards: {}, kicker: {})",
    HandType.FULL_HOUSE: "FullHouse (3 cards: {}, 2 cards: {})",
    HandType.FLUSH: "Flush (high card: {})",
    HandType.STRAIGHT: "Straight (high card: {})",
    HandType.THREE_OF_A_KIND: "ThreeOfAKind (3 cards: {}, high card: {})",
    HandType.TWO_PAIR: "TwoPair (first pair: {}, second pair: {}, other: {})",
    HandType.ONE_PAIR: "OnePair (pair: {}, top card: {})",
    HandType.HIGH_CARD: "HighCard (high: {})",
}

# Number of tie-break fields carried by each category
TIEBREAK_ARITY = {hand_type: template.count("{}") for hand_type, template in _DESCRIPTIONS.items()}


class HandParseError(ValueError):
    """Raised when a hand string does not describe exactly five valid cards."""

    pass


@dataclass(frozen=True, order=True)
class HandCategory:
    """A classified hand category with its tie-break payload.

    Field order makes the dataclass ordering the poker ordering: category
    strength first, then the tie-break tuple compared lexicographically.

    Attributes:
        hand_type: The category
        tiebreak: Numeric tie-break fields, most significant first
    """

    hand_type: HandType
    tiebreak: Tuple[int, ...]

    def __post_init__(self) -> None:
        expected = TIEBREAK_ARITY[self.hand_type]
        if len(self.tiebreak) != expected:
            raise ValueError(
                f"{self.hand_type.name} takes {expected} tie-break fields, got {len(self.tiebreak)}"
            )

    def __str__(self) -> str:
        return self.describe()

    def describe(self) -> str:
        """Human-readable form, e.g. 'OnePair (pair: 4, top card: 11)'."""
        return _DESCRIPTIONS[self.hand_type].format(*self.tiebreak)

    @classmethod
    def straight_flush(cls, top: int) -> "HandCategory":
        return cls(HandType.STRAIGHT_FLUSH, (top,))

    @classmethod
    def four_of_a_kind(cls, quad: int, kicker: int) -> "HandCategory":
        return cls(HandType.FOUR_OF_A_KIND, (quad, kicker))

    @classmethod
    def full_house(cls, triplet: int, pair: int) -> "HandCategory":
        return cls(HandType.FULL_HOUSE, (triplet, pair))

    @classmethod
    def flush(cls, high: int) -> "HandCategory":
        return cls(HandType.FLUSH, (high,))

    @classmethod
    def straight(cls, top: int) -> "HandCategory":
        return cls(HandType.STRAIGHT, (top,))

    @classmethod
    def three_of_a_kind(cls, triplet: int, kicker: int) -> "HandCategory":
        return cls(HandType.THREE_OF_A_KIND, (triplet, kicker))

    @classmethod
    def two_pair(cls, high_pair: int, low_pair: int, kicker: int) -> "HandCategory":
        return cls(HandType.TWO_PAIR, (high_pair, low_pair, kicker))

    @classmethod
    def one_pair(cls, pair: int, kicker: int) -> "HandCategory":
        return cls(HandType.ONE_PAIR, (pair, kicker))

    @classmethod
    def high_card(cls, high: int) -> "HandCategory":
        return cls(HandType.HIGH_CARD, (high,))


def _straight_top(high_ranks: List[int]) -> Optional[int]:
    """Return the top card of a straight, or None if the ranks are not one.

    Args:
        high_ranks: Five rank values, ace high, sorted descending

    Note:
        Checked twice: once with the ace high and once with it low, so
        A-2-3-4-5 comes back as a 5-high straight.
    """
    low_ranks = sorted((ACE_LOW if r == ACE_HIGH else r for r in high_ranks), reverse=True)
    for ranks in (high_ranks, low_ranks):
        if all(ranks[0] - rank == i for i, rank in enumerate(ranks)):
            return ranks[0]
    return None


def _grouped_ranks(high_ranks: List[int]) -> List[Tuple[int, int]]:
    """Group ranks as (rank, count), largest groups first, then highest rank."""
    counts = get_rank_counts(high_ranks)
    return sorted(counts.items(), key=lambda rc: (rc[1], rc[0]), reverse=True)


def classify(cards: Sequence[Card]) -> HandCategory:
    """Classify five cards into a hand category.

    Args:
        cards: Exactly five Card objects, in any order

    Returns:
        The strongest HandCategory the cards form

    Raises:
        HandParseError: If there are not exactly five cards
    """
    if len(cards) != CARDS_PER_HAND:
        raise HandParseError(f"A hand needs {CARDS_PER_HAND} cards, got {len(cards)}")

    high_ranks = sorted((c.high_rank for c in cards), reverse=True)
    groups = _grouped_ranks(high_ranks)
    shape = [count for _, count in groups]

    is_flush = len({c.suit for c in cards}) == 1
    straight_top = _straight_top(high_ranks)

    if is_flush and straight_top is not None:
        return HandCategory.straight_flush(straight_top)

    if shape[0] == 4:
        return HandCategory.four_of_a_kind(groups[0][0], groups[1][0])

    if shape == [3, 2]:
        return HandCategory.full_house(groups[0][0], groups[1][0])

    if is_flush:
        return HandCategory.flush(high_ranks[0])

    if straight_top is not None:
        return HandCategory.straight(straight_top)

    # Remaining groups are sorted by rank, so groups[1] is the highest kicker
    if shape[0] == 3:
        return HandCategory.three_of_a_kind(groups[0][0], groups[1][0])

    if shape[:2] == [2, 2]:
        return HandCategory.two_pair(groups[0][0], groups[1][0], groups[2][0])

    if shape[0] == 2:
        return HandCategory.one_pair(groups[0][0], groups[1][0])

    return HandCategory.high_card(high_ranks[0])


def _kicker_ranks(cards: Sequence[Card], category: HandCategory) -> Tuple[int, ...]:
    """All five ranks in comparison order, used once categories tie."""
    high_ranks = [c.high_rank for c in cards]
    if category.hand_type in (HandType.STRAIGHT, HandType.STRAIGHT_FLUSH):
        if category.tiebreak[0] != ACE_HIGH:
            high_ranks = [ACE_LOW if r == ACE_HIGH else r for r in high_ranks]
    ordered: List[int] = []
    for rank, count in _grouped_ranks(sorted(high_ranks, reverse=True)):
        ordered.extend([rank] * count)
    return tuple(ordered)


@total_ordering
@dataclass(frozen=True, eq=False)
class Hand:
    """A parsed five-card hand.

    Attributes:
        cards: The five cards, in input order
        category: Classified hand category
        text: The original hand string, kept as the same object that was passed in
    """

    cards: Tuple[Card, ...]
    category: HandCategory
    text: str

    @classmethod
    def from_string(cls, text: str) -> "Hand":
        """Parse and classify a hand string like "4S 5H 6C 8D KH".

        Raises:
            HandParseError: If the string does not hold exactly five cards
            CardParseError: If a card token is malformed
        """
        cards = tuple(parse_cards(text))
        if len(cards) != CARDS_PER_HAND:
            raise HandParseError(f"A hand needs {CARDS_PER_HAND} cards, got {len(cards)}: {text!r}")
        category = classify(cards)
        logger.debug("Parsed hand %r as %s", text, category)
        return cls(cards=cards, category=category, text=text)

    @property
    def rank_key(self) -> Tuple[HandCategory, Tuple[int, ...]]:
        """Total ordering key: category first, then all five ranks."""
        return (self.category, _kicker_ranks(self.cards, self.category))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.rank_key == other.rank_key

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.rank_key < other.rank_key

    def __hash__(self) -> int:
        return hash(self.rank_key)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return f"{self.text} -> {self.category}"


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        Positive if hand1 wins, negative if hand2 wins, zero on a split
    """
    return (hand1 > hand2) - (hand1 < hand2)


def winning_hands(hands: Sequence[str]) -> List[str]:
    """Given a list of poker hands, return the ones that win.

    Ties are kept: every hand comparing equal to the best one is returned.
    The returned strings are the same objects that were passed in, in input
    order.

    Args:
        hands: Hand strings, each five space-separated card tokens

    Returns:
        List of winning hand strings (empty if no hands were given)

    Raises:
        HandParseError, CardParseError: If any hand is malformed
    """
    if not hands:
        return []

    parsed = [Hand.from_string(text) for text in hands]
    best = max(parsed)
    winners = [hand.text for hand in parsed if hand == best]
    logger.debug("Best hand %s; %d of %d hands win", best.category, len(winners), len(parsed))
    return winners


__all__ = [
    "CARDS_PER_HAND",
    "TIEBREAK_ARITY",
    "HandType",
    "HandCategory",
    "HandParseError",
    "CardParseError",
    "Hand",
    "classify",
    "compare_hands",
    "winning_hands",
]
