import random
from typing import List, Optional

from data.enums import Rank, Suit
from data.types.base_types import DeckState
from exceptions import InvalidInputError
from loggers.deck_logger import DeckLogger

from .card import Card

_system_random = random.SystemRandom()


def create_deck() -> List[Card]:
    """Return all 52 cards once, suit by suit (clubs first), ranks ascending."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle(deck: List[Card], rng: Optional[random.Random] = None) -> None:
    """
    Shuffle a deck in place.

    ``random.Random.shuffle`` is a Fisher-Yates pass, O(n) and uniform over
    all orderings. Without an explicit ``rng`` the OS entropy source is used;
    pass a seeded ``random.Random`` for reproducible deals in tests.
    """
    (rng or _system_random).shuffle(deck)
    DeckLogger.log_shuffle(len(deck))


def deal(deck: List[Card], count: int) -> List[Card]:
    """
    Remove and return the first ``count`` cards of the deck.

    If fewer than ``count`` cards remain, all remaining cards are returned.

    Raises:
        InvalidInputError: If count is negative or not an integer
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidInputError(f"Card count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidInputError(f"Cannot deal a negative number of cards: {count}")

    dealt = deck[:count]
    del deck[:count]
    DeckLogger.log_deal(count, len(dealt), len(deck))
    return dealt


class Deck:
    """A standard 52-card deck owned by a single hand, with dealt/burned tracking."""

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize a new deck with all 52 cards in canonical order."""
        self.rng = rng
        self.cards = create_deck()
        self.dealt_cards: List[Card] = []
        self.burned_cards: List[Card] = []
        self.last_action: Optional[str] = None

    def shuffle(self) -> None:
        shuffle(self.cards, self.rng)
        self.last_action = "shuffle"

    def deal(self, num: int = 1) -> List[Card]:
        """Deal up to ``num`` cards from the top of the deck."""
        dealt = deal(self.cards, num)
        self.dealt_cards.extend(dealt)
        self.last_action = f"deal_{len(dealt)}"
        return dealt

    def burn(self) -> Optional[Card]:
        """Discard the top card face down; returns None on an empty deck."""
        burned = deal(self.cards, 1)
        if not burned:
            return None
        self.burned_cards.extend(burned)
        self.last_action = "burn"
        DeckLogger.log_burn(str(burned[0]))
        return burned[0]

    def remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def __str__(self) -> str:
        return (
            f"Deck: {len(self.cards)} cards remaining, "
            f"{len(self.dealt_cards)} dealt, "
            f"{len(self.burned_cards)} burned"
        )

    def get_state(self) -> DeckState:
        """Get the current state of the deck."""
        return DeckState(
            cards_remaining=len(self.cards),
            cards_dealt=len(self.dealt_cards),
            cards_burned=len(self.burned_cards),
            last_action=self.last_action,
        )
