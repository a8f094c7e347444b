from enum import Enum


class Suit(str, Enum):
    """Card suits in canonical deck order."""

    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(Enum):
    """
    Card ranks from TWO (2) to ACE (14).
    Ace is always high here; the evaluator handles the A-2-3-4-5 wheel.
    """

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
    ACE = 14

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    @property
    def symbol(self) -> str:
        return _FACE_SYMBOLS.get(self.value, str(self.value))

    @property
    def display_name(self) -> str:
        """Name used in hand descriptions, e.g. 'Queen' or '7'."""
        return _FACE_NAMES.get(self.value, str(self.value))


_FACE_SYMBOLS = {11: "J", 12: "Q", 13: "K", 14: "A"}
_FACE_NAMES = {14: "Ace", 13: "King", 12: "Queen", 11: "Jack"}
