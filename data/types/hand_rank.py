from enum import Enum


class HandRank(Enum):
    """
    Poker hand categories from weakest (HIGH_CARD) to strongest (ROYAL_FLUSH).
    The value is the category weight; it is the primary key of hand strength.
    """
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    def __lt__(self, other):
        if not isinstance(other, HandRank):
            return NotImplemented
        return self.value < other.value

    @property
    def weight(self) -> int:
        return self.value

    def __str__(self):
        if self is HandRank.THREE_OF_KIND:
            return "Three of a Kind"
        if self is HandRank.FOUR_OF_KIND:
            return "Four of a Kind"
        return self.name.replace('_', ' ').title()
