from dataclasses import dataclass
from typing import Iterable, List, Union

from data.enums import Rank, Suit
from exceptions import InvalidInputError

_RANK_LABELS = {rank.symbol: rank for rank in Rank}
_RANK_LABELS["T"] = Rank.TEN

_SUIT_LABELS = {suit.symbol: suit for suit in Suit}
_SUIT_LABELS.update({suit.value[0]: suit for suit in Suit})


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Cards are plain values: two cards are equal when rank and suit match,
    and they can be used as dict keys or set members.

    Attributes:
        rank (Rank): The card's rank (TWO through ACE)
        suit (Suit): The card's suit
    """

    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, label: str) -> "Card":
        """
        Build a card from a short label such as "A♠", "10♥", "Td" or "as".

        Raises:
            InvalidInputError: If the label does not name a card
        """
        text = label.strip() if isinstance(label, str) else ""
        if len(text) < 2:
            raise InvalidInputError(f"Invalid card label: {label!r}")

        rank = _RANK_LABELS.get(text[:-1].upper())
        suit = _SUIT_LABELS.get(text[-1].lower())
        if rank is None or suit is None:
            raise InvalidInputError(f"Invalid card label: {label!r}")
        return cls(rank, suit)

    @classmethod
    def of(cls, suit: str, rank: str) -> "Card":
        """Build a card from English names, e.g. Card.of("spades", "ace")."""
        try:
            return cls(Rank[rank.upper()], Suit[suit.upper()])
        except (KeyError, AttributeError):
            raise InvalidInputError(f"Invalid card: {rank} of {suit}") from None

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self})"


def parse_cards(labels: Union[str, Iterable[str]]) -> List[Card]:
    """Parse a sequence of labels, or one space-separated string."""
    if isinstance(labels, str):
        labels = labels.split()
    return [Card.parse(label) for label in labels]
