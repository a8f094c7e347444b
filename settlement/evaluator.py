from itertools import combinations
from typing import (
    Callable,
    Iterable,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
)

from data.enums import Rank
from data.types.hand_rank import HandRank
from exceptions import InvalidInputError
from loggers.evaluator_logger import EvaluatorLogger

from .card import Card

# Weight of the hand category in a score. Tiebreakers occupy two decimal
# digits each below 10^9 and can reach 14.14e8, so the category must start
# at 10^10 to dominate every kicker combination.
CATEGORY_SCALE = 10**10
HAND_SIZE = 5

_WHEEL = [Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]


class EvaluatedHand(NamedTuple):
    """
    A named tuple containing the evaluation of a poker hand.

    Attributes:
        rank (HandRank): The hand category (HIGH_CARD to ROYAL_FLUSH)
        label (str): Human readable description of the hand
        cards (Tuple[Card, ...]): The five cards of the hand, rank-defining
            cards first, then kickers
        tiebreakers (Tuple[int, ...]): Rank values of ``cards`` in the same order
        score (int): Total-order key; higher is better, equal means a split
    """

    rank: HandRank
    label: str
    cards: Tuple[Card, ...]
    tiebreakers: Tuple[int, ...]
    score: int


class HandFeatures(NamedTuple):
    """Precomputed facts about five cards that category resolution works from."""

    groups: List[List[Card]]  # same-rank groups, by size desc then rank desc
    counts: List[int]
    is_flush: bool
    straight: Optional[List[Card]]  # straight order (wheel: 5-4-3-2-A) or None


def _is_royal(features: HandFeatures) -> bool:
    return (
        features.is_flush
        and features.straight is not None
        and features.straight[0].rank is Rank.ACE
        and features.straight[1].rank is Rank.KING
    )


# Checked top to bottom; the first matching category wins.
CATEGORY_RULES: List[Tuple[HandRank, Callable[[HandFeatures], bool]]] = [
    (HandRank.ROYAL_FLUSH, _is_royal),
    (HandRank.STRAIGHT_FLUSH, lambda f: f.is_flush and f.straight is not None),
    (HandRank.FOUR_OF_KIND, lambda f: f.counts[0] == 4),
    (HandRank.FULL_HOUSE, lambda f: f.counts[:2] == [3, 2]),
    (HandRank.FLUSH, lambda f: f.is_flush),
    (HandRank.STRAIGHT, lambda f: f.straight is not None),
    (HandRank.THREE_OF_KIND, lambda f: f.counts[0] == 3),
    (HandRank.TWO_PAIR, lambda f: f.counts[:2] == [2, 2]),
    (HandRank.ONE_PAIR, lambda f: f.counts[0] == 2),
    (HandRank.HIGH_CARD, lambda f: True),
]

_STRAIGHT_RANKS = (HandRank.ROYAL_FLUSH, HandRank.STRAIGHT_FLUSH, HandRank.STRAIGHT)


def evaluate_five(cards: Sequence[Card]) -> EvaluatedHand:
    """
    Evaluate a 5-card poker hand.

    Args:
        cards (Sequence[Card]): Exactly 5 distinct cards

    Returns:
        EvaluatedHand: Category, description, ordered cards, tiebreakers and score

    Hand Rankings (from best to worst):
        1. Royal Flush     - A, K, Q, J, 10 of the same suit
        2. Straight Flush  - Five sequential cards of the same suit
        3. Four of a Kind  - Four cards of the same rank
        4. Full House      - Three of a kind plus a pair
        5. Flush           - Any five cards of the same suit
        6. Straight        - Five sequential cards of mixed suits
        7. Three of a Kind - Three cards of the same rank
        8. Two Pair        - Two different pairs
        9. One Pair        - One pair of matching cards
        10. High Card      - Highest card when no other hand is made

    Note: A-2-3-4-5 (the wheel) is a five-high straight. Its cards are ordered
    5, 4, 3, 2, A so that it loses to every other straight.

    Raises:
        InvalidInputError: If the hand doesn't contain exactly 5 distinct cards

    Example:
        >>> hand = parse_cards("A♠ K♠ Q♠ J♠ 10♠")
        >>> evaluate_five(hand).rank
        <HandRank.ROYAL_FLUSH: 10>
    """
    cards = list(cards)
    if len(cards) != HAND_SIZE:
        EvaluatorLogger.log_invalid_hand("wrong card count", [str(c) for c in cards])
        raise InvalidInputError(f"Hand must contain exactly 5 cards, got {len(cards)}")
    if any(not isinstance(card, Card) for card in cards):
        raise InvalidInputError("All elements must be Card objects")
    if len(set(cards)) != HAND_SIZE:
        EvaluatorLogger.log_invalid_hand("duplicate cards", [str(c) for c in cards])
        raise InvalidInputError(f"Duplicate card found in {cards}")

    features = _features(cards)
    rank = next(rank for rank, matches in CATEGORY_RULES if matches(features))

    if rank in _STRAIGHT_RANKS:
        best = list(features.straight)
    else:
        best = [card for group in features.groups for card in group]

    tiebreakers = tuple(card.rank.value for card in best)
    return EvaluatedHand(
        rank=rank,
        label=_describe(rank, best),
        cards=tuple(best),
        tiebreakers=tiebreakers,
        score=calculate_score(rank, tiebreakers),
    )


def _features(cards: List[Card]) -> HandFeatures:
    ordered = sorted(cards, key=lambda c: c.rank.value, reverse=True)

    by_rank = {}
    for card in ordered:
        by_rank.setdefault(card.rank, []).append(card)
    groups = sorted(
        by_rank.values(), key=lambda g: (len(g), g[0].rank.value), reverse=True
    )

    return HandFeatures(
        groups=groups,
        counts=[len(g) for g in groups],
        is_flush=len({card.suit for card in cards}) == 1,
        straight=_detect_straight(ordered),
    )


def _detect_straight(ordered: List[Card]) -> Optional[List[Card]]:
    """Return the cards in straight order, or None. Expects descending rank order."""
    values = [card.rank.value for card in ordered]
    if all(values[i] - values[i + 1] == 1 for i in range(len(values) - 1)):
        return ordered
    if [card.rank for card in ordered] == _WHEEL:
        # Ace plays low
        return ordered[1:] + ordered[:1]
    return None


def calculate_score(rank: HandRank, tiebreakers: Sequence[int]) -> int:
    """Fold a category and up to five tiebreaker ranks into one comparable integer."""
    score = rank.weight * CATEGORY_SCALE
    for i, value in enumerate(tiebreakers[:HAND_SIZE]):
        score += value * 10 ** (8 - 2 * i)
    return score


def evaluate_best(hole: Sequence[Card], community: Sequence[Card]) -> EvaluatedHand:
    """
    Find the best 5-card hand from hole cards plus community cards.

    Args:
        hole: The player's hole cards (2 in Hold'em)
        community: The board (3 to 5 cards)

    Returns:
        EvaluatedHand: The highest scoring 5-card combination

    Raises:
        InvalidInputError: If fewer than 5 cards are available in total
    """
    return evaluate_cards(list(hole) + list(community))


def evaluate_cards(cards: Iterable[Card]) -> EvaluatedHand:
    """Return the highest scoring 5-card combination of a 5+ card pool.

    When several combinations share the top score the first one found is
    returned; only the score matters for comparison.
    """
    pool = list(cards)
    if len(pool) < HAND_SIZE:
        EvaluatorLogger.log_invalid_hand("not enough cards", [str(c) for c in pool])
        raise InvalidInputError(f"Need at least 5 cards, got {len(pool)}")

    best: Optional[EvaluatedHand] = None
    searched = 0
    for combo in combinations(pool, HAND_SIZE):
        searched += 1
        hand = evaluate_five(combo)
        if best is None or hand.score > best.score:
            best = hand

    EvaluatorLogger.log_best_hand(
        [str(c) for c in pool], searched, [str(c) for c in best.cards], best.label, best.score
    )
    return best


def compare_hands(a: EvaluatedHand, b: EvaluatedHand) -> int:
    """Return 1 if a beats b, -1 if b beats a, 0 for an exact tie."""
    return (a.score > b.score) - (a.score < b.score)


def find_winners(
    hands: Mapping[str, EvaluatedHand], candidates: Optional[Iterable[str]] = None
) -> List[str]:
    """
    Return every candidate holding the best hand, in candidate order.

    Args:
        hands: Evaluated hand per player id
        candidates: Player ids to consider; defaults to every key of ``hands``.
            Ids without an evaluated hand are skipped.
    """
    if candidates is None:
        candidates = hands.keys()
    contenders = [player_id for player_id in candidates if player_id in hands]
    if not contenders:
        return []

    best_score = max(hands[player_id].score for player_id in contenders)
    return [
        player_id for player_id in contenders if hands[player_id].score == best_score
    ]


def _describe(rank: HandRank, cards: List[Card]) -> str:
    """Human readable description, e.g. 'Full House, Aces over Kings'."""
    top = cards[0].rank
    if rank is HandRank.ROYAL_FLUSH:
        return str(rank)
    if rank in (HandRank.STRAIGHT_FLUSH, HandRank.STRAIGHT, HandRank.FLUSH):
        return f"{rank}, {top.display_name} high"
    if rank is HandRank.FULL_HOUSE:
        return f"{rank}, {_plural(top)} over {_plural(cards[3].rank)}"
    if rank is HandRank.TWO_PAIR:
        return f"{rank}, {_plural(top)} and {_plural(cards[2].rank)}"
    if rank in (HandRank.FOUR_OF_KIND, HandRank.THREE_OF_KIND, HandRank.ONE_PAIR):
        return f"{rank}, {_plural(top)}"
    return f"{rank}, {top.display_name}"


def _plural(rank: Rank) -> str:
    return f"{rank.display_name}s"
