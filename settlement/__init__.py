"""Showdown settlement core: hand evaluation, side pots and payouts."""

from .card import Card, parse_cards
from .chips import (
    apply_winnings,
    credit_chips,
    debit_chips,
    safe_add,
    safe_divide,
    safe_multiply,
    safe_subtract,
    safe_sum,
)
from .deck import Deck, create_deck, deal, shuffle
from .evaluator import (
    EvaluatedHand,
    compare_hands,
    evaluate_best,
    evaluate_cards,
    evaluate_five,
    find_winners,
)
from .pot import award_pots, calculate_side_pots
from .showdown import settle_hand

__all__ = [
    "Card",
    "parse_cards",
    "apply_winnings",
    "credit_chips",
    "debit_chips",
    "safe_add",
    "safe_divide",
    "safe_multiply",
    "safe_subtract",
    "safe_sum",
    "Deck",
    "create_deck",
    "deal",
    "shuffle",
    "EvaluatedHand",
    "compare_hands",
    "evaluate_best",
    "evaluate_cards",
    "evaluate_five",
    "find_winners",
    "award_pots",
    "calculate_side_pots",
    "settle_hand",
]
