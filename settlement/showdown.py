from typing import Dict, Mapping, Optional, Sequence, Tuple

from data.types.settlement_types import SettlementResult
from exceptions import InvalidInputError, SettlementError
from loggers.pot_logger import PotLogger
from loggers.showdown_logger import ShowdownLogger

from .card import Card
from .chips import safe_sum
from .evaluator import EvaluatedHand, evaluate_best
from .pot import award_pots, calculate_side_pots


def settle_hand(
    contributions: Sequence[Tuple[str, int]],
    showdown: Mapping[str, Tuple[Sequence[Card], Sequence[Card]]],
    remainder_order: Optional[Sequence[str]] = None,
) -> SettlementResult:
    """
    Settle a finished hand: evaluate showdown hands, build pots, pay winners.

    Args:
        contributions: (player_id, total amount put in) for every player who
            posted chips this hand, folded players included
        showdown: player_id -> (hole_cards, community_cards) for every player
            who did not fold
        remainder_order: Optional seat order for odd chips of split pots

    Returns:
        SettlementResult: Evaluated hands, pots and per-player winnings.
            Chip balances are left to the caller (see chips.apply_winnings).

    Raises:
        InvalidInputError: If a showdown player posted no chips, or any
            card/contribution input is malformed
        NumericOverflowError: If an amount leaves the chip range
    """
    player_ids = [player_id for player_id, _ in contributions]
    amounts = [amount for _, amount in contributions]

    try:
        missing = [player_id for player_id in showdown if player_id not in player_ids]
        if missing:
            raise InvalidInputError(f"Showdown players without contributions: {missing}")

        hands: Dict[str, EvaluatedHand] = {
            player_id: evaluate_best(hole, community)
            for player_id, (hole, community) in showdown.items()
        }
        pots = calculate_side_pots(player_ids, amounts)

        ShowdownLogger.log_showdown_start(len(hands), safe_sum(pot.amount for pot in pots))
        PotLogger.log_side_pots_info(pots)
        for player_id, hand in hands.items():
            ShowdownLogger.log_player_hand(
                player_id, [str(card) for card in hand.cards], hand.label
            )

        winnings = award_pots(pots, hands, remainder_order)
    except SettlementError as e:
        ShowdownLogger.log_settlement_error(e)
        raise

    for player_id, amount in winnings.items():
        if amount > 0:
            ShowdownLogger.log_pot_win(player_id, amount)

    return SettlementResult(hands=hands, pots=pots, winnings=winnings)
