from typing import Dict, List, Mapping, Optional, Sequence

from config import settings
from data.types.pot_types import Pot
from exceptions import InvalidGameStateError, InvalidInputError
from loggers.pot_logger import PotLogger

from .chips import safe_add, safe_divide, safe_multiply, safe_subtract, safe_sum
from .evaluator import EvaluatedHand, find_winners


def calculate_side_pots(
    player_ids: Sequence[str], contributions: Sequence[int]
) -> List[Pot]:
    """
    Split the chips every player put in this hand into a main pot and side pots.

    Players are sorted by contribution (ascending, stable). Each distinct
    contribution level opens a new layer worth the level increase times the
    number of players who reached it; only those players are eligible.

    Args:
        player_ids: Every player who posted chips this hand, folded players
            included since their chips stay in the pot
        contributions: Total amount each player put in, same order as player_ids

    Returns:
        List[Pot]: Pot layers from the main pot upward. Each layer's eligible
            players are a subset of the layer below.

    Raises:
        InvalidInputError: If lengths differ, an id repeats, or an amount is
            negative or not an integer
        NumericOverflowError: If a pot amount leaves the chip range
        InvalidGameStateError: If the pots do not add up to the contributions

    Example:
        >>> calculate_side_pots(["p1", "p2", "p3"], [30, 50, 100])
        [Pot(amount=90, ...p1, p2, p3), Pot(amount=40, ...p2, p3), Pot(amount=50, ...p3)]
    """
    if len(player_ids) != len(contributions):
        raise InvalidInputError(
            f"Got {len(player_ids)} players but {len(contributions)} contributions"
        )
    if len(set(player_ids)) != len(player_ids):
        raise InvalidInputError(f"Duplicate player ids: {list(player_ids)}")
    for player_id, amount in zip(player_ids, contributions):
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidInputError(f"Contribution of {player_id} is not an integer")
        if amount < 0:
            raise InvalidInputError(
                f"Contribution of {player_id} cannot be negative: {amount}"
            )

    posted = dict(zip(player_ids, contributions))
    sorted_players = sorted(player_ids, key=lambda p: posted[p])

    pots: List[Pot] = []
    current_amount = 0
    for i, player_id in enumerate(sorted_players):
        amount = posted[player_id]
        increment = safe_subtract(amount, current_amount)
        if increment > 0:
            eligible = sorted_players[i:]
            pot_size = safe_multiply(increment, len(eligible))
            pots.append(Pot(amount=pot_size, eligible_players=eligible))
            PotLogger.log_new_side_pot(pot_size, eligible)
            current_amount = amount

    total_bets = safe_sum(contributions)
    total_in_pots = safe_sum(pot.amount for pot in pots)
    if total_in_pots != total_bets:
        PotLogger.log_pot_validation_error(total_bets, total_in_pots, pots, posted)
        raise InvalidGameStateError(
            f"Not all bets processed: bets={total_bets}, pots={total_in_pots}"
        )

    return pots


def award_pots(
    pots: Sequence[Pot],
    hands: Mapping[str, EvaluatedHand],
    remainder_order: Optional[Sequence[str]] = None,
) -> Dict[str, int]:
    """
    Pay out every pot to the best hand(s) among its eligible players.

    Players missing from ``hands`` (folded before showdown) cannot win, but
    their chips stay in the pots. Tied players split a pot evenly; the odd
    chips all go to one winner: the first in the pot's eligibility order, or
    the first in ``remainder_order`` when one is given.

    Args:
        pots: Pots from calculate_side_pots
        hands: Evaluated hand per showdown player
        remainder_order: Optional seat order (e.g. clockwise from the button)
            deciding who receives odd chips

    Returns:
        Dict[str, int]: Amount won per player; every player in ``hands`` is
            present, with 0 if they won nothing

    Raises:
        InvalidInputError: If a pot with chips has no showdown player, or the
            seat-order remainder policy is configured without an order, or the
            order names none of a split pot's winners
        InvalidGameStateError: If the payouts do not add up to the pots
    """
    if remainder_order is None and settings.remainder_policy == "seat_order":
        raise InvalidInputError("Seat-order remainder policy requires remainder_order")

    winnings: Dict[str, int] = {player_id: 0 for player_id in hands}

    for number, pot in enumerate(pots, 1):
        winners = find_winners(hands, pot.eligible_players)
        if not winners:
            if pot.amount == 0:
                continue
            PotLogger.log_uncontested_pot(pot.amount, list(pot.eligible_players))
            raise InvalidInputError(
                f"Pot {number} (${pot.amount}) has no eligible showdown player"
            )
        _distribute_pot(number, pot, winners, winnings, remainder_order)

    total_pots = safe_sum(pot.amount for pot in pots)
    total_paid = safe_sum(winnings.values())
    if total_paid != total_pots:
        PotLogger.log_payout_mismatch(total_pots, total_paid, winnings)
        raise InvalidGameStateError(
            f"Payouts do not match pots: pots={total_pots}, paid={total_paid}"
        )

    return winnings


def _distribute_pot(
    number: int,
    pot: Pot,
    winners: List[str],
    winnings: Dict[str, int],
    remainder_order: Optional[Sequence[str]],
) -> None:
    share = safe_divide(pot.amount, len(winners))
    remainder = safe_subtract(pot.amount, safe_multiply(share, len(winners)))

    lucky = winners[0]
    if remainder > 0 and remainder_order is not None:
        seated = [player_id for player_id in remainder_order if player_id in winners]
        if seated:
            lucky = seated[0]
        elif settings.remainder_policy == "seat_order":
            raise InvalidInputError(
                f"Pot {number}: no winner of {winners} appears in remainder_order"
            )

    for winner in winners:
        winnings[winner] = safe_add(winnings[winner], share)
    if remainder > 0:
        winnings[lucky] = safe_add(winnings[lucky], remainder)

    PotLogger.log_pot_award(number, pot.amount, winners, share, remainder)
