import logging
from typing import Dict, List

from data.types.pot_types import Pot

logger = logging.getLogger(__name__)


class PotLogger:
    """Handles all logging operations for pot-related actions."""

    @staticmethod
    def log_new_side_pot(amount: int, eligible: List[str]) -> None:
        """Log creation of a new pot layer."""
        logger.debug(f"Created new pot: amount={amount}, eligible={eligible}")

    @staticmethod
    def log_side_pots_info(pots: List[Pot]) -> None:
        """Log detailed side pot information."""
        logger.info("Pots:")
        for i, pot in enumerate(pots, 1):
            players_str = ", ".join(pot.eligible_players)
            label = "Main pot" if i == 1 else f"Side pot {i - 1}"
            logger.info(f"  {label}: ${pot.amount} (Eligible: {players_str})")

    @staticmethod
    def log_pot_validation_error(
        total_bets: int,
        total_in_pots: int,
        pots: List[Pot],
        contributions: Dict[str, int],
    ) -> None:
        """Log pot validation errors."""
        logger.error(
            f"Pot mismatch - Total bets: {total_bets}, Total in pots: {total_in_pots}"
        )
        logger.error(
            f"Pots: {[(pot.amount, list(pot.eligible_players)) for pot in pots]}"
        )
        logger.error(f"Contributions: {contributions}")

    @staticmethod
    def log_payout_mismatch(total_pots: int, total_paid: int, winnings: Dict[str, int]) -> None:
        """Log a payout total that does not match the pots."""
        logger.error(f"Payout mismatch - Pots: {total_pots}, Paid: {total_paid}")
        logger.error(f"Winnings: {winnings}")

    @staticmethod
    def log_uncontested_pot(amount: int, eligible: List[str]) -> None:
        """Log a pot that no showdown player can win."""
        logger.error(
            f"Pot of ${amount} has no showdown player among eligible {eligible}"
        )

    @staticmethod
    def log_pot_award(
        pot_number: int, amount: int, winners: List[str], share: int, remainder: int
    ) -> None:
        """Log how a single pot was split.

        Args:
            pot_number: 1-based index of the pot in settlement order
            amount: Pot size
            winners: Ids of the players sharing the pot
            share: Equal share paid to every winner
            remainder: Odd chips paid on top of one winner's share
        """
        if len(winners) == 1:
            logger.debug(f"Pot {pot_number} (${amount}) awarded to {winners[0]}")
        else:
            logger.debug(
                f"Pot {pot_number} (${amount}) split {len(winners)} ways: "
                f"{winners} get ${share} each, remainder ${remainder}"
            )
