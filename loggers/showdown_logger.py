import logging
from typing import List

logger = logging.getLogger(__name__)


class ShowdownLogger:
    """Handles all logging operations for showdown-related actions."""

    @staticmethod
    def log_showdown_start(players: int, total_pot: int) -> None:
        """Log the start of showdown phase."""
        logger.info(f"=== Showdown: {players} player(s), ${total_pot} in play ===")

    @staticmethod
    def log_player_hand(player_id: str, cards: List[str], label: str) -> None:
        """Log a player's best hand at showdown."""
        logger.info(f"{player_id} shows {' '.join(cards)}: {label}")

    @staticmethod
    def log_pot_win(player_id: str, amount: int) -> None:
        """Log a player's total winnings for the hand."""
        logger.info(f"{player_id} wins ${amount}")

    @staticmethod
    def log_settlement_error(error: Exception) -> None:
        """Log errors during settlement."""
        logger.error(f"Error settling hand: {str(error)}")
