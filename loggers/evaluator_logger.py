import logging
from typing import List

logger = logging.getLogger(__name__)


class EvaluatorLogger:
    """Handles all logging operations for hand evaluation."""

    @staticmethod
    def log_invalid_hand(reason: str, cards: List[str]) -> None:
        """Log a rejected evaluation input."""
        logger.error(f"Cannot evaluate hand {cards}: {reason}")

    @staticmethod
    def log_best_hand(
        pool: List[str], combinations: int, best_cards: List[str], label: str, score: int
    ) -> None:
        """Log the result of a best-of-pool search."""
        logger.debug(
            f"Best of {combinations} combinations from {pool}: "
            f"{label} {best_cards} (score {score})"
        )
