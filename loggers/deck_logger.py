import logging

logger = logging.getLogger(__name__)


class DeckLogger:
    """Handles all logging operations for deck-related actions."""

    @staticmethod
    def log_shuffle(remaining_cards: int) -> None:
        """Log deck shuffling."""
        if remaining_cards != 52:
            logger.info(f"Shuffling deck with {remaining_cards} cards")
        else:
            logger.debug("Shuffling full deck")

    @staticmethod
    def log_deal(requested: int, dealt: int, remaining: int) -> None:
        """Log cards leaving the deck."""
        logger.debug(f"Dealt {dealt} card(s), {remaining} remaining")
        if dealt < requested:
            logger.warning(
                f"Requested {requested} cards but only {dealt} were left in the deck"
            )

    @staticmethod
    def log_burn(card: str) -> None:
        """Log a burned card."""
        logger.debug(f"Burned {card}")
