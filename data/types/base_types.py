from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class DeckState:
    """Represents the current state of the deck."""

    cards_remaining: int
    cards_dealt: int = 0
    cards_burned: int = 0
    last_action: Optional[str] = None  # "shuffle", "deal_2", "burn", ...

    def to_dict(self) -> Dict[str, Any]:
        """Convert deck state to dictionary representation."""
        return {
            "cards": {
                "remaining": self.cards_remaining,
                "dealt": self.cards_dealt,
                "burned": self.cards_burned,
                "total": self.cards_remaining + self.cards_dealt + self.cards_burned,
            },
            "status": {
                "last_action": self.last_action,
            },
        }
