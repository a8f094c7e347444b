from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict

from data.types.pot_types import Pot


class SettlementResult(BaseModel):
    """Everything a table needs after a hand is settled.

    Attributes:
        hands: Evaluated best hand per showdown player
        pots: Pot layers, main pot first
        winnings: Amount won per showdown player
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    hands: Dict[str, Any]
    pots: List[Pot]
    winnings: Dict[str, int]

    @property
    def total_pot(self) -> int:
        from settlement.chips import safe_sum

        return safe_sum(pot.amount for pot in self.pots)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a display-friendly dictionary."""
        return {
            "hands": {
                player_id: {
                    "rank": str(hand.rank),
                    "label": hand.label,
                    "cards": [str(card) for card in hand.cards],
                    "score": hand.score,
                }
                for player_id, hand in self.hands.items()
            },
            "pots": [
                {"amount": pot.amount, "eligible_players": list(pot.eligible_players)}
                for pot in self.pots
            ],
            "winnings": dict(self.winnings),
        }
