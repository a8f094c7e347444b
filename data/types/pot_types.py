from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Pot(BaseModel):
    """One pot layer (main or side pot) and the players who may win it.

    Eligible players keep the ascending-contribution order the pot was built
    in; that order decides who receives the odd chips of a split.
    """

    model_config = ConfigDict(frozen=True)

    amount: int = Field(ge=0)
    eligible_players: Tuple[str, ...] = ()
