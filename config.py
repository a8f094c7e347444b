import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

REMAINDER_POLICIES = ("first_eligible", "seat_order")


@dataclass
class SettlementConfig:
    """
    Configuration parameters for hand settlement.

    Attributes:
        chip_bits (int): Width of the signed integer used for chip amounts (default: 32)
        log_level (str): Default level for the settlement loggers (default: "INFO")
        remainder_policy (str): Who receives the odd chips of a split pot.
            "first_eligible" gives them to the first winner in pot eligibility
            order; "seat_order" expects callers to pass a seat ordering
            (default: "first_eligible")

    Raises:
        ValueError: If any parameter is out of range
    """

    chip_bits: int = 32
    log_level: str = "INFO"
    remainder_policy: str = "first_eligible"

    def __post_init__(self):
        """Validate configuration parameters."""
        if not 8 <= self.chip_bits <= 64:
            raise ValueError("Chip width must be between 8 and 64 bits")
        self.log_level = self.log_level.upper()
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.remainder_policy not in REMAINDER_POLICIES:
            raise ValueError(f"Unknown remainder policy: {self.remainder_policy}")

    @property
    def chip_max(self) -> int:
        return 2 ** (self.chip_bits - 1) - 1

    @property
    def chip_min(self) -> int:
        return -(2 ** (self.chip_bits - 1))

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "SettlementConfig":
        """Build a config from SETTLEMENT_* environment variables.

        Values from a .env file are loaded first without overriding variables
        that are already set in the process environment.
        """
        load_dotenv(env_file)
        raw_bits = os.getenv("SETTLEMENT_CHIP_BITS", "32")
        try:
            chip_bits = int(raw_bits)
        except ValueError:
            raise ValueError(
                f"SETTLEMENT_CHIP_BITS must be an integer, got {raw_bits!r}"
            ) from None
        return cls(
            chip_bits=chip_bits,
            log_level=os.getenv("SETTLEMENT_LOG_LEVEL", "INFO"),
            remainder_policy=os.getenv(
                "SETTLEMENT_REMAINDER_POLICY", "first_eligible"
            ),
        )


settings = SettlementConfig.from_env()
