"""Overflow-checked chip arithmetic.

Every money computation in the settlement core goes through these helpers.
Results are exact or an error is raised; nothing wraps, saturates or is
silently truncated. The representable range is the signed integer width
configured in ``config.settings.chip_bits``.
"""

from typing import Dict, Iterable, Mapping, Tuple

from config import settings
from exceptions import (
    DivideByZeroError,
    InsufficientFundsError,
    InvalidInputError,
    NumericOverflowError,
)


def chip_bounds() -> Tuple[int, int]:
    """Return the (min, max) chip values representable with the configured width."""
    return settings.chip_min, settings.chip_max


def _checked(value: int, expression: str) -> int:
    low, high = chip_bounds()
    if value < low or value > high:
        raise NumericOverflowError(
            f"Chip arithmetic overflow: {expression} is outside [{low}, {high}]"
        )
    return value


def _operands(a: int, b: int) -> None:
    for value in (a, b):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(f"Chip amounts must be integers, got {value!r}")
        _checked(value, repr(value))


def safe_add(a: int, b: int) -> int:
    """Add two chip amounts, raising NumericOverflowError outside the chip range."""
    _operands(a, b)
    return _checked(a + b, f"{a} + {b}")


def safe_subtract(a: int, b: int) -> int:
    """Subtract b from a, raising NumericOverflowError outside the chip range."""
    _operands(a, b)
    return _checked(a - b, f"{a} - {b}")


def safe_multiply(a: int, b: int) -> int:
    """Multiply two chip amounts, raising NumericOverflowError outside the chip range."""
    _operands(a, b)
    return _checked(a * b, f"{a} * {b}")


def safe_divide(a: int, b: int) -> int:
    """
    Floor-divide a by b.

    Raises:
        DivideByZeroError: If b is zero
        NumericOverflowError: If the quotient is not representable (MIN // -1)
    """
    _operands(a, b)
    if b == 0:
        raise DivideByZeroError(f"Chip division by zero: {a} / {b}")
    return _checked(a // b, f"{a} // {b}")


def safe_sum(values: Iterable[int]) -> int:
    """Sum chip amounts with an overflow check after every step."""
    total = 0
    for value in values:
        total = safe_add(total, value)
    return total


def validate_increment(amount: int) -> None:
    """Check that a chip credit is not negative."""
    if amount < 0:
        raise InvalidInputError(f"Chip increment cannot be negative: {amount}")


def validate_decrement(current_chips: int, amount: int) -> None:
    """Check that a chip debit is not negative and does not exceed the balance."""
    if amount < 0:
        raise InvalidInputError(f"Chip decrement cannot be negative: {amount}")
    if amount > current_chips:
        raise InsufficientFundsError(
            f"Cannot deduct {amount} chips from a balance of {current_chips}"
        )


def credit_chips(current_chips: int, amount: int) -> int:
    validate_increment(amount)
    return safe_add(current_chips, amount)


def debit_chips(current_chips: int, amount: int) -> int:
    validate_decrement(current_chips, amount)
    return safe_subtract(current_chips, amount)


def apply_winnings(
    balances: Mapping[str, int], winnings: Mapping[str, int]
) -> Dict[str, int]:
    """
    Credit settlement payouts to player balances.

    Args:
        balances: Current chip balance per player id
        winnings: Amount won per player id, as returned by award_pots

    Returns:
        Dict[str, int]: New balance map; the input mapping is not modified

    Raises:
        InvalidInputError: If a payout names a player without a balance
        NumericOverflowError: If a balance would leave the chip range
    """
    unknown = [player_id for player_id in winnings if player_id not in balances]
    if unknown:
        raise InvalidInputError(f"Payouts for unknown players: {unknown}")

    updated = dict(balances)
    for player_id, amount in winnings.items():
        updated[player_id] = credit_chips(updated[player_id], amount)
    return updated
