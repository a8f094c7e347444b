class SettlementError(Exception):
    """Base exception for hand settlement errors."""

    pass


class InvalidInputError(SettlementError, ValueError):
    """Raised when arguments are malformed (card counts, lengths, amounts)."""

    pass


class ChipArithmeticError(SettlementError, ArithmeticError):
    """Raised when a checked chip operation cannot produce an exact result."""

    pass


class NumericOverflowError(ChipArithmeticError, OverflowError):
    """Raised when a chip operation leaves the representable range."""

    pass


class DivideByZeroError(ChipArithmeticError, ZeroDivisionError):
    """Raised when a chip amount is divided by zero."""

    pass


class InsufficientFundsError(SettlementError):
    """Raised when player doesn't have enough chips."""

    pass


class InvalidGameStateError(SettlementError):
    """Raised when a settlement result would break chip conservation."""

    pass
