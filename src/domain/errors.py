"""Domain error taxonomy."""


class LedgerError(Exception):
    """Base class for ledger engine errors."""


class InvalidDateFormat(LedgerError, ValueError):
    """Raised when a date string matches none of the accepted formats."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Unrecognized date format: {text!r}")
        self.text = text


class DivisionUndefined(LedgerError, ArithmeticError):
    """Raised when shares are requested over a zero total."""


class ConfigurationMismatch(LedgerError):
    """Raised when a periodicity value cannot advance a date."""

    def __init__(self, period) -> None:
        super().__init__(f"Period does not advance dates: {period!r}")
        self.period = period


class InvalidTransactionInput(LedgerError, ValueError):
    """Raised when submitted transaction fields are unusable."""


__all__ = [
    "LedgerError",
    "InvalidDateFormat",
    "DivisionUndefined",
    "ConfigurationMismatch",
    "InvalidTransactionInput",
]
