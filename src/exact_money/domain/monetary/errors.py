class MoneyError(Exception):
    """Base class for errors raised by monetary values."""


class InvalidCurrencyError(MoneyError, ValueError):
    """Raised when a currency is missing or not allowed by the active `CurrencyPolicy`."""


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when a binary operation gets `Money` operands of different currencies."""


class ArithmeticOverflowError(MoneyError, OverflowError):
    """Raised when a raw amount leaves the signed 64-bit range."""
