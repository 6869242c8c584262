__version__ = "0.1.0"

from exact_money.domain.monetary.currency import Currency, CurrencyType
from exact_money.domain.monetary.errors import ArithmeticOverflowError, CurrencyMismatchError, InvalidCurrencyError, MoneyError
from exact_money.domain.monetary.money import Money
from exact_money.domain.monetary.policy import CurrencyPolicy

__all__ = [
    "Currency",
    "CurrencyType",
    "CurrencyPolicy",
    "Money",
    "MoneyError",
    "InvalidCurrencyError",
    "CurrencyMismatchError",
    "ArithmeticOverflowError",
]
