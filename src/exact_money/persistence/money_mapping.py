"""Mapping between `Money` and the plain fields it is stored as.

A persisted amount is two columns: the raw amount and the currency code. Loading always goes
through `Money.from_raw`, so a stored row with a disallowed or unknown currency fails loudly
instead of producing a half-initialized value.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.money import Money

logger = logging.getLogger(__name__)


class MoneyRecord(BaseModel):
    """Storage shape of a `Money`: raw amount in minor units plus alphabetic currency code."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    raw_amount: StrictInt = Field(ge=Money.MIN_RAW_AMOUNT, le=Money.MAX_RAW_AMOUNT)
    currency_code: str = Field(pattern=r"^[A-Za-z]{3}$")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MoneyRecord:
        """Validate $data into a record.

        Raises:
            ValueError: If $data misses a field or holds values of the wrong shape.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ValueError(f"Cannot build `MoneyRecord` from $data ({dict(data)}): {e.error_count()} validation error(s)") from e


def money_to_record(money: Money) -> MoneyRecord:
    if not isinstance(money, Money):
        raise TypeError(f"$money must be a Money instance, but provided value is: {money!r}")
    return MoneyRecord(raw_amount=money.raw_amount, currency_code=money.currency.code)


def money_from_fields(raw_amount: int, currency_code: str) -> Money:
    """Rebuild `Money` from stored fields.

    Raises:
        ValueError: If $currency_code is not registered.
        InvalidCurrencyError: If the currency is disallowed by the active policy.
        ArithmeticOverflowError: If $raw_amount does not fit 64 bits.
    """
    currency = Currency.from_code(currency_code)
    money = Money.from_raw(raw_amount, currency)
    logger.debug(f"Loaded {money!r} from raw_amount={raw_amount}, currency_code='{currency_code}'")
    return money


def money_from_record(record: MoneyRecord) -> Money:
    return money_from_fields(record.raw_amount, record.currency_code)
