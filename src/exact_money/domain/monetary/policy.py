from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache

from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.errors import InvalidCurrencyError
from exact_money.settings import get_settings

logger = logging.getLogger(__name__)


class CurrencyPolicy:
    """Decides which currencies a `Money` value may be constructed with.

    The rule is a plain set of disallowed currency codes. Every other registered currency is
    accepted. The default policy disallows RUB, so ruble amounts always use the domestic RUR code.

    Attributes:
        disallowed_codes (frozenset[str]): Upper-case codes that are rejected.
    """

    __slots__ = ("_disallowed_codes",)

    def __init__(self, disallowed_codes: Iterable[str] = ()):
        """Initialize the policy.

        Args:
            disallowed_codes: Currency codes to reject (case-insensitive).

        Raises:
            TypeError: If any code is not a string.
        """
        codes = list(disallowed_codes)
        for code in codes:
            if not isinstance(code, str):
                raise TypeError(f"$disallowed_codes must contain only strings, but provided value contains: {code!r}")
        self._disallowed_codes = frozenset(code.upper().strip() for code in codes)

    @property
    def disallowed_codes(self) -> frozenset[str]:
        return self._disallowed_codes

    def is_allowed(self, currency: Currency | None) -> bool:
        """Return True when $currency is present and not disallowed."""
        return isinstance(currency, Currency) and currency.code not in self._disallowed_codes

    def validate(self, currency: Currency | None) -> Currency:
        """Return $currency unchanged if it is allowed.

        Raises:
            InvalidCurrencyError: If $currency is None or its code is disallowed.
            TypeError: If $currency is not a `Currency` instance.
        """
        # Raise: currency is required
        if currency is None:
            raise InvalidCurrencyError("$currency is required, but provided value is: None")

        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        # Raise: currency must not be disallowed by this policy
        if currency.code in self._disallowed_codes:
            raise InvalidCurrencyError(f"Wrong currency: {currency.code} (disallowed codes: {sorted(self._disallowed_codes)})")

        return currency

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyPolicy):
            return False
        return self._disallowed_codes == other._disallowed_codes

    def __hash__(self) -> int:
        return hash(self._disallowed_codes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(disallowed_codes={sorted(self._disallowed_codes)})"


@lru_cache()
def default_policy() -> CurrencyPolicy:
    """Return the policy built from `MoneySettings`, cached.

    Call `default_policy.cache_clear()` (together with `get_settings.cache_clear()`) after
    changing the configuration.
    """
    policy = CurrencyPolicy(get_settings().disallowed_currency_codes)
    logger.debug(f"Built default {policy!r}")
    return policy
