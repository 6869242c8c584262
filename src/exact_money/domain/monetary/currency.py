from __future__ import annotations

import logging
from enum import Enum
from typing import Dict

logger = logging.getLogger(__name__)


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


class Currency:
    """Represents a currency with code, fraction digits, and metadata.

    Attributes:
        code (str): Alphabetic currency code (e.g., "USD", "RUR").
        numeric_code (int | None): ISO 4217 numeric code (e.g., 840 for USD), None for non-ISO units.
        fraction_digits (int): Number of minor-unit digits (0-18), e.g. 2 for cents.
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY).
    """

    # Class-level registry for predefined currencies
    _registry: Dict[str, "Currency"] = {}

    __slots__ = ("_code", "_numeric_code", "_fraction_digits", "_name", "_currency_type")

    def __init__(
        self,
        code: str,
        numeric_code: int | None,
        fraction_digits: int,
        name: str,
        currency_type: CurrencyType = CurrencyType.FIAT,
    ):
        """Initialize a Currency instance.

        Args:
            code (str): Alphabetic currency code (e.g., "USD", "RUR").
            numeric_code (int | None): ISO 4217 numeric code, or None.
            fraction_digits (int): Number of minor-unit digits (0-18).
            name (str): Full currency name.
            currency_type (CurrencyType): Type of currency.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If currency_type is not CurrencyType instance.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if numeric_code is not None and (isinstance(numeric_code, bool) or not isinstance(numeric_code, int) or not 0 < numeric_code < 1000):
            raise ValueError(f"$numeric_code must be None or an integer between 1 and 999, but provided value is: {numeric_code}")

        if isinstance(fraction_digits, bool) or not isinstance(fraction_digits, int) or fraction_digits < 0 or fraction_digits > 18:
            raise ValueError(f"$fraction_digits must be an integer between 0 and 18, but provided value is: {fraction_digits}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code.upper().strip()
        self._numeric_code = numeric_code
        self._fraction_digits = fraction_digits
        self._name = name.strip()
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        """Get the alphabetic currency code."""
        return self._code

    @property
    def numeric_code(self) -> int | None:
        """Get the ISO 4217 numeric code."""
        return self._numeric_code

    @property
    def fraction_digits(self) -> int:
        """Get the number of minor-unit digits."""
        return self._fraction_digits

    @property
    def minor_unit_factor(self) -> int:
        """Number of minor units in one major unit (10 ** fraction_digits)."""
        return 10**self._fraction_digits

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        existing = cls._registry.get(currency.code)
        if existing is not None and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        if existing is not None and repr(existing) != repr(currency):
            logger.warning(f"Currency registry entry '{currency.code}' replaced: {existing!r} -> {currency!r}")

        cls._registry[currency.code] = currency
        logger.debug(f"Registered currency {currency!r}")

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        """Get currency from registry by code.

        Args:
            code (str): Alphabetic currency code to look up (case-insensitive).

        Returns:
            Currency: The currency instance.

        Raises:
            TypeError: If $code is not a string.
            ValueError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {sorted(cls._registry.keys())}")

        return cls._registry[code]

    @classmethod
    def registered_codes(cls) -> list[str]:
        """Return the sorted codes of all registered currencies."""
        return sorted(cls._registry.keys())

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.numeric_code}, {self.fraction_digits}, '{self.name}', {self.currency_type})"
