from __future__ import annotations

from decimal import Decimal, Overflow

from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_registry import RUR, USD
from exact_money.domain.monetary.errors import ArithmeticOverflowError, CurrencyMismatchError
from exact_money.domain.monetary.policy import default_policy
from exact_money.settings import get_settings
from exact_money.utils.math import ceil_to_multiple
from exact_money.utils.numeric_tools import DecimalLike, as_decimal, multiply_to_int


class Money:
    """Represents an exact monetary amount with currency.

    The amount is stored as an integer "raw amount": the value scaled by
    10 ** $currency.fraction_digits (cents for USD, kopecks for RUR). All arithmetic is integer
    arithmetic on raw amounts, so no floating-point error can creep in.

    Instances are immutable. Every operation returns a new `Money`.
    Supports raw amounts between `MIN_RAW_AMOUNT` and `MAX_RAW_AMOUNT` (signed 64-bit range).
    Every constructor validates the currency against `default_policy()`. Results of operations on an
    existing value keep its currency without checking the policy again, so a later policy change
    only affects newly constructed values.
    """

    __slots__ = ("_raw_amount", "_currency")

    # Value limits
    MAX_RAW_AMOUNT = 2**63 - 1
    MIN_RAW_AMOUNT = -(2**63)

    # region Init

    def __init__(self, raw_amount: int, currency: Currency):
        """Initialize Money from an already scaled raw amount.

        Args:
            raw_amount (int): Amount in minor units (e.g. cents).
            currency (Currency): Currency object.

        Raises:
            InvalidCurrencyError: If $currency is None or disallowed.
            TypeError: If $raw_amount is not an int or $currency is not a Currency.
            ArithmeticOverflowError: If $raw_amount is outside the signed 64-bit range.
        """
        # Raise: raw amount must be a plain integer
        if isinstance(raw_amount, bool) or not isinstance(raw_amount, int):
            raise TypeError(f"$raw_amount must be an int, but provided value is: {raw_amount!r}")

        currency = default_policy().validate(currency)
        self._check_range(raw_amount, "Money")

        object.__setattr__(self, "_raw_amount", raw_amount)
        object.__setattr__(self, "_currency", currency)

    @classmethod
    def from_major_units(cls, amount: DecimalLike, currency: Currency) -> Money:
        """Create Money from an amount in major units (e.g. dollars), rounding to minor units.

        Floats are converted through their shortest string form, so `0.03` means exactly 0.03.
        Rounding follows `MoneySettings.rounding` (ROUND_HALF_UP by default, ties away from zero).

        Raises:
            InvalidCurrencyError: If $currency is None or disallowed.
            TypeError: If $amount is not Decimal, int or float.
            ValueError: If $amount is NaN or infinite.
            ArithmeticOverflowError: If the scaled amount does not fit 64 bits.
        """
        currency = default_policy().validate(currency)
        decimal_amount = as_decimal(amount)
        raw_amount = cls._scale(decimal_amount, currency.minor_unit_factor, "from_major_units")
        return cls._build(raw_amount, currency, "from_major_units")

    @classmethod
    def from_integer_major_units(cls, amount: int, currency: Currency) -> Money:
        """Create Money from a whole number of major units. Scaling is exact."""
        currency = default_policy().validate(currency)

        # Raise: amount must be a plain integer
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"$amount must be an int, but provided value is: {amount!r}")

        return cls._build(amount * currency.minor_unit_factor, currency, "from_integer_major_units")

    @classmethod
    def from_exact_decimal(cls, amount: Decimal, currency: Currency) -> Money:
        """Create Money from a `Decimal` holding the raw amount.

        $amount is taken as minor units and truncated toward zero: `Decimal("10.99")` with RUR
        gives 10 kopecks. Digits after the decimal point are dropped without rounding.

        Raises:
            InvalidCurrencyError: If $currency is None or disallowed.
            ValueError: If $amount is None, NaN or infinite.
            TypeError: If $amount is not a Decimal.
        """
        # Raise: amount is required
        if amount is None:
            raise ValueError("$amount is required, but provided value is: None")

        currency = default_policy().validate(currency)

        # Raise: amount must be a Decimal
        if not isinstance(amount, Decimal):
            raise TypeError(f"$amount must be a Decimal, but provided value is: {amount!r}")

        # Raise: amount must be finite
        if not amount.is_finite():
            raise ValueError(f"$amount must be finite, but provided value is: {amount}")

        return cls._build(int(amount), currency, "from_exact_decimal")

    @classmethod
    def from_raw(cls, raw_amount: int, currency: Currency) -> Money:
        """Create Money from an already scaled raw amount. No re-scaling happens."""
        return cls(raw_amount, currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Zero amount of $currency. Useful as start value for `sum()`."""
        return cls(0, currency)

    # Shorthand for common currencies
    @classmethod
    def dollars(cls, amount: DecimalLike) -> Money:
        return cls.from_major_units(amount, USD)

    @classmethod
    def rubles(cls, amount: DecimalLike) -> Money:
        return cls.from_major_units(amount, RUR)

    @classmethod
    def kopecks(cls, amount: int) -> Money:
        return cls.from_raw(amount, RUR)

    # endregion

    # region Properties

    @property
    def raw_amount(self) -> int:
        """Amount in minor units (e.g. cents)."""
        return self._raw_amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def amount(self) -> Decimal:
        """Exact amount in major units, with exactly `fraction_digits` decimal places."""
        # Built from string, so the result is exact whatever the current decimal context
        return Decimal(f"{self._raw_amount}E-{self._currency.fraction_digits}")

    def is_zero(self) -> bool:
        return self._raw_amount == 0

    def is_positive(self) -> bool:
        return self._raw_amount > 0

    def is_negative(self) -> bool:
        return self._raw_amount < 0

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Return $self + $other.

        Raises:
            CurrencyMismatchError: If currencies differ.
            ArithmeticOverflowError: If the sum does not fit 64 bits.
        """
        self._check_same_currency(other, "add")
        return self._with_raw_amount(self._raw_amount + other._raw_amount, "add")

    def subtract(self, other: Money) -> Money:
        """Return $self - $other.

        Raises:
            CurrencyMismatchError: If currencies differ.
            ArithmeticOverflowError: If the difference does not fit 64 bits.
        """
        self._check_same_currency(other, "subtract")
        return self._with_raw_amount(self._raw_amount - other._raw_amount, "subtract")

    def multiply(self, multiplier: DecimalLike) -> Money:
        """Return $self * $multiplier, rounded to whole minor units.

        Rounding follows `MoneySettings.rounding` (ROUND_HALF_UP by default):
        1 kopeck * 2.4 = 2 kopecks, * 2.5 = 3 kopecks, * 2.6 = 3 kopecks.

        Raises:
            TypeError: If $multiplier is not Decimal, int or float.
            ValueError: If $multiplier is NaN or infinite.
            ArithmeticOverflowError: If the product does not fit 64 bits.
        """
        raw_amount = self._scale(Decimal(self._raw_amount), multiplier, "multiply")
        return self._with_raw_amount(raw_amount, "multiply")

    def negate(self) -> Money:
        return self._with_raw_amount(-self._raw_amount, "negate")

    def round_up(self, n: int) -> Money:
        """Round the amount up (toward positive infinity) to a multiple of 10 ** $n major units.

        For a 2-digit currency: `round_up(0)` rounds up to whole units, `round_up(1)` to tens,
        `round_up(3)` to thousands. Negative amounts move toward zero: -15.50 with `round_up(1)`
        gives -10.00.

        Args:
            n: Power of 10 to round up to. May be negative down to -fraction_digits
                (e.g. `round_up(-1)` rounds a 2-digit currency up to tenths).

        Raises:
            TypeError: If $n is not an int.
            ValueError: If $n + fraction_digits is negative.
            ArithmeticOverflowError: If the result does not fit 64 bits.
        """
        # Raise: n must be a plain integer
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"$n must be an int, but provided value is: {n!r}")

        exponent = n + self._currency.fraction_digits

        # Raise: cannot round to a fraction of a minor unit
        if exponent < 0:
            raise ValueError(f"Cannot call `round_up` because $n ({n}) is below -fraction_digits ({-self._currency.fraction_digits}) of {self._currency.code}")

        return self._with_raw_amount(ceil_to_multiple(self._raw_amount, 10**exponent), "round_up")

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number (returns Money)."""
        if isinstance(other, Money):
            return NotImplemented  # Money * Money doesn't make sense
        try:
            return self.multiply(other)
        except TypeError:
            return NotImplemented

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.negate() if self._raw_amount < 0 else self

    # endregion

    # region Comparison

    def can_compare(self, other: Money | None) -> bool:
        """Return True if $other is Money of the same currency. Never raises."""
        return isinstance(other, Money) and self._currency == other._currency

    def compare_to(self, other: Money) -> int:
        """Three-way comparison by raw amount: -1, 0 or 1.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other, "compare_to")
        if self._raw_amount < other._raw_amount:
            return -1
        if self._raw_amount == other._raw_amount:
            return 0
        return 1

    def greater_than(self, other: Money) -> bool:
        return self.compare_to(other) > 0

    def same_value_as(self, other: Money | None) -> bool:
        """Value equality that tolerates None (returns False)."""
        return isinstance(other, Money) and self._currency == other._currency and self._raw_amount == other._raw_amount

    # Comparison operators (same currency required)
    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        return self.same_value_as(other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        """Hash based on raw amount and currency code."""
        return hash((self._raw_amount, self._currency.code))

    # endregion

    # region Helpers

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `{operation}` because $other must be Money, but provided value is: {other!r}")
        if self._currency != other._currency:
            raise CurrencyMismatchError(f"Cannot call `{operation}` on different currencies: {self._currency.code} and {other._currency.code}")

    @classmethod
    def _check_range(cls, raw_amount: int, operation: str) -> None:
        # Raise: raw amount must fit a signed 64-bit integer
        if raw_amount > cls.MAX_RAW_AMOUNT or raw_amount < cls.MIN_RAW_AMOUNT:
            # Huge ints cannot be formatted past `sys.get_int_max_str_digits()`
            shown = raw_amount if raw_amount.bit_length() <= 128 else f"{'-' if raw_amount < 0 else ''}~2**{raw_amount.bit_length()}"
            raise ArithmeticOverflowError(f"Cannot call `{operation}` because resulting $raw_amount ({shown}) is outside [{cls.MIN_RAW_AMOUNT}, {cls.MAX_RAW_AMOUNT}]")

    @classmethod
    def _scale(cls, value: Decimal, factor: DecimalLike, operation: str) -> int:
        """Round $value * $factor to an int using the configured rounding.

        Raises:
            ArithmeticOverflowError: If the product exceeds the decimal exponent limit.
        """
        settings = get_settings()
        try:
            return multiply_to_int(value, factor, settings.rounding, settings.decimal_precision)
        except Overflow as e:
            raise ArithmeticOverflowError(f"Cannot call `{operation}` because the product of $value ({value}) and $factor ({factor}) is outside [{cls.MIN_RAW_AMOUNT}, {cls.MAX_RAW_AMOUNT}]") from e

    @classmethod
    def _build(cls, raw_amount: int, currency: Currency, operation: str) -> Money:
        """Create Money for a $currency that was already validated. Only the range is checked."""
        cls._check_range(raw_amount, operation)
        money = object.__new__(cls)
        object.__setattr__(money, "_raw_amount", raw_amount)
        object.__setattr__(money, "_currency", currency)
        return money

    def _with_raw_amount(self, raw_amount: int, operation: str) -> Money:
        return self._build(raw_amount, self._currency, operation)

    def __setattr__(self, name, value):
        raise AttributeError(f"`Money` is immutable, cannot set attribute '{name}'")

    def __reduce__(self):
        return (self.__class__, (self._raw_amount, self._currency))

    # endregion

    # String representations
    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self.amount:f} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self.amount:f}, {self._currency.code})"
