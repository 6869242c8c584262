from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise, so `0.03` becomes
    `Decimal("0.03")` and not `Decimal("0.0299999999999999988897769753748...")`.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to finite `Decimal`.

    Raises:
        TypeError: If $value is not a `Decimal`, `int` or `float` (bool is rejected too).
        ValueError: If $value is NaN or infinite.
    """
    # Raise: bool is an int subclass, but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        raise TypeError(f"$value must be Decimal, int or float, but provided value is: {value!r}")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"$value ({value!r}) cannot be converted to Decimal") from e

    # Raise: NaN and infinities have no monetary meaning
    if not result.is_finite():
        raise ValueError(f"$value must be finite, but provided value is: {value!r}")

    return result


def multiply_to_int(value: Decimal, factor: DecimalLike, rounding: str, precision: int) -> int:
    """Multiply $value by $factor and round the product to an integer.

    The product is computed exactly in a local decimal context (the global context is never
    touched), so rounding to an integer happens once.

    Args:
        value: Multiplicand.
        factor: Multiplier (converted with `as_decimal`).
        rounding: One of the `decimal` rounding constants (e.g. `decimal.ROUND_HALF_UP`).
        precision: Minimum significant digits of the local decimal context. Raised to the digit
            count of the exact product when the operands need more.

    Returns:
        The rounded product as `int`.

    Raises:
        decimal.Overflow: If the product exponent exceeds the context limit.
    """
    factor_decimal = as_decimal(factor)
    # Product of an m-digit and an n-digit coefficient has at most m + n digits
    exact_digits = len(value.as_tuple().digits) + len(factor_decimal.as_tuple().digits)
    with localcontext() as ctx:
        ctx.prec = max(precision, exact_digits)
        ctx.rounding = rounding
        product = value * factor_decimal
        return int(product.to_integral_value(rounding=rounding))


# Note: No 'as_float' or 'as_int' functions are provided.
# Use the Python builtin functions like `float()`, `int()` directly for efficient conversion
