from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Names match the constants of the `decimal` module (`decimal.ROUND_HALF_UP == "ROUND_HALF_UP"`)
RoundingName = Literal[
    "ROUND_HALF_UP",
    "ROUND_HALF_EVEN",
    "ROUND_HALF_DOWN",
    "ROUND_UP",
    "ROUND_DOWN",
    "ROUND_CEILING",
    "ROUND_FLOOR",
    "ROUND_05UP",
]


class MoneySettings(BaseSettings):
    """Runtime configuration for constructing and computing `Money` values.

    Every field can be overridden by an environment variable prefixed with `EXACT_MONEY_`,
    e.g. `EXACT_MONEY_ROUNDING=ROUND_HALF_EVEN`. Set-valued fields are read as JSON:
    `EXACT_MONEY_DISALLOWED_CURRENCY_CODES='["RUB", "XTS"]'`.

    Attributes:
        disallowed_currency_codes: Currency codes that no `Money` may be constructed with.
            Defaults to RUB (ISO 643), because money is kept in the domestic RUR code (810).
        rounding: Rounding used when a float/decimal amount is scaled to raw units and when
            a raw amount is multiplied by a scalar.
        decimal_precision: Significant digits of the local decimal context used for those
            computations.
    """

    model_config = SettingsConfigDict(env_prefix="EXACT_MONEY_", frozen=True)

    disallowed_currency_codes: frozenset[str] = Field(default=frozenset({"RUB"}))
    rounding: RoundingName = "ROUND_HALF_UP"
    decimal_precision: int = Field(default=50, ge=28, le=1000)

    @field_validator("disallowed_currency_codes")
    @classmethod
    def _normalize_codes(cls, codes: frozenset[str]) -> frozenset[str]:
        return frozenset(code.upper().strip() for code in codes)


@lru_cache()
def get_settings() -> MoneySettings:
    """Return cached settings. Call `get_settings.cache_clear()` after changing the environment."""
    settings = MoneySettings()
    logger.info(
        f"Loaded MoneySettings: disallowed_currency_codes={sorted(settings.disallowed_currency_codes)}, "
        f"rounding={settings.rounding}, decimal_precision={settings.decimal_precision}"
    )
    return settings
