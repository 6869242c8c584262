import pytest
from pydantic import ValidationError

from exact_money.domain.monetary.money import Money
from exact_money.domain.monetary.policy import default_policy
from exact_money.settings import MoneySettings, get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    for name in ("EXACT_MONEY_DISALLOWED_CURRENCY_CODES", "EXACT_MONEY_ROUNDING", "EXACT_MONEY_DECIMAL_PRECISION"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    default_policy.cache_clear()
    yield
    get_settings.cache_clear()
    default_policy.cache_clear()


def test_defaults(fresh_settings):
    settings = get_settings()
    assert settings.disallowed_currency_codes == frozenset({"RUB"})
    assert settings.rounding == "ROUND_HALF_UP"
    assert settings.decimal_precision == 50
    assert get_settings() is settings


def test_environment_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("EXACT_MONEY_ROUNDING", "ROUND_HALF_EVEN")
    monkeypatch.setenv("EXACT_MONEY_DISALLOWED_CURRENCY_CODES", '["rub", " xts"]')
    monkeypatch.setenv("EXACT_MONEY_DECIMAL_PRECISION", "60")

    settings = get_settings()
    assert settings.rounding == "ROUND_HALF_EVEN"
    assert settings.disallowed_currency_codes == frozenset({"RUB", "XTS"})
    assert settings.decimal_precision == 60


def test_rounding_setting_changes_money_rounding(fresh_settings, monkeypatch):
    monkeypatch.setenv("EXACT_MONEY_ROUNDING", "ROUND_HALF_EVEN")

    assert Money.kopecks(1).multiply(2.5) == Money.kopecks(2)
    assert Money.kopecks(1).multiply(3.5) == Money.kopecks(4)
    assert Money.rubles(0.025).raw_amount == 2


def test_invalid_values_are_rejected():
    with pytest.raises(ValidationError):
        MoneySettings(rounding="ROUND_SOMETIMES")
    with pytest.raises(ValidationError):
        MoneySettings(decimal_precision=10)


def test_settings_are_frozen():
    settings = MoneySettings()
    with pytest.raises(ValidationError):
        settings.rounding = "ROUND_DOWN"
