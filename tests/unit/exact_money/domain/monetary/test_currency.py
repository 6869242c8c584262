import pytest

from exact_money.domain.monetary.currency import Currency, CurrencyType
from exact_money.domain.monetary.currency_registry import BTC, JPY, KWD, RUB, RUR, USD


@pytest.fixture
def isolated_registry(monkeypatch):
    monkeypatch.setattr(Currency, "_registry", dict(Currency._registry))


def test_predefined_currencies():
    assert (USD.code, USD.numeric_code, USD.fraction_digits) == ("USD", 840, 2)
    assert (RUR.numeric_code, RUB.numeric_code) == (810, 643)
    assert JPY.fraction_digits == 0
    assert KWD.minor_unit_factor == 1000
    assert USD.minor_unit_factor == 100
    assert BTC.currency_type == CurrencyType.CRYPTO and BTC.numeric_code is None
    assert USD.currency_type == CurrencyType.FIAT


def test_from_code_is_case_insensitive():
    assert Currency.from_code("usd") is USD
    assert Currency.from_code(" RUR ") is RUR
    assert "RUB" in Currency.registered_codes()


def test_from_code_unknown():
    with pytest.raises(ValueError):
        Currency.from_code("ZZZ")
    with pytest.raises(TypeError):
        Currency.from_code(840)


def test_register(isolated_registry):
    xts = Currency("xts", 963, 2, "Testing Code")
    Currency.register(xts)
    assert Currency.from_code("XTS") is xts

    with pytest.raises(ValueError):
        Currency.register(Currency("XTS", 963, 0, "Testing Code"))

    replacement = Currency("XTS", 963, 0, "Testing Code")
    Currency.register(replacement, overwrite=True)
    assert Currency.from_code("XTS").fraction_digits == 0

    with pytest.raises(TypeError):
        Currency.register("XTS")


@pytest.mark.parametrize(
    "args",
    [
        ["", 840, 2, "US Dollar"],
        ["USD", 1000, 2, "US Dollar"],
        ["USD", 840, -1, "US Dollar"],
        ["USD", 840, 19, "US Dollar"],
        ["USD", 840, 2, " "],
    ],
)
def test_invalid_currency_arguments(args):
    with pytest.raises(ValueError):
        Currency(*args)


def test_currency_type_must_be_enum():
    with pytest.raises(TypeError):
        Currency("USD", 840, 2, "US Dollar", "FIAT")


def test_equality_by_code():
    assert Currency("usd", 840, 2, "Dollar", CurrencyType.FIAT) == USD
    assert hash(Currency("USD", 840, 2, "Dollar")) == hash(USD)
    assert RUR != RUB
    assert USD != "USD"
    assert str(RUR) == "RUR"
