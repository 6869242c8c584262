import pytest

from exact_money.domain.monetary.currency_registry import JPY, RUR
from exact_money.domain.monetary.errors import ArithmeticOverflowError, InvalidCurrencyError
from exact_money.domain.monetary.money import Money
from exact_money.persistence.money_mapping import MoneyRecord, money_from_fields, money_from_record, money_to_record


def test_record_keeps_raw_fields():
    record = money_to_record(Money.rubles(123.45))
    assert record == MoneyRecord(raw_amount=12345, currency_code="RUR")
    assert record.to_dict() == {"raw_amount": 12345, "currency_code": "RUR"}


def test_load_goes_through_validated_path():
    money = Money.from_raw(-1500, JPY)
    assert money_from_record(money_to_record(money)) == money
    assert money_from_fields(100, "rur") == Money.kopecks(100)


def test_load_rejects_disallowed_currency():
    with pytest.raises(InvalidCurrencyError):
        money_from_fields(100, "RUB")
    with pytest.raises(InvalidCurrencyError):
        money_from_record(MoneyRecord(raw_amount=100, currency_code="RUB"))


def test_load_rejects_unknown_currency_and_overflow():
    with pytest.raises(ValueError):
        money_from_fields(100, "ZZZ")
    with pytest.raises(ArithmeticOverflowError):
        money_from_fields(Money.MAX_RAW_AMOUNT + 1, "RUR")


def test_record_from_dict():
    assert MoneyRecord.from_dict({"raw_amount": 5, "currency_code": "USD"}).raw_amount == 5
    with pytest.raises(ValueError):
        MoneyRecord.from_dict({"raw_amount": 5})
    with pytest.raises(ValueError):
        MoneyRecord.from_dict({"raw_amount": 5.5, "currency_code": "USD"})
    with pytest.raises(ValueError):
        MoneyRecord.from_dict({"raw_amount": 5, "currency_code": "US"})
    with pytest.raises(ValueError):
        MoneyRecord.from_dict({"raw_amount": Money.MAX_RAW_AMOUNT + 1, "currency_code": "USD"})


def test_record_requires_money():
    with pytest.raises(TypeError):
        money_to_record(RUR)
