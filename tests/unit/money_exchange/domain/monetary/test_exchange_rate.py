import logging
from decimal import Decimal

import pytest

from money_exchange.domain.monetary.currency import Currency
from money_exchange.domain.monetary.exchange_rate import ExchangeRate, ExchangeTable
from money_exchange.domain.monetary.exchange_rate_registry import DEFAULT_EXCHANGE_TABLE


def test_ratio_is_converted_to_decimal():
    rate = ExchangeRate(Currency.USD, "0.0010")
    assert rate.ratio == Decimal("0.001")
    assert isinstance(rate.ratio, Decimal)


def test_ratio_with_too_many_decimal_places_is_kept_but_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="money_exchange.domain.monetary.exchange_rate"):
        rate = ExchangeRate(Currency.USD, "0.000912345")

    assert rate.ratio == Decimal("0.000912345")
    assert len(caplog.records) == 1
    assert "0.000912345" in caplog.records[0].getMessage()


def test_conventionally_rounded_ratio_is_not_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="money_exchange.domain.monetary.exchange_rate"):
        ExchangeRate(Currency.KRW, "1000")
        ExchangeRate(Currency.USD, "0.00091")

    assert caplog.records == []


def test_invalid_ratio_raises_value_error():
    with pytest.raises(ValueError):
        ExchangeRate(Currency.USD, "n/a")


def test_invalid_target_raises_type_error():
    with pytest.raises(TypeError):
        ExchangeRate("USD", 1)


def test_default_table_contents():
    assert DEFAULT_EXCHANGE_TABLE.rates_for(Currency.KRW) == (ExchangeRate(Currency.USD, "0.0010"),)
    assert DEFAULT_EXCHANGE_TABLE.rates_for(Currency.USD) == (ExchangeRate(Currency.KRW, "1000"),)
    assert DEFAULT_EXCHANGE_TABLE.rates_for(Currency.JPY) == (ExchangeRate(Currency.KRW, "10"),)
    assert len(DEFAULT_EXCHANGE_TABLE) == 3


def test_table_accepts_pairs_and_preserves_order():
    table = ExchangeTable({Currency.USD: [(Currency.KRW, 1000), ExchangeRate(Currency.JPY, 100)]})
    assert [rate.target for rate in table.rates_for(Currency.USD)] == [Currency.KRW, Currency.JPY]


def test_table_copies_input():
    rows = [(Currency.KRW, 1000)]
    source = {Currency.USD: rows}
    table = ExchangeTable(source)

    rows.append((Currency.JPY, 100))
    source[Currency.JPY] = [(Currency.KRW, 10)]

    assert len(table.rates_for(Currency.USD)) == 1
    assert Currency.JPY not in table


def test_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_EXCHANGE_TABLE[Currency.JPY] = ()


def test_unknown_source_has_no_rates():
    table = ExchangeTable({Currency.USD: [(Currency.KRW, 1000)]})
    assert table.rates_for(Currency.JPY) == ()
    with pytest.raises(KeyError):
        table[Currency.JPY]


def test_empty_table():
    assert len(ExchangeTable()) == 0


@pytest.mark.parametrize("ratio", [0, -1, "-0.5", "NaN", float("nan"), "Infinity", "-Infinity"])
def test_non_positive_or_non_finite_ratio_is_rejected(ratio):
    with pytest.raises(ValueError):
        ExchangeTable({Currency.USD: [(Currency.KRW, ratio)]})


def test_rate_into_same_currency_is_rejected():
    with pytest.raises(ValueError):
        ExchangeTable({Currency.USD: [(Currency.USD, 1)]})


def test_non_currency_source_is_rejected():
    with pytest.raises(TypeError):
        ExchangeTable({"USD": [(Currency.KRW, 1000)]})


def test_malformed_row_is_rejected():
    with pytest.raises(TypeError):
        ExchangeTable({Currency.USD: [(Currency.KRW, 1000, "extra")]})
