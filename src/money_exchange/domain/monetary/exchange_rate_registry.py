from money_exchange.domain.monetary.currency import Currency
from money_exchange.domain.monetary.exchange_rate import ExchangeRate, ExchangeTable


# Default static rates; built once at import and never mutated
DEFAULT_EXCHANGE_TABLE = ExchangeTable(
    {
        Currency.KRW: [ExchangeRate(Currency.USD, "0.0010")],
        Currency.USD: [ExchangeRate(Currency.KRW, "1000")],
        Currency.JPY: [ExchangeRate(Currency.KRW, "10")],
    }
)
