from __future__ import annotations

import logging

from money_exchange.bank.rate_lookup import RateNotFound, lookup_rate
from money_exchange.domain.monetary.exchange_rate import ExchangeTable
from money_exchange.domain.monetary.exchange_rate_registry import DEFAULT_EXCHANGE_TABLE
from money_exchange.domain.monetary.money import Money
from money_exchange.utils.numeric_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)


def add(lhs: Money, rhs: Money, table: ExchangeTable = DEFAULT_EXCHANGE_TABLE) -> Money:
    """Add $lhs to $rhs, converting $lhs into the currency of $rhs when they differ.

    With equal currencies the amounts are summed exactly. Otherwise the direct
    rate `lhs.currency -> rhs.currency` is looked up in $table and the result
    is expressed in `rhs.currency`.

    When no direct rate exists, the miss is logged at ERROR level and $rhs is
    returned unchanged, i.e. the contribution of $lhs is dropped. Because the
    result currency follows the right operand, `add` is neither commutative
    nor associative once three currencies are mixed.

    Args:
        lhs: Left operand; converted when currencies differ.
        rhs: Right operand; its currency is the result currency.
        table: Exchange table to use; defaults to the process-wide table.

    Returns:
        Money: New instance holding the sum (or the degraded $rhs value).
    """
    if lhs.currency == rhs.currency:
        return Money(lhs.amount + rhs.amount, lhs.currency)

    lookup = lookup_rate(lhs.currency, rhs.currency, table)
    if isinstance(lookup, RateNotFound):
        logger.error(
            f"Cannot convert $lhs ({lhs}) into {rhs.currency.code} in `add`; keeping only $rhs ({rhs}): {lookup.error}",
            extra={"source_currency": lhs.currency.code, "target_currency": rhs.currency.code},
        )
        return Money(rhs.amount, rhs.currency)

    return Money(lhs.amount * lookup.ratio + rhs.amount, rhs.currency)


def multiply(m: Money, factor: DecimalLike) -> Money:
    """Scale $m by $factor; the currency is preserved."""
    return Money(m.amount * as_decimal(factor), m.currency)
