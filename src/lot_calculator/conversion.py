import logging

from lot_calculator.currency import BALANCE_CURRENCY, to_balance_currency
from lot_calculator.rates import RateTable
from lot_calculator.utils import round_half_up

logger = logging.getLogger(__name__)


def convert_balance(amount: float, from_unit, to_unit, rates: RateTable) -> float:
    from_unit = to_balance_currency(from_unit)
    to_unit = to_balance_currency(to_unit)
    if from_unit == to_unit:
        return amount
    usd_jpy = rates.usd_jpy
    if from_unit == BALANCE_CURRENCY.JPY:
        return round_half_up(amount / usd_jpy, 2)
    return int(round_half_up(amount * usd_jpy, 0))


def switch_balance_currency(balance: float, from_unit, to_unit, rates: RateTable) -> float:
    """Convert the balance when user switches the unit of the balance. Zero balance stays zero.

    Args:
        balance (float): balance in from_unit
        from_unit (BALANCE_CURRENCY): current unit
        to_unit (BALANCE_CURRENCY): new unit
        rates (RateTable): current rates

    Returns:
        float: balance in to_unit
    """
    if balance is None or balance <= 0:
        return 0
    converted = convert_balance(balance, from_unit, to_unit, rates)
    logger.debug(f"balance is converted: {balance} {from_unit} -> {converted} {to_unit}")
    return converted
