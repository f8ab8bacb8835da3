import logging

from lot_calculator.currency import BALANCE_CURRENCY, CURRENCY_CODE
from lot_calculator.model import MARGIN_LEVEL, PositionInputs
from lot_calculator.rates import RateTable
from lot_calculator.sizer import LOT_UNIT
from lot_calculator.utils import finite_or_zero, round_half_up

logger = logging.getLogger(__name__)

CRITICAL_RATIO = 100.0
SAFE_RATIO = 200.0


def max_lot_size(inputs: PositionInputs, rates: RateTable) -> float:
    """max lot the balance can hold with the leverage. 0.0 for JPY as it has no exposure against JPY"""
    if inputs.traded_currency == CURRENCY_CODE.JPY:
        return 0.0
    if inputs.balance_currency == BALANCE_CURRENCY.USD:
        max_lot = inputs.balance * inputs.leverage / LOT_UNIT
    else:
        max_lot = inputs.balance * inputs.leverage / (rates.get(inputs.traded_currency) * 10000)
    return finite_or_zero(round_half_up(max_lot, 2))


def required_margin(inputs: PositionInputs, lot_size: float, rates: RateTable) -> float:
    position_size = lot_size * LOT_UNIT
    if inputs.balance_currency == BALANCE_CURRENCY.JPY:
        return position_size * rates.get(inputs.traded_currency) / inputs.leverage
    if inputs.traded_currency == CURRENCY_CODE.USD:
        return position_size / inputs.leverage
    return position_size * rates.get(inputs.traded_currency) / inputs.leverage / rates.usd_jpy


def margin_ratio(inputs: PositionInputs, lot_size: float, rates: RateTable):
    """balance / required margin in percent

    Returns:
        float | None: ratio rounded to 2 decimals. None when it is not applicable.
    """
    if inputs.traded_currency == CURRENCY_CODE.JPY or lot_size <= 0:
        return None
    margin = required_margin(inputs, lot_size, rates)
    if margin <= 0:
        logger.debug(f"required margin is {margin}. ratio is not applicable")
        return None
    return finite_or_zero(round_half_up(inputs.balance / margin * 100, 2))


def margin_level(ratio) -> MARGIN_LEVEL | None:
    if ratio is None:
        return None
    if ratio < CRITICAL_RATIO:
        return MARGIN_LEVEL.critical
    elif ratio < SAFE_RATIO:
        return MARGIN_LEVEL.warning
    return MARGIN_LEVEL.safe
