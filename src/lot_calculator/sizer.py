"""
Risk amount × stop loss -> lot size

- risk amount = balance × risk percent
- pip value per lot is fixed by balance currency (1,000 JPY or 10 USD)
- USD/JPY on USD balance converts 0.01 JPY pip into USD with the current rate
"""

import logging

from lot_calculator.conversion import convert_balance
from lot_calculator.currency import BALANCE_CURRENCY, BALANCE_DIGITS, CURRENCY_CODE, other_balance_currency
from lot_calculator.model import PositionInputs, SizingResult
from lot_calculator.rates import RateTable
from lot_calculator.utils import finite_or_zero, round_half_up

logger = logging.getLogger(__name__)

LOT_UNIT = 100000
JPY_PIP_SIZE = 0.01
JPY_PIP_VALUE_PER_LOT = 1000.0
USD_PIP_VALUE_PER_LOT = 10.0


def calculate_risk_amount(balance: float, risk_percent: float, balance_currency: BALANCE_CURRENCY) -> float:
    return round_half_up(balance * risk_percent / 100.0, BALANCE_DIGITS[balance_currency])


def pip_value_per_lot(traded_currency: CURRENCY_CODE, balance_currency: BALANCE_CURRENCY, rates: RateTable) -> float:
    if balance_currency == BALANCE_CURRENCY.JPY:
        return JPY_PIP_VALUE_PER_LOT
    if traded_currency == CURRENCY_CODE.JPY:
        # USD/JPY pip is 0.01 JPY
        return round_half_up(LOT_UNIT * JPY_PIP_SIZE / rates.usd_jpy, 2)
    return USD_PIP_VALUE_PER_LOT


def size_position(inputs: PositionInputs, rates: RateTable) -> SizingResult:
    risk_amount = finite_or_zero(calculate_risk_amount(inputs.balance, inputs.risk_percent, inputs.balance_currency))
    risk_amount_equivalent = convert_balance(risk_amount, inputs.balance_currency, other_balance_currency(inputs.balance_currency), rates)

    if inputs.stop_loss_pips <= 0:
        lot_size = 0.0
    else:
        pip_value = pip_value_per_lot(inputs.traded_currency, inputs.balance_currency, rates)
        if pip_value <= 0:
            lot_size = 0.0
        else:
            raw_lot = risk_amount / (inputs.stop_loss_pips * pip_value)
            lot_size = finite_or_zero(round_half_up(raw_lot, 2))

    logger.debug(f"lot: {lot_size}, risk: {risk_amount}, equivalent: {risk_amount_equivalent}")
    return SizingResult(lot_size=lot_size, risk_amount=risk_amount, risk_amount_equivalent=risk_amount_equivalent)
