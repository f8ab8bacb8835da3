"""
Convert text typed by user into numbers, and numbers into text to show.

Malformed text is never an error. It is read as 0 so that result can be rendered anyway.
"""

import logging
import math
import re

from lot_calculator.currency import BALANCE_CURRENCY, BALANCE_DIGITS, SETTLEMENT_CURRENCY, to_balance_currency, to_currency_code
from lot_calculator.utils import round_half_up

logger = logging.getLogger(__name__)

_NON_DIGIT = re.compile(r"[^\d]")
_NON_DECIMAL = re.compile(r"[^\d.]")
# 10^15 JPY is far beyond any account and still exact as float
MAX_BALANCE_DIGITS = 15


def _digits_only(raw: str) -> str:
    if raw is None:
        return ""
    return _NON_DIGIT.sub("", str(raw))


def _keep_first_point(raw: str) -> str:
    if raw is None:
        return ""
    cleaned = _NON_DECIMAL.sub("", str(raw))
    head, point, tail = cleaned.partition(".")
    return head + point + tail.replace(".", "")


def _too_large(integer_part: str) -> bool:
    return len(integer_part.lstrip("0")) > MAX_BALANCE_DIGITS


def parse_balance(raw: str, unit) -> float:
    """balance with more integer digits than MAX_BALANCE_DIGITS is read as 0 like other unparsable text"""
    unit = to_balance_currency(unit)
    if unit == BALANCE_CURRENCY.JPY:
        digits = _digits_only(raw)
        if digits == "" or _too_large(digits):
            return 0
        return int(digits.lstrip("0") or "0")

    cleaned = _keep_first_point(raw)
    if _too_large(cleaned.partition(".")[0]):
        logger.debug(f"{unit.value} balance is too large: {len(cleaned)} characters")
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug(f"{raw} can't be parsed as {unit.value} balance")
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def format_balance(value: float, unit) -> str:
    unit = to_balance_currency(unit)
    value = round_half_up(float(value), BALANCE_DIGITS[unit])
    if unit == BALANCE_CURRENCY.JPY:
        return f"{int(value):,}"
    return f"{value:.2f}"


def parse_stop_loss_pips(raw: str) -> int:
    digits = _digits_only(raw)
    if digits == "":
        return 0
    return int(digits)


def format_amount(value: float, unit) -> str:
    """format calculated amount. JPY has thousands separators, USD has them and two decimals"""
    unit = to_balance_currency(unit)
    value = round_half_up(float(value), BALANCE_DIGITS[unit])
    if unit == BALANCE_CURRENCY.JPY:
        return f"{int(value):,}"
    return f"{value:,.2f}"


def format_lot(value: float) -> str:
    return f"{value:.2f}"


def format_price(value: float, code) -> str:
    if to_currency_code(code) == SETTLEMENT_CURRENCY:
        return f"{value:.4f}"
    return f"{value:.2f}"
