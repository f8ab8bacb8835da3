from enum import Enum

from lot_calculator.errors import UnknownCurrency


class CURRENCY_CODE(Enum):
    JPY = "JPY"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    AUD = "AUD"
    NZD = "NZD"
    CAD = "CAD"
    CHF = "CHF"


class BALANCE_CURRENCY(Enum):
    JPY = "JPY"
    USD = "USD"


SETTLEMENT_CURRENCY = CURRENCY_CODE.JPY
# currencies which are quoted against JPY by the rate provider
QUOTED_CURRENCIES = [code for code in CURRENCY_CODE if code != SETTLEMENT_CURRENCY]

LEVERAGES = (1, 2, 5, 10, 25, 50, 100, 200, 400, 500, 888, 1000)
# 0.5, 1.0, 1.5, ..., 29.5, 30.0
RISK_PERCENTS = tuple((i + 1) * 0.5 for i in range(60))

# decimal places used when an amount is rounded
BALANCE_DIGITS = {
    BALANCE_CURRENCY.JPY: 0,
    BALANCE_CURRENCY.USD: 2,
}


def to_currency_code(value) -> CURRENCY_CODE:
    if isinstance(value, CURRENCY_CODE):
        return value
    if isinstance(value, BALANCE_CURRENCY):
        return CURRENCY_CODE(value.value)
    if isinstance(value, str):
        for member in CURRENCY_CODE:
            if member.value == value.upper():
                return member
    raise UnknownCurrency(value)


def to_balance_currency(value) -> BALANCE_CURRENCY:
    if isinstance(value, BALANCE_CURRENCY):
        return value
    if isinstance(value, CURRENCY_CODE):
        value = value.value
    if isinstance(value, str):
        for member in BALANCE_CURRENCY:
            if member.value == value.upper():
                return member
    raise UnknownCurrency(value)


def other_balance_currency(unit: BALANCE_CURRENCY) -> BALANCE_CURRENCY:
    if unit == BALANCE_CURRENCY.JPY:
        return BALANCE_CURRENCY.USD
    return BALANCE_CURRENCY.JPY


def validate_risk_percent(value: float) -> float:
    value = float(value)
    if value not in RISK_PERCENTS:
        raise ValueError(f"risk percent should be in 0.5 steps between 0.5 and 30.0: {value}")
    return value


def validate_leverage(value: int) -> int:
    if value not in LEVERAGES:
        raise ValueError(f"{value} is not supported as leverage")
    return int(value)
