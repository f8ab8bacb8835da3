from dataclasses import dataclass
from enum import Enum

from lot_calculator.currency import BALANCE_CURRENCY, CURRENCY_CODE


class MARGIN_LEVEL(Enum):
    critical = 0
    warning = 1
    safe = 2


@dataclass(frozen=True)
class PositionInputs:
    """
    values after normalization
        - balance: account balance in balance_currency
        - risk_percent: percent of balance to lose when stop loss is hit
        - stop_loss_pips: distance to stop loss
        - traded_currency: currency quoted against JPY
        - balance_currency: unit of balance
        - leverage: leverage of the account
    """

    balance: float
    risk_percent: float
    stop_loss_pips: int
    traded_currency: CURRENCY_CODE
    balance_currency: BALANCE_CURRENCY
    leverage: int


@dataclass(frozen=True)
class SizingResult:
    lot_size: float
    risk_amount: float
    risk_amount_equivalent: float


@dataclass(frozen=True)
class PositionResult:
    lot_size: float
    risk_amount: float
    risk_amount_equivalent: float
    max_lot_size: float
    margin_ratio_percent: float | None
    margin_level: MARGIN_LEVEL | None
