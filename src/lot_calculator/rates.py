import logging
import math

from lot_calculator.currency import CURRENCY_CODE, SETTLEMENT_CURRENCY, to_currency_code
from lot_calculator.errors import UnknownCurrency

logger = logging.getLogger(__name__)

# JPY per one unit of each currency
DEFAULT_RATES = {
    CURRENCY_CODE.JPY: 1.0,
    CURRENCY_CODE.USD: 147.52,
    CURRENCY_CODE.EUR: 159.83,
    CURRENCY_CODE.GBP: 186.45,
    CURRENCY_CODE.AUD: 96.38,
    CURRENCY_CODE.NZD: 89.72,
    CURRENCY_CODE.CAD: 108.34,
    CURRENCY_CODE.CHF: 163.91,
}


class RateTable:
    """Price of every currency in JPY. Instance is never changed after creation.
    Owner replaces a whole table instead, so reader sees either old or new rates only.
    """

    def __init__(self, rates: dict):
        _rates = {}
        for code, value in rates.items():
            code = to_currency_code(code)
            value = float(value)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"rate of {code.value} should be positive: {value}")
            _rates[code] = value
        missing = [code.value for code in CURRENCY_CODE if code not in _rates]
        if len(missing) > 0:
            raise ValueError(f"rates are missing for {missing}")
        if _rates[SETTLEMENT_CURRENCY] != 1.0:
            raise ValueError(f"rate of {SETTLEMENT_CURRENCY.value} should be 1.0")
        self.__rates = _rates

    @classmethod
    def default(cls) -> "RateTable":
        return cls(DEFAULT_RATES)

    def get(self, code) -> float:
        try:
            code = to_currency_code(code)
        except UnknownCurrency:
            logger.error(f"rate is requested for unknown currency: {code}")
            raise
        return self.__rates[code]

    @property
    def usd_jpy(self) -> float:
        return self.__rates[CURRENCY_CODE.USD]

    def to_dict(self) -> dict:
        return {code.value: value for code, value in self.__rates.items()}

    def __getitem__(self, code) -> float:
        return self.get(code)

    def __contains__(self, code) -> bool:
        try:
            to_currency_code(code)
        except UnknownCurrency:
            return False
        return True

    def __iter__(self):
        return iter(self.__rates)

    def __len__(self) -> int:
        return len(self.__rates)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RateTable):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(tuple(sorted(self.to_dict().items())))

    def __repr__(self) -> str:
        return f"RateTable({self.to_dict()})"
