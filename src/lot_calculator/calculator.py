"""
Responsibility: Calculator
- keep raw inputs given by UI
- normalize them into PositionInputs
- recompute PositionResult after every change of inputs or rates
- format result for UI
"""

import logging

from lot_calculator.config.model import CalculatorSettings
from lot_calculator.conversion import switch_balance_currency
from lot_calculator.currency import (
    BALANCE_CURRENCY,
    CURRENCY_CODE,
    other_balance_currency,
    to_balance_currency,
    to_currency_code,
    validate_leverage,
    validate_risk_percent,
)
from lot_calculator.errors import FetchError
from lot_calculator.fetcher import RateFetcher
from lot_calculator.margin import margin_level, margin_ratio, max_lot_size
from lot_calculator.model import PositionInputs, PositionResult
from lot_calculator.normalizer import format_amount, format_balance, format_lot, format_price, parse_balance, parse_stop_loss_pips
from lot_calculator.rates import RateTable
from lot_calculator.sizer import size_position

logger = logging.getLogger(__name__)

NOT_APPLICABLE = "N/A"


def recompute(inputs: PositionInputs, rates: RateTable) -> PositionResult:
    sizing = size_position(inputs, rates)
    ratio = margin_ratio(inputs, sizing.lot_size, rates)
    return PositionResult(
        lot_size=sizing.lot_size,
        risk_amount=sizing.risk_amount,
        risk_amount_equivalent=sizing.risk_amount_equivalent,
        max_lot_size=max_lot_size(inputs, rates),
        margin_ratio_percent=ratio,
        margin_level=margin_level(ratio),
    )


def format_timestamp(value) -> str:
    if value is None:
        return ""
    return f"{value.year}/{value.month}/{value.day} {value:%H:%M}"


class Calculator:
    def __init__(self, fetcher: RateFetcher = None, settings: CalculatorSettings = None):
        """State holder between UI and the engine. UI calls setters with raw values, then reads result or render().

        Args:
            fetcher (RateFetcher, optional): owner of rates. Defaults to None and a fetcher with default rates is created.
            settings (CalculatorSettings, optional): initial inputs. Defaults to None.
        """
        if fetcher is None:
            if settings is not None:
                fetcher = RateFetcher(rates=RateTable(settings.default_rates), settings=settings.fetch)
            else:
                fetcher = RateFetcher()
        self.fetcher = fetcher
        self.fetcher.add_listener(self._on_rates_updated)

        if settings is None:
            self.balance_currency = BALANCE_CURRENCY.JPY
            self.traded_currency = CURRENCY_CODE.JPY
            self.risk_percent = 2.5
            self.stop_loss_pips = 25
            self.leverage = 500
        else:
            self.balance_currency = to_balance_currency(settings.balance_currency)
            self.traded_currency = to_currency_code(settings.traded_currency)
            self.risk_percent = validate_risk_percent(settings.risk_percent)
            self.stop_loss_pips = int(settings.stop_loss_pips)
            self.leverage = validate_leverage(settings.leverage)
        self.balance = 0
        self.error_message = None
        self.__result = None
        self.recompute()

    @property
    def rates(self) -> RateTable:
        return self.fetcher.rates

    @property
    def inputs(self) -> PositionInputs:
        return PositionInputs(
            balance=self.balance,
            risk_percent=self.risk_percent,
            stop_loss_pips=self.stop_loss_pips,
            traded_currency=self.traded_currency,
            balance_currency=self.balance_currency,
            leverage=self.leverage,
        )

    @property
    def result(self) -> PositionResult:
        return self.__result

    def recompute(self) -> PositionResult:
        self.__result = recompute(self.inputs, self.rates)
        return self.__result

    def set_balance(self, raw: str) -> PositionResult:
        self.balance = parse_balance(raw, self.balance_currency)
        return self.recompute()

    def set_stop_loss(self, raw: str) -> PositionResult:
        self.stop_loss_pips = parse_stop_loss_pips(raw)
        return self.recompute()

    def set_risk_percent(self, value: float) -> PositionResult:
        self.risk_percent = validate_risk_percent(value)
        return self.recompute()

    def set_leverage(self, value: int) -> PositionResult:
        self.leverage = validate_leverage(value)
        return self.recompute()

    def set_traded_currency(self, code) -> PositionResult:
        self.traded_currency = to_currency_code(code)
        return self.recompute()

    def switch_balance_currency(self, unit) -> PositionResult:
        unit = to_balance_currency(unit)
        if unit != self.balance_currency:
            self.balance = switch_balance_currency(self.balance, self.balance_currency, unit, self.rates)
            self.balance_currency = unit
        return self.recompute()

    def refresh_rates(self):
        """fetch rates synchronously. Result is recomputed by the listener on success.

        Returns:
            RateTable | FetchError: result of the fetch
        """
        result = self.fetcher.fetch()
        if isinstance(result, FetchError):
            logger.info(f"rates are not updated. keep using rates of {format_timestamp(self.fetcher.last_updated) or 'defaults'}")
            self.error_message = str(result)
        return result

    def _on_rates_updated(self, rates: RateTable):
        self.error_message = None
        self.recompute()

    def render(self) -> dict:
        result = self.__result
        other_unit = other_balance_currency(self.balance_currency)
        if result.margin_ratio_percent is None:
            ratio = NOT_APPLICABLE
        else:
            ratio = f"{result.margin_ratio_percent:.2f}%"
        return {
            "balance": format_balance(self.balance, self.balance_currency),
            "lot_size": format_lot(result.lot_size),
            "risk_amount": format_amount(result.risk_amount, self.balance_currency),
            "risk_amount_equivalent": format_amount(result.risk_amount_equivalent, other_unit),
            "max_lot_size": format_lot(result.max_lot_size),
            "margin_ratio": ratio,
            "margin_level": None if result.margin_level is None else result.margin_level.name,
            "currency_price": format_price(self.rates.get(self.traded_currency), self.traded_currency),
            "last_updated": format_timestamp(self.fetcher.last_updated),
            "error": self.error_message,
        }
