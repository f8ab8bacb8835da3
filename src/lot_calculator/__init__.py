from .calculator import Calculator, recompute
from .config import load_api_key, load_settings
from .conversion import convert_balance, switch_balance_currency
from .currency import BALANCE_CURRENCY, CURRENCY_CODE, LEVERAGES, RISK_PERCENTS
from .errors import AlreadyInProgress, FetchError, RateLimited, RequestFailed, UnknownCurrency
from .fetcher import RateFetcher
from .logger import setup_logging
from .margin import margin_level, margin_ratio, max_lot_size
from .model import MARGIN_LEVEL, PositionInputs, PositionResult, SizingResult
from .normalizer import format_balance, parse_balance, parse_stop_loss_pips
from .rates import DEFAULT_RATES, RateTable
from .sizer import size_position

setup_logging()


def create_calculator(settings_path: str = None, env_path: str = None) -> Calculator:
    """create Calculator with rates fetcher which uses the api key in environment variables or .env file"""
    settings = load_settings(settings_path)
    api_key = load_api_key(settings.fetch, env_path)
    fetcher = RateFetcher(rates=RateTable(settings.default_rates), settings=settings.fetch, api_key=api_key)
    return Calculator(fetcher=fetcher, settings=settings)
