from dataclasses import dataclass, field


@dataclass
class FetchSettings:
    base_url: str = "https://www.alphavantage.co/"
    api_key_env: str = "ALPHA_VANTAGE_API_KEY"
    interval_seconds: float = 12.0  # free plan of the provider accepts 5 requests per minute
    max_retry: int = 0
    timeout_seconds: float = 10.0


@dataclass
class CalculatorSettings:
    default_rates: dict
    fetch: FetchSettings = field(default_factory=FetchSettings)
    balance_currency: str = "JPY"
    traded_currency: str = "JPY"
    risk_percent: float = 2.5
    stop_loss_pips: int = 25
    leverage: int = 500
