from .loader import load_api_key, load_settings
from .model import CalculatorSettings, FetchSettings

__all__ = [
    "CalculatorSettings",
    "FetchSettings",
    "load_api_key",
    "load_settings",
]
