import json
import logging
import os

import yaml
from dotenv import load_dotenv

from .model import CalculatorSettings, FetchSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "../settings.yaml"))


def _read_file(file_path: str) -> dict:
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"settings file not found: {file_path}")
    if file_path.endswith(".json"):
        with open(file_path, "r") as f:
            data = json.load(f)
    elif file_path.endswith(".yaml") or file_path.endswith(".yml"):
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError("Unsupported file format. Only JSON and YAML are supported.")
    return data or {}


def load_settings(file_path: str = None) -> CalculatorSettings:
    """load package defaults and overwrite them by the file if specified

    Args:
        file_path (str, optional): json or yaml file. Defaults to None.

    Returns:
        CalculatorSettings: settings
    """
    data = _read_file(DEFAULT_SETTINGS_PATH)
    if file_path is not None:
        user_data = _read_file(file_path)
        logger.info(f"settings are loaded from {file_path}")
        for key, value in user_data.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key].update(value)
            else:
                data[key] = value

    fetch_data = data.pop("fetch", {})
    calculator_data = data.pop("calculator", {})
    unknown_keys = [key for key in data.keys() if key != "default_rates"]
    if len(unknown_keys) > 0:
        logger.warning(f"unknown keys in settings are ignored: {unknown_keys}")
    return CalculatorSettings(default_rates=data["default_rates"], fetch=FetchSettings(**fetch_data), **calculator_data)


def load_api_key(settings: FetchSettings = None, env_path: str = None) -> str:
    if settings is None:
        settings = FetchSettings()
    load_dotenv(env_path)
    api_key = os.environ.get(settings.api_key_env)
    if api_key is None:
        logger.warning(f"{settings.api_key_env} is not set. rates can't be updated from the provider.")
    return api_key
