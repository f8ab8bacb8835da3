import json
import os
import tempfile
import unittest
from unittest import mock

import yaml

from lot_calculator.config import CalculatorSettings, FetchSettings, load_api_key, load_settings
from lot_calculator.rates import RateTable


class LoadSettingsTest(unittest.TestCase):
    def test_default(self):
        settings = load_settings()
        self.assertIsInstance(settings, CalculatorSettings)
        self.assertEqual(RateTable(settings.default_rates), RateTable.default())
        self.assertEqual(settings.fetch.interval_seconds, 12)
        self.assertEqual(settings.fetch.api_key_env, "ALPHA_VANTAGE_API_KEY")
        self.assertEqual(settings.risk_percent, 2.5)
        self.assertEqual(settings.stop_loss_pips, 25)
        self.assertEqual(settings.leverage, 500)

    def test_yaml_overwrites_default(self):
        with tempfile.TemporaryDirectory() as dir_path:
            file_path = os.path.join(dir_path, "settings.yaml")
            with open(file_path, "w") as f:
                yaml.safe_dump({"default_rates": {"USD": 150.0}, "fetch": {"interval_seconds": 15}, "calculator": {"leverage": 25}}, f)
            settings = load_settings(file_path)
        self.assertEqual(settings.default_rates["USD"], 150.0)
        self.assertEqual(settings.default_rates["EUR"], 159.83)
        self.assertEqual(settings.fetch.interval_seconds, 15)
        self.assertEqual(settings.fetch.max_retry, 0)
        self.assertEqual(settings.leverage, 25)
        self.assertEqual(settings.risk_percent, 2.5)

    def test_json(self):
        with tempfile.TemporaryDirectory() as dir_path:
            file_path = os.path.join(dir_path, "settings.json")
            with open(file_path, "w") as f:
                json.dump({"calculator": {"balance_currency": "USD"}}, f)
            settings = load_settings(file_path)
        self.assertEqual(settings.balance_currency, "USD")

    def test_invalid_file(self):
        with self.assertRaises(FileNotFoundError):
            load_settings("not_exist.yaml")
        with tempfile.TemporaryDirectory() as dir_path:
            file_path = os.path.join(dir_path, "settings.txt")
            with open(file_path, "w") as f:
                f.write("leverage=25")
            with self.assertRaises(ValueError):
                load_settings(file_path)


class LoadApiKeyTest(unittest.TestCase):
    @mock.patch.dict(os.environ, {"TEST_VANTAGE_KEY": "abc"})
    def test_from_environment(self):
        self.assertEqual(load_api_key(FetchSettings(api_key_env="TEST_VANTAGE_KEY")), "abc")

    def test_from_env_file(self):
        with tempfile.TemporaryDirectory() as dir_path:
            env_path = os.path.join(dir_path, ".env")
            with open(env_path, "w") as f:
                f.write("TEST_VANTAGE_FILE_KEY=from_file\n")
            with mock.patch.dict(os.environ, {}):
                self.assertEqual(load_api_key(FetchSettings(api_key_env="TEST_VANTAGE_FILE_KEY"), env_path), "from_file")

    def test_missing(self):
        self.assertIsNone(load_api_key(FetchSettings(api_key_env="TEST_VANTAGE_MISSING_KEY"), os.devnull))


if __name__ == "__main__":
    unittest.main()
