import unittest

from lot_calculator.currency import CURRENCY_CODE
from lot_calculator.errors import UnknownCurrency
from lot_calculator.rates import DEFAULT_RATES, RateTable


class RateTableTest(unittest.TestCase):
    def test_default_has_every_currency(self):
        rates = RateTable.default()
        self.assertEqual(len(rates), len(CURRENCY_CODE))
        for code in CURRENCY_CODE:
            self.assertGreater(rates.get(code), 0)
        self.assertEqual(rates.get(CURRENCY_CODE.JPY), 1.0)
        self.assertEqual(rates.usd_jpy, 147.52)

    def test_get_with_str(self):
        rates = RateTable.default()
        self.assertEqual(rates.get("EUR"), 159.83)
        self.assertEqual(rates["gbp"], 186.45)

    def test_unknown_currency(self):
        rates = RateTable.default()
        with self.assertRaises(UnknownCurrency):
            rates.get("BTC")
        self.assertFalse("BTC" in rates)
        self.assertTrue("USD" in rates)

    def test_missing_currency(self):
        values = {code.value: value for code, value in DEFAULT_RATES.items() if code != CURRENCY_CODE.CHF}
        with self.assertRaises(ValueError):
            RateTable(values)

    def test_non_positive_rate(self):
        values = dict(DEFAULT_RATES)
        values[CURRENCY_CODE.USD] = 0
        with self.assertRaises(ValueError):
            RateTable(values)
        values[CURRENCY_CODE.USD] = -1.0
        with self.assertRaises(ValueError):
            RateTable(values)

    def test_jpy_should_be_one(self):
        values = dict(DEFAULT_RATES)
        values[CURRENCY_CODE.JPY] = 2.0
        with self.assertRaises(ValueError):
            RateTable(values)

    def test_source_dict_change_is_not_reflected(self):
        values = dict(DEFAULT_RATES)
        rates = RateTable(values)
        values[CURRENCY_CODE.USD] = 1.0
        self.assertEqual(rates.usd_jpy, 147.52)
        self.assertEqual(rates, RateTable.default())


if __name__ == "__main__":
    unittest.main()
