import unittest

from lot_calculator.currency import BALANCE_CURRENCY, CURRENCY_CODE
from lot_calculator.normalizer import format_amount, format_balance, format_lot, format_price, parse_balance, parse_stop_loss_pips


class ParseBalanceTest(unittest.TestCase):
    def test_jpy(self):
        self.assertEqual(parse_balance("1,000,000", BALANCE_CURRENCY.JPY), 1000000)
        self.assertEqual(parse_balance("12a3.45", BALANCE_CURRENCY.JPY), 12345)
        self.assertEqual(parse_balance("", BALANCE_CURRENCY.JPY), 0)
        self.assertEqual(parse_balance("abc", "JPY"), 0)
        self.assertEqual(parse_balance(None, BALANCE_CURRENCY.JPY), 0)

    def test_usd(self):
        self.assertEqual(parse_balance("10,000.50", BALANCE_CURRENCY.USD), 10000.5)
        self.assertEqual(parse_balance("1.2.3", BALANCE_CURRENCY.USD), 1.23)
        self.assertEqual(parse_balance("$5000", BALANCE_CURRENCY.USD), 5000.0)
        self.assertEqual(parse_balance("", BALANCE_CURRENCY.USD), 0)
        self.assertEqual(parse_balance(".", BALANCE_CURRENCY.USD), 0)

    def test_oversized_text(self):
        self.assertEqual(parse_balance("9" * 400, BALANCE_CURRENCY.JPY), 0)
        self.assertEqual(parse_balance("1" * 5000, BALANCE_CURRENCY.JPY), 0)
        self.assertEqual(parse_balance("9" * 400, BALANCE_CURRENCY.USD), 0)
        self.assertEqual(parse_balance("1" * 16 + ".5", BALANCE_CURRENCY.USD), 0)
        # leading zeros don't count as digits
        self.assertEqual(parse_balance("0" * 5000 + "123", BALANCE_CURRENCY.JPY), 123)
        self.assertEqual(parse_balance("9" * 15, BALANCE_CURRENCY.JPY), 999999999999999)
        self.assertEqual(parse_balance("1" * 15 + ".25", BALANCE_CURRENCY.USD), 111111111111111.25)

    def test_stop_loss(self):
        self.assertEqual(parse_stop_loss_pips("25"), 25)
        self.assertEqual(parse_stop_loss_pips("2.5 pips"), 25)
        self.assertEqual(parse_stop_loss_pips("-10"), 10)
        self.assertEqual(parse_stop_loss_pips(""), 0)


class FormatBalanceTest(unittest.TestCase):
    def test_jpy(self):
        self.assertEqual(format_balance(1000000, BALANCE_CURRENCY.JPY), "1,000,000")
        self.assertEqual(format_balance(999, BALANCE_CURRENCY.JPY), "999")
        self.assertEqual(format_balance(1234.5, BALANCE_CURRENCY.JPY), "1,235")

    def test_usd(self):
        self.assertEqual(format_balance(5000, BALANCE_CURRENCY.USD), "5000.00")
        self.assertEqual(format_balance(0.005, BALANCE_CURRENCY.USD), "0.01")

    def test_parse_formatted(self):
        for value, expected in [(0, 0), (999, 999), (1234567, 1234567), (1234.5, 1235)]:
            formatted = format_balance(value, BALANCE_CURRENCY.JPY)
            self.assertEqual(parse_balance(formatted, BALANCE_CURRENCY.JPY), expected)
        for value, expected in [(0, 0.0), (0.1, 0.1), (12.345, 12.35), (10000.5, 10000.5)]:
            formatted = format_balance(value, BALANCE_CURRENCY.USD)
            self.assertEqual(parse_balance(formatted, BALANCE_CURRENCY.USD), expected)

    def test_jpy_text_is_stable(self):
        for raw in ["1,000", "1000000", "12,34,5", "", "0", "1,2,3,4,5,6,7"]:
            once = format_balance(parse_balance(raw, BALANCE_CURRENCY.JPY), BALANCE_CURRENCY.JPY)
            twice = format_balance(parse_balance(once, BALANCE_CURRENCY.JPY), BALANCE_CURRENCY.JPY)
            self.assertEqual(once, twice)

    def test_amount_lot_and_price(self):
        self.assertEqual(format_amount(25000, BALANCE_CURRENCY.JPY), "25,000")
        self.assertEqual(format_amount(1234.5, BALANCE_CURRENCY.USD), "1,234.50")
        self.assertEqual(format_lot(1.0), "1.00")
        self.assertEqual(format_price(1.0, CURRENCY_CODE.JPY), "1.0000")
        self.assertEqual(format_price(147.52, CURRENCY_CODE.USD), "147.52")


if __name__ == "__main__":
    unittest.main()
