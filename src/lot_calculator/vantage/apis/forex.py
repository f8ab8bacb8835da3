import requests

from lot_calculator.currency import to_currency_code

from .base import API_BASE


class FOREX(API_BASE):
    EXCHANGE_RATE_KEY = "Realtime Currency Exchange Rate"
    RATE_KEY = "5. Exchange Rate"

    @API_BASE.response_handler
    def get_exchange_rate(self, from_currency, to_currency):
        from_currency = to_currency_code(from_currency).value
        to_currency = to_currency_code(to_currency).value
        params = {
            "function": "CURRENCY_EXCHANGE_RATE",
            "from_currency": from_currency,
            "to_currency": to_currency,
            "apikey": self.api_key,
        }
        return requests.request("GET", f"{self.URL_BASE}/query", params=params, timeout=self.timeout)

    def parse_exchange_rate(self, res_j: dict):
        """get exchange rate from the response of get_exchange_rate

        Returns:
            float | None: rate. None when response doesn't have the rate field.
        """
        try:
            return float(res_j[self.EXCHANGE_RATE_KEY][self.RATE_KEY])
        except (KeyError, TypeError, ValueError):
            return None
