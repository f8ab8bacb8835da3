import datetime
import logging
import threading
import time

from lot_calculator.config.model import FetchSettings
from lot_calculator.currency import QUOTED_CURRENCIES, SETTLEMENT_CURRENCY
from lot_calculator.errors import AlreadyInProgress, FetchError, RateLimited, RequestFailed
from lot_calculator.rates import RateTable
from lot_calculator.utils import round_half_up
from lot_calculator.vantage.apis import FOREX

logger = logging.getLogger(__name__)


class RateFetcher:
    def __init__(self, client: FOREX = None, rates: RateTable = None, settings: FetchSettings = None, api_key: str = None, sleep=time.sleep):
        """Owner of the current RateTable. Replaces the table only when every currency is fetched.

        Args:
            client (FOREX, optional): quote provider client. Defaults to None and created from settings and api_key.
            rates (RateTable, optional): initial table. Defaults to None and default rates are used.
            settings (FetchSettings, optional): interval, retry etc. Defaults to None.
            api_key (str, optional): api key of the provider. Used when client is None.
            sleep (callable, optional): function to wait between requests. Defaults to time.sleep.
        """
        if settings is None:
            settings = FetchSettings()
        self.settings = settings
        self._sleep = sleep
        if client is None:
            client = FOREX(api_key, base_url=settings.base_url, max_retry=settings.max_retry, timeout=settings.timeout_seconds, sleep=sleep)
        self.client = client
        if rates is None:
            rates = RateTable.default()
        self.__rates = rates
        self.last_updated = None
        self.__busy = False
        self.__busy_lock = threading.Lock()
        self.__listeners = []

    @property
    def rates(self) -> RateTable:
        return self.__rates

    @property
    def is_fetching(self) -> bool:
        return self.__busy

    def add_listener(self, listener):
        """listener is called with new RateTable after it is replaced"""
        self.__listeners.append(listener)

    def _fetch_rate(self, currency) -> float:
        response = self.client.get_exchange_rate(currency, SETTLEMENT_CURRENCY)
        if isinstance(response, Exception):
            raise RequestFailed(currency, str(response))
        if self.client.is_rate_limited(response):
            notice = " ".join(str(response[key]) for key in self.client.RATE_LIMIT_KEYS if key in response)
            logger.warning(f"rate limit notice is returned for {currency.value}: {notice}")
            raise RateLimited(notice)
        rate = self.client.parse_exchange_rate(response)
        if rate is None or rate <= 0:
            raise RequestFailed(currency, f"unexpected response: {response}")
        return round_half_up(rate, 2)

    def fetch(self):
        """fetch rates of all currencies one by one and replace the table

        Returns:
            RateTable | FetchError: new table, or error. Current table is kept on error.
        """
        with self.__busy_lock:
            if self.__busy:
                logger.info("fetch is already in progress")
                return AlreadyInProgress()
            self.__busy = True

        try:
            new_rates = {SETTLEMENT_CURRENCY: 1.0}
            for index, currency in enumerate(QUOTED_CURRENCIES):
                if index > 0:
                    self._sleep(self.settings.interval_seconds)
                try:
                    new_rates[currency] = self._fetch_rate(currency)
                except FetchError as e:
                    logger.error(f"fetch is aborted on {currency.value}: {e} ({getattr(e, 'detail', None)})")
                    return e
                logger.debug(f"{currency.value}/JPY: {new_rates[currency]}")

            table = RateTable(new_rates)
            self.__rates = table
            self.last_updated = datetime.datetime.now()
            logger.info(f"rates are updated: {table.to_dict()}")
        finally:
            self.__busy = False

        for listener in self.__listeners:
            listener(table)
        return table

    def fetch_in_background(self, callback=None) -> threading.Thread:
        """run fetch on a daemon thread. callback is called with the result of fetch"""

        def _run():
            result = self.fetch()
            if callback is not None:
                callback(result)

        t = threading.Thread(target=_run, daemon=True)
        t.start()
        return t
