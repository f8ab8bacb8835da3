import json
import logging
import time

import requests

logger = logging.getLogger(__name__)


class API_BASE:
    """Base of alpha vantage api. Methods decorated by response_handler return dict on success, Exception otherwise."""

    ERROR_KEY = "Error Message"
    # alpha vantage answers 200 with one of these keys when call frequency exceeds the plan
    RATE_LIMIT_KEYS = ("Note", "Information")

    def __init__(self, api_key, base_url="https://www.alphavantage.co/", max_retry=0, timeout=10.0, sleep=time.sleep) -> None:
        self.URL_BASE = base_url.rstrip("/")
        self.api_key = api_key
        self.max_retry = max_retry
        self.timeout = timeout
        self._sleep = sleep

    def response_handler(get_rates_function):
        def response_wrapper(*args, retry_count=0, **kwargs):
            self = args[0]
            try:
                response = get_rates_function(*args, **kwargs)
            except requests.RequestException as e:
                logger.error(f"request failed on {get_rates_function.__name__}: {e}")
                return e
            if response.status_code == 200:
                try:
                    res_j = json.loads(response.text)
                except ValueError as e:
                    logger.error(f"can't parse the response on {get_rates_function.__name__}")
                    return e

                if not isinstance(res_j, dict):
                    logger.error(f"unexpected response on {get_rates_function.__name__}: {res_j}")
                    return ValueError(f"unexpected response: {res_j}")
                if self.ERROR_KEY in res_j:
                    invalid_api_message = "Invalid API call"
                    if invalid_api_message in res_j[self.ERROR_KEY]:
                        logger.error(f"Invalid API parameters are specified on {get_rates_function.__name__}")
                        logger.warning(f"Invalid API parameters: {args[1:]} and {kwargs}")
                        return ValueError(res_j[self.ERROR_KEY])
                    else:
                        logger.error(f"Unkown Error Response on {get_rates_function.__name__}")
                        return Exception(res_j[self.ERROR_KEY])
                # success case. rate limit notice is also returned as is
                return res_j
            else:
                retry_count += 1
                if retry_count <= self.max_retry:
                    self._sleep(retry_count * 3)
                    return response_wrapper(*args, retry_count=retry_count, **kwargs)
                else:
                    err_txt = f"failed {retry_count} times on {get_rates_function.__name__}: {response.status_code} {response.text}"
                    logger.error(err_txt)
                    return Exception(err_txt)

        return response_wrapper

    def is_rate_limited(self, res_j: dict) -> bool:
        for key in self.RATE_LIMIT_KEYS:
            if key in res_j:
                return True
        return False
