class UnknownCurrency(ValueError):
    def __init__(self, code):
        self.code = code
        super().__init__(f"{code} is not supported as currency")


class FetchError(Exception):
    """Base of the errors returned by RateFetcher.fetch. str() gives a message to show as is."""


class RateLimited(FetchError):
    def __init__(self, detail: str = None):
        self.detail = detail
        super().__init__("rate limit of the quote provider is reached. please retry later.")


class RequestFailed(FetchError):
    def __init__(self, currency, detail: str = None):
        self.currency = currency
        self.detail = detail
        code = getattr(currency, "value", currency)
        super().__init__(f"failed to get the rate of {code}/JPY")


class AlreadyInProgress(FetchError):
    def __init__(self):
        super().__init__("rates are being updated. wait until it finishes.")
