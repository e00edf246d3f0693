"""Exceptions raised by the stake adapter"""


class StakeAdapterError(Exception):
    """Base class for adapter failures surfaced to the caller"""


class CommitteeUnavailable(StakeAdapterError):
    """Every committee endpoint failed or returned nothing usable"""

    def __init__(self, urls, last_error=None):
        self.urls = list(urls)
        self.last_error = last_error
        message = f"committee endpoint unavailable (tried: {', '.join(self.urls)})"
        if last_error is not None:
            message += f": {last_error}"
        super().__init__(message)
