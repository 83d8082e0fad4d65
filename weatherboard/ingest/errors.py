"""Failure taxonomy for backend requests."""


class WeatherboardError(Exception):
    """Base class for every error raised by the weatherboard client."""


class NetworkError(WeatherboardError):
    """Transport failure: connection refused, DNS, timeout."""


class HttpError(WeatherboardError):
    def __init__(self, status_code: int, url: str):
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class ParseError(WeatherboardError):
    """Malformed JSON or a payload missing expected fields."""


class FetchExhausted(WeatherboardError):
    def __init__(self, attempts: int, last_error: Exception):
        super().__init__(f"Gave up after {attempts} attempts: {last_error}")
        self.attempts = attempts
        self.last_error = last_error


RETRYABLE_ERRORS = (NetworkError, HttpError, ParseError)
