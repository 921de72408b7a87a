"""
HTTP request utilities for catalog tools.

Provides REST header building, rate limiting and a retry helper.
"""

import logging
from typing import Optional, Dict, Any, Callable, Tuple, Type
import time


def build_api_headers(api_key: str) -> Dict[str, str]:
    """
    Build headers for the hosted backend's REST API.

    The API key is sent both as "apikey" and as the bearer token.

    Args:
        api_key: Project API key

    Returns:
        Dictionary of HTTP headers
    """
    return {
        "apikey": api_key,
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
        "Cache-Control": "no-cache",
    }


class RateLimiter:
    """
    Simple rate limiter for HTTP requests.

    Ensures minimum time between requests to respect server resources.
    """

    def __init__(self, min_delay_seconds: float = 1.0):
        """
        Initialize rate limiter.

        Args:
            min_delay_seconds: Minimum seconds between requests
        """
        self.min_delay = min_delay_seconds
        self.last_request_time: Optional[float] = None

    def wait(self) -> None:
        """
        Wait if necessary to respect rate limit.

        Call before making an HTTP request.
        """
        if self.last_request_time is not None:
            elapsed = time.time() - self.last_request_time
            if elapsed < self.min_delay:
                time.sleep(self.min_delay - elapsed)

        self.last_request_time = time.time()


def retry_request(
    func: Callable[..., Any],
    *args,
    max_retries: int = 3,
    backoff_factor: float = 1.5,
    initial_delay: float = 1.0,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
    **kwargs
) -> Any:
    """
    Retry a function with exponential backoff.

    Args:
        func: Function to call
        *args: Positional arguments to pass to func
        max_retries: Maximum number of attempts
        backoff_factor: Multiplier for delay between retries
        initial_delay: Seconds to wait before the second attempt
        retry_on: Exception types that trigger a retry; others propagate
        **kwargs: Keyword arguments to pass to func

    Returns:
        Result of func if successful

    Raises:
        Last exception if all retries fail
    """
    last_exception = None
    delay = initial_delay

    for attempt in range(max_retries):
        try:
            return func(*args, **kwargs)
        except retry_on as e:
            last_exception = e
            if attempt < max_retries - 1:
                logging.warning(
                    f"Attempt {attempt + 1}/{max_retries} failed ({type(e).__name__}: {e}), "
                    f"retrying in {delay:.1f}s"
                )
                time.sleep(delay)
                delay *= backoff_factor

    # All retries failed
    raise last_exception
