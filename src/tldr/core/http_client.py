"""HTTP client used to fetch article pages, with retries and rate limiting."""

import logging
import time
from typing import Optional, Dict

import requests

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "tldr/0.1 (extractive article summarizer)"
RETRYABLE_STATUS = (429, 500, 502, 503, 504)


class RetryableHTTPClient:
    """Page fetcher with exponential backoff and a requests-per-second cap.

    Throttling and server errors (429, 500, 502, 503, 504) are retried with
    exponential backoff, honouring Retry-After when the server sends one.
    Network errors are retried the same way and re-raised once attempts run out.

    Args:
        rps: Maximum requests per second (default: 1.0)
        max_retries: Maximum number of attempts (default: 3)
        timeout: Request timeout in seconds (default: 15)
        user_agent: User-Agent header sent with every request
    """

    def __init__(
        self,
        rps: float = 1.0,
        max_retries: int = 3,
        timeout: float = 15,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent})
        self.rps = rps
        self.max_retries = max(1, max_retries)
        self.timeout = timeout
        self.min_interval = 1.0 / max(rps, 0.01)
        self.last_request_time = 0.0

    def _rate_limit(self):
        now = time.time()
        elapsed = now - self.last_request_time
        if elapsed < self.min_interval:
            time.sleep(self.min_interval - elapsed)
        self.last_request_time = time.time()

    def get_with_retry(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Optional[requests.Response]:
        """GET *url*, retrying throttled and failed attempts.

        Returns:
            Response object on success, None on 404 or when every attempt was
            throttled.

        Raises:
            requests.HTTPError: On non-retryable HTTP errors
            requests.RequestException: On network errors after retries exhausted
        """
        timeout = timeout or self.timeout

        for attempt in range(self.max_retries):
            try:
                self._rate_limit()
                r = self.session.get(url, headers=headers, timeout=timeout)

                if r.status_code == 404:
                    logger.debug(f"Page not found: {url}")
                    return None

                if r.status_code in RETRYABLE_STATUS:
                    wait = self._calculate_backoff_time(r, attempt)
                    logger.debug(f"HTTP {r.status_code} from {url}; retrying in {wait:.1f}s")
                    time.sleep(wait)
                    continue

                r.raise_for_status()
                return r

            except requests.HTTPError:
                raise
            except requests.RequestException as e:
                if attempt < self.max_retries - 1:
                    wait = min(8.0, 2.0 ** attempt)
                    logger.debug(f"Request to {url} failed ({e}); retrying in {wait:.1f}s")
                    time.sleep(wait)
                    continue
                raise

        logger.warning(f"Giving up on {url} after {self.max_retries} throttled attempts")
        return None

    def _calculate_backoff_time(self, response: requests.Response, attempt: int) -> float:
        """Backoff delay, preferring the server's Retry-After header."""
        retry_after = response.headers.get("Retry-After")
        if retry_after:
            try:
                return max(float(retry_after), 1.0)
            except (ValueError, TypeError):
                pass
        # 1s, 2s, 4s, capped at 8s
        return min(8.0, 2.0 ** attempt)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
