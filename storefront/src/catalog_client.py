"""
REST client for the hosted products table.

Pulls catalog rows page by page from the backend's REST endpoint
({supabase_url}/rest/v1/{table}). Requests are rate limited and retried
with backoff, both on connection errors and on 429/5xx responses; anything
that still fails is raised as CatalogFetchError.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from shared.http_utils import RateLimiter, build_api_headers, retry_request
from storefront.src.models import CatalogProduct

# Statuses worth another attempt
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

# Featured first, newest next; id keeps offset pages stable on equal timestamps
PRODUCT_ORDER = "featured.desc,created_at.desc,id.asc"


class CatalogFetchError(RuntimeError):
    """Raised when catalog products cannot be fetched from the backend."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransientStatusError(requests.HTTPError):
    """HTTP error for a status in RETRY_STATUS_CODES."""


class CatalogClient:
    """Reads catalog products from the hosted backend."""

    def __init__(
        self,
        config: Dict[str, Any],
        http_get: Optional[Callable[..., Any]] = None,
        log: Callable[[str], None] = logging.info
    ):
        """
        Initialize client.

        Args:
            config: Configuration dict (supabase_url, supabase_key,
                products_table, page_size, timeout, min_request_delay,
                max_retries)
            http_get: HTTP GET function (defaults to a retrying requests.Session)
            log: Logging function
        """
        self.base_url = (config.get("supabase_url") or "").rstrip("/")
        self.api_key = config.get("supabase_key") or ""
        self.table = config.get("products_table") or "products"
        self.page_size = max(1, int(config.get("page_size", 1000)))
        self.timeout = float(config.get("timeout", 30))
        self.max_retries = max(1, int(config.get("max_retries", 3)))
        self.rate_limiter = RateLimiter(float(config.get("min_request_delay", 0)))
        self.log = log

        if http_get is None:
            self.session = self._create_http_session()
            http_get = self.session.get
        self.http_get = http_get

    def _create_http_session(self) -> requests.Session:
        """
        Create HTTP session with retry logic.

        Returns:
            Configured requests Session
        """
        session = requests.Session()

        retry_strategy = Retry(
            total=self.max_retries,
            backoff_factor=1,
            status_forcelist=list(RETRY_STATUS_CODES),
            allowed_methods=["GET"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def _get_page(self, params: Dict[str, Any]) -> List[CatalogProduct]:
        """Fetch one page; raises requests exceptions for retry."""
        self.rate_limiter.wait()
        response = self.http_get(
            self.endpoint,
            params=params,
            headers=build_api_headers(self.api_key),
            timeout=self.timeout,
        )
        if response.status_code in RETRY_STATUS_CODES:
            raise TransientStatusError(f"HTTP {response.status_code}", response=response)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, list):
            raise CatalogFetchError(f"Unexpected response from {self.endpoint}: expected a list of rows")
        return data

    def fetch_products(self, filters: Optional[Dict[str, str]] = None) -> List[CatalogProduct]:
        """
        Fetch every product row, following pages until a short page.

        Args:
            filters: Extra REST filters, e.g. {"status": "eq.active"}

        Returns:
            List of product rows in backend order

        Raises:
            CatalogFetchError: On missing credentials or request failure
        """
        if not self.base_url or not self.api_key:
            raise CatalogFetchError("Backend URL and API key must be configured (supabase_url, supabase_key)")

        products: List[CatalogProduct] = []
        offset = 0

        while True:
            params = {"select": "*", "order": PRODUCT_ORDER, "offset": offset, "limit": self.page_size}
            params.update(filters or {})

            try:
                page = retry_request(
                    self._get_page,
                    params,
                    max_retries=self.max_retries,
                    retry_on=(requests.ConnectionError, requests.Timeout, TransientStatusError),
                )
            except requests.HTTPError as e:
                status = e.response.status_code if e.response is not None else None
                raise CatalogFetchError(f"Backend returned HTTP {status} for {self.endpoint}", status_code=status) from e
            except (requests.RequestException, ValueError) as e:
                raise CatalogFetchError(f"Failed to fetch products from {self.endpoint}: {e}") from e

            products.extend(page)
            self.log(f"Fetched {len(page)} products (offset {offset})")

            if len(page) < self.page_size:
                break
            offset += self.page_size

        return products
