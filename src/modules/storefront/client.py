from typing import Any, Optional

import requests
import structlog
from decouple import config

from modules.storefront.exceptions import ProductAPIError

logger = structlog.get_logger(__name__)

STOREFRONT_API_URL = config("STOREFRONT_API_URL", default="http://localhost:8000")
STOREFRONT_API_TIMEOUT = config("STOREFRONT_API_TIMEOUT", default=5.0, cast=float)


class ProductAPIClient:
    """HTTP client for the catalog's product endpoints.

    Calls are made once; there is no retry or backoff.  Any transport error
    or status >= 400 raises ``ProductAPIError``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or STOREFRONT_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else STOREFRONT_API_TIMEOUT
        self.session = session or requests.Session()

    def list_products(self) -> list[dict]:
        return self._request("GET", "/api/products").json()

    def get_product(self, product_id: str) -> Optional[dict]:
        resp = self._request("GET", "/api/product", params={"id": product_id})
        if not resp.content:
            return None
        return resp.json()

    def create_product(self, payload: dict) -> dict:
        return self._request("POST", "/api/product", json=payload).json()

    def delete_product(self, product_id: str) -> None:
        self._request("DELETE", "/api/product", params={"id": product_id})

    def _request(self, method: str, path: str, **kwargs: Any):
        url = f"{self.base_url}{path}"
        logger.info("storefront.api_request", method=method, url=url)

        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("storefront.api_unreachable", method=method, url=url, error=str(exc))
            raise ProductAPIError(f"{method} {url} failed: {exc}") from exc

        if resp.status_code >= 400:
            body = resp.content.decode("utf-8", "replace")
            logger.warning(
                "storefront.api_error", method=method, url=url, status_code=resp.status_code
            )
            raise ProductAPIError(body or f"HTTP {resp.status_code}", status_code=resp.status_code)
        return resp
