"""Client for the inventory REST backend."""

import json
import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from src.common.config.settings import settings
from src.common.dtos.stock_dtos import StockMovementRequestDTO, item_from_api_response
from src.common.exceptions.custom_exceptions import APIError
from src.inventory_domain.domain.entities.item import Item

logger = logging.getLogger(__name__)


class InventoryApiClient:
    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None) -> None:
        self.base_url = (base_url or settings.INVENTORY_API_BASE_URL or "").rstrip("/")
        self.token = token or settings.INVENTORY_API_TOKEN
        self.timeout = settings.INVENTORY_API_TIMEOUT

        # Only reads are retried
        self.session = requests.Session()
        retry_strategy = Retry(
            total=3,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"],
            backoff_factor=1,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        if self.token:
            self.session.headers["Authorization"] = f"Bearer {self.token}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """Sends a request and returns the decoded JSON body (None for empty bodies)."""
        if not self.base_url:
            raise APIError("INVENTORY_API_BASE_URL is not set in environment variables.")

        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise APIError(f"{method} {path} timed out", original_exception=e)
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise APIError(
                f"{method} {path} failed: {self._error_message(e.response)}",
                original_exception=e,
                status_code=status_code,
            )
        except requests.exceptions.RequestException as e:
            raise APIError(f"{method} {path} failed: {e}", original_exception=e)

        if not response.content:
            return None
        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise APIError(f"Failed to decode JSON response from {method} {path}", original_exception=e)

    @staticmethod
    def _error_message(response: Optional[requests.Response]) -> str:
        if response is None:
            return "no response"
        try:
            return response.json().get("message") or response.reason
        except (ValueError, AttributeError):
            return response.reason or "unknown error"

    def create_stock(self, request: StockMovementRequestDTO) -> Any:
        """Posts a stock adjustment to ``/stock`` and returns the backend's response body."""
        logger.info(f"Creating stock {request.operation} of {request.quantity} for item {request.item_id}")
        return self._request("POST", "/stock", json=request.to_payload())

    def register_stock_movement(self, request: StockMovementRequestDTO) -> None:
        """Posts a movement to ``/stock/movement``."""
        logger.info(f"Registering stock movement for item {request.item_id}")
        self._request("POST", "/stock/movement", json=request.to_payload())

    def get_items(
        self,
        page: int = 1,
        limit: int = 6,
        name: Optional[str] = None,
        below_min_stock: Optional[bool] = None,
    ) -> list[Item]:
        """Fetches one page of items from ``/items``."""
        params: dict[str, Any] = {"page": page, "limit": limit}
        if name:
            params["name"] = name
        if below_min_stock is not None:
            params["below_min_stock"] = str(below_min_stock).lower()

        data = self._request("GET", "/items", params=params) or {}
        return [item_from_api_response(entry) for entry in data.get("items", [])]
