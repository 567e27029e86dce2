"""Shared HTTP plumbing for the upstream catalog providers.

Every call is a single GET on the shared ``httpx.AsyncClient``. Failures are
terminal for that call: there is no retry and no cache.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, TransportError, UpstreamStatusError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class UpstreamClient:
    """Base for provider clients.

    Attributes:
        provider: Provider name used in error messages and logs.
    """

    provider = "upstream"

    def __init__(self, http: httpx.AsyncClient, base_url: str, api_key: str):
        self.http = http
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    async def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Execute a GET request and decode the JSON object body.

        Args:
            endpoint: Path appended to the base URL ("" for the base URL itself).
            params: Query parameters, credentials included.

        Returns:
            Decoded JSON object.

        Raises:
            TransportError: Network failure or timeout.
            UpstreamStatusError: Non-2xx response.
            DecodeError: Body is not a JSON object.
        """
        url = f"{self.base_url}{endpoint}" if endpoint else f"{self.base_url}/"
        try:
            response = await self.http.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.warning(f"{self.provider} request timeout", extra={"endpoint": endpoint})
            raise TransportError(self.provider, f"request timed out: {endpoint}") from e
        except httpx.RequestError as e:
            logger.warning(f"{self.provider} request failed", extra={"endpoint": endpoint, "error": str(e)})
            raise TransportError(self.provider, f"request failed: {endpoint}") from e

        return self._handle_response(response, endpoint)

    def _handle_response(self, response: httpx.Response, endpoint: str) -> Dict[str, Any]:
        if not response.is_success:
            if response.status_code >= 500:
                logger.error(f"{self.provider} API error {response.status_code}", extra={"endpoint": endpoint})
            else:
                logger.warning(f"{self.provider} API error {response.status_code}", extra={"endpoint": endpoint})
            raise UpstreamStatusError(self.provider, response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(self.provider, f"invalid JSON from {endpoint}") from e

        if not isinstance(payload, dict):
            raise DecodeError(self.provider, f"expected a JSON object from {endpoint}")
        return payload

    def _parse(self, model: Type[ModelT], payload: Dict[str, Any], endpoint: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(self.provider, f"unexpected payload from {endpoint}: {e.error_count()} errors") from e
