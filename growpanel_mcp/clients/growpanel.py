"""
GrowPanel Reports Client

This module provides the client for the upstream GrowPanel reports API.

Contract:
- One GET per call against ``{base_url}/reports/{report_kind}``
- Every present filter becomes a query parameter; None fields are omitted
- ``Authorization: Bearer <token>``; a missing token is a ConfigurationError
  raised before any network attempt
- Non-2xx responses raise UpstreamError with status code, reason and body
- A 2xx body that is not JSON raises UpstreamPayloadError
- No retry, no timeout, no caching

Pattern: Client adapter for an external service
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx
from pydantic import BaseModel, SecretStr

from growpanel_mcp.clients.http import create_http_client
from growpanel_mcp.core.config import DEFAULT_API_URL
from growpanel_mcp.core.exceptions import (
    ConfigurationError,
    UpstreamError,
    UpstreamPayloadError,
)
from growpanel_mcp.observability.logging import get_logger

logger = get_logger(__name__)

TOKEN_ENV_VAR = "GROWPANEL_API_TOKEN"


class GrowPanelClient:
    """
    Client for the GrowPanel reports API.

    Example:
        >>> client = GrowPanelClient(api_token="secret")
        >>> payload = await client.fetch_report("mrr", filters)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_token: Union[SecretStr, str, None] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize GrowPanelClient.

        Args:
            base_url: Base URL of the reports API
            api_token: Bearer credential (plain or SecretStr)
            http_client: Optional pre-configured HTTP client (for testing)
        """
        if isinstance(api_token, str):
            api_token = SecretStr(api_token)
        self._api_token = api_token

        if http_client is not None:
            self._client = http_client
            self._owns_client = False
        else:
            self._client = create_http_client(base_url=base_url or DEFAULT_API_URL)
            self._owns_client = True

    async def close(self) -> None:
        """Close the HTTP client if owned by this instance."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "GrowPanelClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def fetch_report(
        self,
        report_kind: str,
        filters: Union[BaseModel, Mapping[str, Any]],
    ) -> Any:
        """
        Fetch one report.

        Args:
            report_kind: Report path segment (mrr, leads, cohort)
            filters: Validated filters (model or mapping)

        Returns:
            The decoded JSON payload.

        Raises:
            ConfigurationError: If no API token is configured
            UpstreamError: If the request fails or the status is not 2xx
            UpstreamPayloadError: If the body is not valid JSON
        """
        token = self._api_token.get_secret_value() if self._api_token else ""
        if not token:
            raise ConfigurationError(
                f"{TOKEN_ENV_VAR} environment variable is required",
                setting=TOKEN_ENV_VAR,
            )

        params = build_query_params(filters)
        logger.info("upstream request", report=report_kind, params=params)

        try:
            response = await self._client.get(
                f"/reports/{report_kind}",
                params=params,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as e:
            logger.error("upstream unreachable", report=report_kind, error=str(e))
            raise UpstreamError(f"API request failed: {e}") from e

        logger.info(
            "upstream response",
            report=report_kind,
            status_code=response.status_code,
        )

        if not response.is_success:
            body = response.text
            logger.error(
                "upstream error response",
                report=report_kind,
                status_code=response.status_code,
                body=body,
            )
            raise UpstreamError(
                f"API call failed: {response.status_code} {response.reason_phrase} - {body}",
                status_code=response.status_code,
                status_text=response.reason_phrase,
                body=body,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamPayloadError(
                f"API returned a non-JSON body: {e}",
                status_code=response.status_code,
                status_text=response.reason_phrase,
                body=response.text,
            ) from e


def build_query_params(filters: Union[BaseModel, Mapping[str, Any]]) -> dict[str, str]:
    """
    Serialize filters into query parameters, preserving field order.

    None values are dropped entirely rather than sent as empty strings.
    """
    values = filters.model_dump() if isinstance(filters, BaseModel) else dict(filters)
    return {key: str(value) for key, value in values.items() if value is not None}
