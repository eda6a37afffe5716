"""
Data Loader - Remote Row Retrieval over HTTP.

Builds GET urls from key/value parameters and fetches JSON with httpx.
Failures are soft: network, status and decoding errors are logged and an
empty result is returned so the calling pipeline keeps running.

Design Notes:
    - No timeout and no retries; retry policy belongs to the caller
    - An optional transport can be injected (e.g. ``httpx.MockTransport``)
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

from tabledata.config.models import GridSettings

logger = logging.getLogger(__name__)

# Characters left unescaped by JavaScript's encodeURIComponent.
_UNRESERVED = "-_.!~*'()"


def _encode(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe=_UNRESERVED)


class DataLoader:
    """Retrieve grid data from a remote JSON endpoint."""

    def __init__(
        self,
        settings: GridSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize loader.

        Args:
            settings: Grid settings providing ``ajax_url``
            transport: Optional httpx transport override
        """
        self.ajax_url = settings.ajax_url
        self._transport = transport

    def build_url(self, url: str, parameters: Optional[Mapping[str, Any]] = None) -> str:
        """
        Append parameters to url as a query string.

        List values repeat the key once per element. An existing query
        string is extended with ``&``.

        Args:
            url: Target url
            parameters: Key/value query parameters

        Returns:
            Fully qualified url
        """
        if not parameters:
            return url

        pairs = []
        for key, value in parameters.items():
            if isinstance(value, (list, tuple)):
                pairs.extend(f"{key}={_encode(v)}" for v in value)
            else:
                pairs.append(f"{key}={_encode(value)}")

        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{'&'.join(pairs)}"

    async def request_data(
        self,
        url: str,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Fetch JSON from url.

        Args:
            url: Target url
            parameters: Key/value query parameters

        Returns:
            Decoded JSON value, or an empty list on any failure
        """
        target_url = self.build_url(url, parameters)

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
                response = await client.get(
                    target_url, headers={"Accept": "application/json"}
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Remote source returned {e.response.status_code} for {target_url}")
        except httpx.HTTPError as e:
            logger.error(f"Request to {target_url} failed: {e}")
        except ValueError as e:
            logger.error(f"Invalid JSON from {target_url}: {e}")

        return []

    async def request_grid_data(self, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        """Fetch JSON from the grid's configured ``ajax_url``."""
        return await self.request_data(self.ajax_url, parameters)
