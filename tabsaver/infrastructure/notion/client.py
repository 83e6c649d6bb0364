"""httpx adapter for the RemoteStore port (Notion REST API)."""

import logging
from typing import Any

import httpx

from tabsaver.config import NotionConfig
from tabsaver.domain.shared.error import ConfigError, RemoteError, TransportError
from tabsaver.domain.shared.port.remote_store import Method, RemoteStore

logger = logging.getLogger(__name__)

# Connection setup is bounded separately from the per-call deadline.
CONNECT_TIMEOUT = 10.0

MISSING_CREDENTIAL = "Missing Notion API key. Set it in the configuration."


def _error_body(response: httpx.Response) -> str:
    """Best-effort textual body of an error response."""
    try:
        return response.text.strip()
    except (httpx.HTTPError, UnicodeDecodeError, ValueError):
        return ""


class HttpRemoteStore(RemoteStore):
    """Sends authenticated JSON requests through a shared ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient, config: NotionConfig) -> None:
        self._client = client
        self._config = config

    async def request(
        self,
        path: str,
        *,
        method: Method = "GET",
        credential: str,
        body: dict[str, Any] | None = None,
        deadline: float | None = None,
    ) -> dict[str, Any]:
        credential = (credential or "").strip()
        if not credential:
            raise ConfigError(MISSING_CREDENTIAL, code="missing_credential")

        url = f"{self._config.base_url.rstrip('/')}{path}"
        headers = {
            "Authorization": f"Bearer {credential}",
            "Notion-Version": self._config.version,
            "Content-Type": "application/json",
        }
        timeout = httpx.Timeout(
            deadline if deadline is not None else self._config.timeout,
            connect=CONNECT_TIMEOUT,
        )

        try:
            response = await self._client.request(
                method,
                url,
                headers=headers,
                json=body,
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            logger.error("Notion request timed out: %s %s", method, path)
            raise TransportError(f"Notion request timed out: {method} {path}") from e
        except httpx.TransportError as e:
            logger.error("Notion request failed: %s %s: %s", method, path, e)
            raise TransportError(f"Failed to connect to Notion: {e}") from e

        if not response.is_success:
            text = _error_body(response)
            logger.error(
                "Notion API error: %s %s status=%d, body=%s",
                method,
                path,
                response.status_code,
                text,
            )
            detail = text or response.reason_phrase or "Unknown"
            raise RemoteError(
                f"Notion API error {response.status_code}: {detail}",
                status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteError(
                "Notion API returned a non-JSON response",
                status=response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise RemoteError(
                f"Notion API returned unexpected JSON type: {type(data).__name__}",
                status=response.status_code,
            )
        return data
