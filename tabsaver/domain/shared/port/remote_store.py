"""Port for authenticated JSON calls against the remote store's HTTP API."""

from abc import abstractmethod
from typing import Any, Literal, Protocol

from tabsaver.domain.shared.port import Port

Method = Literal["GET", "POST", "PATCH"]


class RemoteStore(Port, Protocol):
    """Issues one request and returns the decoded JSON body.

    Raises:
        ConfigError: credential is empty.
        TransportError: the store could not be reached or the deadline passed.
        RemoteError: the store answered with a non-success status.
    """

    @abstractmethod
    async def request(
        self,
        path: str,
        *,
        method: Method = "GET",
        credential: str,
        body: dict[str, Any] | None = None,
        deadline: float | None = None,
    ) -> dict[str, Any]: ...
