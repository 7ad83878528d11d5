from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class HostingPort(ABC):
    """Repository hosting operations. Failures raise ``UpstreamError``."""

    @abstractmethod
    async def get_repository(self, owner: str, name: str) -> dict[str, Any]:
        """Return repository metadata; raise ``UpstreamNotFound`` when absent."""

    @abstractmethod
    async def create_repository(self, name: str) -> dict[str, Any]:
        """Create a public, auto-initialised repository for the authenticated account."""

    @abstractmethod
    async def put_contents(
        self,
        owner: str,
        repo: str,
        path: str,
        *,
        message: str,
        content_b64: str,
        branch: str,
    ) -> dict[str, Any]:
        """Create a file at ``path`` in a single commit."""

    async def aclose(self) -> None:
        """Release network resources held by the adapter."""
        return None
