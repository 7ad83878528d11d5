from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.domain.errors import UpstreamError
from app.infra.ports.hosting import HostingPort

logger = logging.getLogger(__name__)


class GitHubHosting(HostingPort):
    """GitHub REST adapter sharing one connection pool across calls."""

    provider_name = "github"

    def __init__(
        self,
        *,
        token: str,
        api_base: str = "https://api.github.com",
        user_agent: str = "github-upload-relay",
        timeout_seconds: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = httpx.AsyncClient(
            base_url=self.api_base,
            headers={
                "Authorization": f"Bearer {token}",
                "User-Agent": user_agent,
                "Accept": "application/vnd.github+json",
            },
            timeout=timeout_seconds,
            transport=transport,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, *, payload: dict | None = None) -> dict[str, Any]:
        try:
            response = await self._client.request(method, path, json=payload)
        except httpx.HTTPError as exc:
            raise UpstreamError.from_transport(exc) from exc

        if response.is_success:
            return _json_or_empty(response)

        body = _json_or_empty(response)
        logger.debug("GitHub %s %s -> %s: %s", method, path, response.status_code, body)
        raise UpstreamError.from_status(response.status_code, body)

    async def get_repository(self, owner: str, name: str) -> dict[str, Any]:
        return await self._request("GET", f"/repos/{quote(owner)}/{quote(name)}")

    async def create_repository(self, name: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/user/repos",
            payload={"name": name, "private": False, "auto_init": True},
        )

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
        return await self._request(
            "PUT",
            f"/repos/{quote(owner)}/{quote(repo)}/contents/{quote(path)}",
            payload={"message": message, "content": content_b64, "branch": branch},
        )


def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
