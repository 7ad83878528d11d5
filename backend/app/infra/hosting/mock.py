from __future__ import annotations

from typing import Any

from app.domain.errors import UpstreamError, UpstreamNotFound
from app.infra.ports.hosting import HostingPort


class InMemoryHosting(HostingPort):
    """In-process stand-in for the hosting API.

    Every call is appended to ``calls`` as ``(operation, repository)``. Names
    listed in ``failing`` answer every request with a 500.
    """

    provider_name = "mock"

    def __init__(self, *, existing: set[str] | None = None, failing: set[str] | None = None):
        self.repositories: set[str] = set(existing or ())
        self.failing: set[str] = set(failing or ())
        self.files: dict[tuple[str, str, str], dict[str, str]] = {}
        self.calls: list[tuple[str, str]] = []

    def _check(self, name: str) -> None:
        if name in self.failing:
            raise UpstreamError(
                status_code=500,
                message=f"Simulated failure for {name}",
                detail="Request failed with status code 500",
            )

    async def get_repository(self, owner: str, name: str) -> dict[str, Any]:
        self.calls.append(("get", name))
        self._check(name)
        if name not in self.repositories:
            raise UpstreamNotFound(status_code=404, message="Not Found", detail="Request failed with status code 404")
        return {"name": name, "full_name": f"{owner}/{name}"}

    async def create_repository(self, name: str) -> dict[str, Any]:
        self.calls.append(("create", name))
        self._check(name)
        self.repositories.add(name)
        return {"name": name, "private": False}

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
        self.calls.append(("put", repo))
        self._check(repo)
        if repo not in self.repositories:
            raise UpstreamNotFound(status_code=404, message="Not Found", detail="Request failed with status code 404")
        key = (repo, branch, path)
        if key in self.files:
            raise UpstreamError(
                status_code=422,
                message='Invalid request.\n\n"sha" wasn\'t supplied.',
                detail="Request failed with status code 422",
            )
        self.files[key] = {"message": message, "content": content_b64}
        return {"content": {"path": path}, "commit": {"message": message}}
