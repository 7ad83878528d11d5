from __future__ import annotations

from functools import lru_cache

from app.application.uploader import ContentUploader
from app.core.config import get_settings
from app.infra.hosting.github import GitHubHosting
from app.infra.hosting.mock import InMemoryHosting
from app.infra.ports.hosting import HostingPort


@lru_cache(maxsize=1)
def get_hosting() -> HostingPort:
    settings = get_settings()
    if settings.hosting_backend == "mock":
        return InMemoryHosting()
    if not settings.github_token:
        raise RuntimeError("GITHUB_TOKEN is required when RELAY_HOSTING_BACKEND=github")
    if not settings.github_owner:
        raise RuntimeError("GITHUB_OWNER is required when RELAY_HOSTING_BACKEND=github")
    return GitHubHosting(
        token=settings.github_token,
        api_base=settings.github_api_base,
        user_agent=settings.user_agent,
        timeout_seconds=settings.http_timeout_seconds,
    )


def get_uploader() -> ContentUploader:
    settings = get_settings()
    return ContentUploader(
        hosting=get_hosting(),
        owner=settings.github_owner,
        branch=settings.github_branch,
        repos=settings.github_repos,
    )


async def provide_uploader() -> ContentUploader:
    return get_uploader()
