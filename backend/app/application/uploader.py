from __future__ import annotations

import base64
import logging
import random
from dataclasses import dataclass
from typing import Callable

from app.application.resolver import RepositoryResolver
from app.domain.errors import UpstreamError, UploadError
from app.infra.ports.hosting import HostingPort
from app.utils.ids import epoch_millis, new_hex_code, new_repo_name
from app.utils.mime import sniff_extension

logger = logging.getLogger(__name__)

UPLOAD_PREFIX = "uploads"
RAW_CONTENT_BASE = "https://raw.githubusercontent.com"


@dataclass(frozen=True)
class UploadResult:
    url: str
    repository: str
    path: str
    filename: str


def build_raw_url(owner: str, repo: str, branch: str, path: str) -> str:
    return f"{RAW_CONTENT_BASE}/{owner}/{repo}/{branch}/{path}"


class ContentUploader:
    def __init__(
        self,
        *,
        hosting: HostingPort,
        owner: str,
        branch: str,
        repos: tuple[str, ...] | list[str],
        rng: random.Random | None = None,
        repo_name_factory: Callable[[], str] = new_repo_name,
    ):
        self.hosting = hosting
        self.owner = owner
        self.branch = branch
        self.repos = tuple(repos)
        self.resolver = RepositoryResolver(hosting=hosting, owner=owner)
        self._rng = rng or random.Random()
        self._repo_name_factory = repo_name_factory

    def _candidate_strategies(self) -> list[tuple[str, Callable[[], str]]]:
        strategies: list[tuple[str, Callable[[], str]]] = []
        if self.repos:
            strategies.append(("pool", lambda: self._rng.choice(self.repos)))
        strategies.append(("generated", self._repo_name_factory))
        return strategies

    async def resolve_target(self) -> tuple[str, bool]:
        """Pick a repository that exists, trying a pool member first and a fresh name second.

        Returns the repository name and whether it was created along the way.
        The error of the last strategy propagates when none succeeds.
        """
        strategies = self._candidate_strategies()
        for attempt, (label, pick) in enumerate(strategies, start=1):
            name = pick()
            try:
                created = await self.resolver.ensure_repo_exists(name)
            except Exception as exc:
                reason = exc.describe() if isinstance(exc, UpstreamError) else str(exc)
                logger.warning("Could not use %s repository %s: %s", label, name, reason)
                if attempt == len(strategies):
                    raise
                continue
            return name, created

        raise RuntimeError("No repository candidates configured")

    async def upload_file(self, payload: bytes) -> UploadResult:
        if not payload:
            raise ValueError("Cannot upload an empty file")

        ext = sniff_extension(payload)
        filename = f"{new_hex_code()}-{epoch_millis()}.{ext}"
        path = f"{UPLOAD_PREFIX}/{filename}"
        content_b64 = base64.b64encode(payload).decode("ascii")

        repo, created = await self.resolve_target()

        try:
            await self.hosting.put_contents(
                self.owner,
                repo,
                path,
                message=f"Upload file {filename}",
                content_b64=content_b64,
                branch=self.branch,
            )
        except UpstreamError as exc:
            logger.error(
                "Upload error for %s/%s (status=%s): %s",
                repo,
                path,
                exc.status_code,
                exc.message or exc.detail,
            )
            if created:
                # No deletion path; the new repository stays behind empty.
                logger.warning("Repository %s was created but holds no upload", repo)
            raise UploadError(f"Failed to upload file: {exc.describe()}") from exc

        return UploadResult(
            url=build_raw_url(self.owner, repo, self.branch, path),
            repository=repo,
            path=path,
            filename=filename,
        )
