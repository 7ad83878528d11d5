from __future__ import annotations

import logging

from app.domain.errors import UpstreamNotFound
from app.infra.ports.hosting import HostingPort

logger = logging.getLogger(__name__)


class RepositoryResolver:
    def __init__(self, *, hosting: HostingPort, owner: str):
        self.hosting = hosting
        self.owner = owner

    async def ensure_repo_exists(self, name: str) -> bool:
        """Make sure ``owner/name`` exists, creating it when the API reports 404.

        Returns True when the repository was created by this call. Other
        failures, including a failed creation, propagate as ``UpstreamError``.
        """
        try:
            await self.hosting.get_repository(self.owner, name)
            return False
        except UpstreamNotFound:
            logger.info("Repository %s not found, creating it", name)

        await self.hosting.create_repository(name)
        logger.info("Repository %s created successfully", name)
        return True
