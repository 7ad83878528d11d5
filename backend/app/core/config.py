from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_dotenv() -> None:
    if os.getenv("RELAY_SKIP_DOTENV") == "1":
        return

    env_path = Path(__file__).resolve().parents[2] / ".env"
    if not env_path.exists():
        return

    from dotenv import load_dotenv

    load_dotenv(env_path, override=False)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_positive_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    raw = value.strip()
    if not raw:
        return default
    try:
        parsed = int(raw)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class Settings:
    app_name: str
    github_token: str
    github_owner: str
    github_branch: str
    github_repos: tuple[str, ...]
    github_api_base: str
    user_agent: str
    hosting_backend: str
    http_timeout_seconds: int
    cors_origins: list[str]
    static_dir: Path
    host: str
    port: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv()

    cors = os.getenv("RELAY_CORS_ORIGINS", "*")
    api_base = os.getenv("GITHUB_API_BASE", "https://api.github.com").strip() or "https://api.github.com"

    return Settings(
        app_name="GitHub File Upload",
        github_token=os.getenv("GITHUB_TOKEN", "").strip(),
        github_owner=os.getenv("GITHUB_OWNER", "").strip(),
        github_branch=os.getenv("GITHUB_BRANCH", "main").strip() or "main",
        github_repos=tuple(_split_csv(os.getenv("GITHUB_REPOS", ""))),
        github_api_base=api_base.rstrip("/"),
        user_agent=os.getenv("RELAY_USER_AGENT", "github-upload-relay").strip() or "github-upload-relay",
        hosting_backend=os.getenv("RELAY_HOSTING_BACKEND", "github").strip().lower() or "github",
        http_timeout_seconds=_parse_positive_int(os.getenv("RELAY_HTTP_TIMEOUT_SECONDS"), default=30),
        cors_origins=_split_csv(cors) or ["*"],
        static_dir=Path(os.getenv("RELAY_STATIC_DIR", "public")),
        host=os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=_parse_positive_int(os.getenv("PORT"), default=3000),
    )
