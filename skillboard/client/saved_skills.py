"""
Two-tier saved skills: the server list is authoritative, a local JSON file
mirrors it for offline reads.

The cache is only ever written with a list the server has just returned,
so it can lag the server but never disagree with a confirmed state.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from skillboard.client.api_client import SkillBoardClient
from skillboard.errors import InvalidArgument

logger = logging.getLogger(__name__)


def default_cache_dir() -> Path:
    return Path(os.getenv("SKILLBOARD_CACHE_DIR", Path.home() / ".cache" / "skillboard"))


class SavedSkillsCache:
    def __init__(self, cache_dir: Optional[Path] = None):
        self.cache_dir = Path(cache_dir or default_cache_dir())

    def _path(self, user_id: int) -> Path:
        return self.cache_dir / f"saved_skills_{user_id}.json"

    def read(self, user_id: int) -> List[str]:
        path = self._path(user_id)
        if not path.exists():
            return []
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable saved skills cache %s: %s", path, exc)
            return []
        if not isinstance(payload, list):
            return []
        return [str(name) for name in payload]

    def write(self, user_id: int, saved_skills: List[str]) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(user_id)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(list(saved_skills)), encoding="utf-8")
        tmp_path.replace(path)

    def clear(self, user_id: int) -> None:
        self._path(user_id).unlink(missing_ok=True)


class SavedSkillsStore:
    def __init__(self, client: SkillBoardClient, user_id: int, cache: Optional[SavedSkillsCache] = None):
        self.client = client
        self.user_id = user_id
        self.cache = cache or SavedSkillsCache()
        self.saved_skills: List[str] = []

    def cached(self) -> List[str]:
        """Offline read; also primes ``saved_skills`` until a refresh lands."""
        self.saved_skills = self.cache.read(self.user_id)
        return list(self.saved_skills)

    def refresh(self) -> List[str]:
        return self._replace(self.client.get_saved_skills())

    def toggle(self, skill_name: str) -> List[str]:
        """
        Toggle on the server, then replace local state with its answer.

        Errors propagate and leave both the in-memory list and the cache
        untouched.
        """
        if not skill_name or not skill_name.strip():
            raise InvalidArgument("skill_name is required")
        return self._replace(self.client.toggle_saved_skill(skill_name))

    def is_saved(self, skill_name: str) -> bool:
        return skill_name in self.saved_skills

    def _replace(self, confirmed: List[str]) -> List[str]:
        self.saved_skills = list(confirmed)
        self.cache.write(self.user_id, self.saved_skills)
        return list(self.saved_skills)
