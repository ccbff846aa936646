from __future__ import annotations

import logging
import os
from typing import Any

import requests
from pydantic import ValidationError

from skillboard.errors import UpstreamFailure, error_for_status
from skillboard.schemas.overview import PageResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 20


def default_api_base_url() -> str:
    return os.getenv("SKILLBOARD_API_BASE_URL", "http://localhost:8000").rstrip("/")


def _error_message(response: Any) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(payload, dict):
        detail = payload.get("detail") or payload.get("message")
        if detail:
            return str(detail)
    return f"HTTP {response.status_code}"


class SkillBoardClient:
    """
    Thin JSON client for the SkillBoard API.

    ``session`` is anything with a requests-style ``request`` method; tests
    pass FastAPI's ``TestClient``. Failures are raised as the classes in
    ``skillboard.errors`` (network errors become ``UpstreamFailure``).
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        token: str | None = None,
        session: Any = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = (base_url or default_api_base_url()).rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request_json(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        headers = dict(kwargs.pop("headers", None) or {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        url = f"{self.base_url}{path}"

        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise UpstreamFailure(f"Could not reach {self.base_url}") from exc

        if response.status_code >= 400:
            raise error_for_status(response.status_code, _error_message(response))

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("%s %s returned a non-JSON body", method, url)
            raise UpstreamFailure("Invalid JSON response") from exc
        if not isinstance(payload, dict):
            raise UpstreamFailure("Expected JSON object response")
        return payload

    # ===== AUTH =====

    def signin(self, password: str, *, email: str | None = None, mobile: str | None = None) -> dict[str, Any]:
        payload = self._request_json(
            "POST",
            "/auth/signin",
            json={"email": email, "mobile": mobile, "password": password},
        )
        self.token = payload["token"]
        return payload["user"]

    def me(self) -> dict[str, Any]:
        return self._request_json("GET", "/auth/me")["user"]

    # ===== SKILL BOARD =====

    def get_overview(self, page: int = 1, limit: int = 10) -> PageResult:
        payload = self._request_json(
            "GET",
            "/skills/overview",
            params={"page": page, "limit": limit},
        )
        try:
            return PageResult.model_validate(payload)
        except ValidationError as exc:
            raise UpstreamFailure("Malformed overview response") from exc

    def get_categories(self) -> list[str]:
        return list(self._request_json("GET", "/skills/categories")["categories"])

    # ===== SAVED SKILLS =====

    def get_saved_skills(self) -> list[str]:
        return list(self._request_json("GET", "/users/saved-skills")["savedSkills"])

    def toggle_saved_skill(self, skill_name: str) -> list[str]:
        payload = self._request_json(
            "POST",
            "/users/saved-skills",
            json={"skillName": skill_name},
        )
        return list(payload["savedSkills"])
