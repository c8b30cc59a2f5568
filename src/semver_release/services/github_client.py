"""Async GitHub API client with token auth."""

from typing import Any

import httpx

from ..config import get_settings
from ..schemas.release import CreateReferenceRequest, CreateReleaseRequest


class GitHubClient:
    """Async GitHub API client authenticated with a static bearer token."""

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or get_settings().github_api_url
        self._token = token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubClient":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Accept": "application/vnd.github.v3+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=get_settings().request_timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()

    async def create_ref(
        self,
        owner: str,
        repo: str,
        ref: str,
        sha: str,
    ) -> dict[str, Any]:
        """Create a git reference, e.g. ``refs/tags/v1.0.0``."""
        assert self._client is not None
        payload = CreateReferenceRequest(ref=ref, sha=sha)
        response = await self._client.post(
            f"/repos/{owner}/{repo}/git/refs",
            json=payload.model_dump(),
        )
        response.raise_for_status()
        return response.json()

    async def create_release(
        self,
        owner: str,
        repo: str,
        payload: CreateReleaseRequest,
    ) -> dict[str, Any]:
        """
        Create a release.

        A null body is left out of the request so GitHub stores no notes.
        """
        assert self._client is not None
        response = await self._client.post(
            f"/repos/{owner}/{repo}/releases",
            json=payload.model_dump(exclude_none=True),
        )
        response.raise_for_status()
        return response.json()
