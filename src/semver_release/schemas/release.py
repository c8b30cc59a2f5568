"""Request bodies for the GitHub git refs and releases endpoints."""

from pydantic import BaseModel


class CreateReferenceRequest(BaseModel):
    """Body of ``POST /repos/{owner}/{repo}/git/refs``."""

    ref: str
    sha: str


class CreateReleaseRequest(BaseModel):
    """Body of ``POST /repos/{owner}/{repo}/releases``."""

    tag_name: str
    target_commitish: str
    name: str
    body: str | None = None
    draft: bool = False
    prerelease: bool = False
