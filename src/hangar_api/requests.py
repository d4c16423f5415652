"""Request descriptors for the Hangar REST API.

Each request knows its target URL and the query parameters it sends. Sending
it is up to the caller's HTTP client; ``build`` produces an ``httpx.Request``
and ``decode`` turns the response body into the matching model.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, ClassVar

import httpx
from pydantic import ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from hangar_api.decoding import DecodeError, decode
from hangar_api.models import (
    BASE_API_URL,
    Category,
    HangarModel,
    Pagination,
    Platform,
    Project,
    ProjectsResponse,
    ProjectsSort,
    Version,
    VersionsResponse,
)

logger = logging.getLogger(__name__)

_JSON_STRING: TypeAdapter[str] = TypeAdapter(str)


class HangarRequest(HangarModel):
    """Base for all requests.

    Fields listed in ``path_fields`` go into the URL and are never sent as
    query parameters. Unset optional filters are left out of the query
    entirely: the server treats an absent filter differently from an empty one.
    Unknown options are rejected. Only the concrete requests below can be built.
    """

    model_config = ConfigDict(extra="forbid")

    path_fields: ClassVar[frozenset[str]] = frozenset()
    response_type: ClassVar[Any]

    @abstractmethod
    def endpoint(self) -> str:
        """Path of the endpoint relative to the API root."""
        raise NotImplementedError

    def url(self, base_url: str = BASE_API_URL) -> str:
        """Fully qualified URL this request is sent to."""
        return f"{base_url.rstrip('/')}{self.endpoint()}"

    def params(self) -> httpx.QueryParams:
        """Ordered query parameters with camelCase keys."""
        # LEARN: Building a list of pairs keeps declaration order, which is also the
        # order the parameters appear in the query string.
        items: list[tuple[str, Any]] = []
        for name, field in type(self).model_fields.items():
            if name in self.path_fields:
                continue
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, Pagination):
                items.append(("limit", value.limit))
                items.append(("offset", value.offset))
                continue
            items.append((field.alias or to_camel(name), value))
        return httpx.QueryParams(items)

    def build(
        self,
        client: httpx.Client | httpx.AsyncClient | None = None,
        *,
        base_url: str = BASE_API_URL,
    ) -> httpx.Request:
        """Build a GET request for the caller's transport.

        With a client, its ``build_request`` is used so client-level headers and
        cookies are applied.
        """
        url = self.url(base_url)
        logger.debug("Building GET %s", url)
        if client is not None:
            return client.build_request("GET", url, params=self.params())
        return httpx.Request("GET", url, params=self.params())

    def decode(self, body: Any) -> Any:
        """Decode a response body into this request's response type."""
        return decode(self.response_type, body)

    def with_options(self, **changes: Any) -> HangarRequest:
        """Return a validated copy with ``changes`` applied."""
        return self.model_validate({**self.model_dump(), **changes})


class ProjectsRequest(HangarRequest):
    """Searches all projects on Hangar, or those of a single user."""

    response_type: ClassVar[type[ProjectsResponse]] = ProjectsResponse

    prioritize_exact_match: bool | None = Field(
        default=None, description="Whether to put a project with an exact name match first"
    )
    pagination: Pagination
    sort: ProjectsSort | None = None
    category: Category | None = None
    platform: Platform | None = None
    owner: str | None = Field(default=None, description="Author of the project")
    query: str | None = Field(default=None, description="Free-text search")
    license: str | None = None
    version: str | None = Field(default=None, description="Platform version to filter for")
    tag: str | None = None
    member: str | None = Field(default=None, description="A member of the project")

    def endpoint(self) -> str:
        return "/projects"


class ProjectRequest(HangarRequest):
    """Returns a single project."""

    path_fields: ClassVar[frozenset[str]] = frozenset({"slug"})
    response_type: ClassVar[type[Project]] = Project

    slug: str

    def endpoint(self) -> str:
        return f"/projects/{self.slug}"


class PageRequest(HangarRequest):
    """Returns a page of a project.

    ``path`` is not part of the URL; it travels as the ``path`` query parameter.
    The endpoint answers with the page contents rather than a JSON object.
    """

    path_fields: ClassVar[frozenset[str]] = frozenset({"slug"})
    response_type: ClassVar[type[str]] = str

    slug: str
    path: str

    def endpoint(self) -> str:
        return f"/pages/page/{self.slug}"

    def decode(self, body: Any) -> str:
        if isinstance(body, bytes | bytearray):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DecodeError(str, [{"loc": (), "msg": f"page body is not UTF-8: {exc}"}]) from exc
        if not isinstance(body, str):
            raise DecodeError(str, [{"loc": (), "msg": f"expected page text, got {type(body).__name__}"}])
        # Some deployments wrap the page in a JSON string; anything else is the page as-is.
        if body.startswith('"'):
            try:
                return _JSON_STRING.validate_json(body)
            except ValidationError:
                logger.debug("Page body for %s starts with a quote but is not a JSON string", self.slug)
        return body


class VersionsRequest(HangarRequest):
    """Returns all versions of a project."""

    path_fields: ClassVar[frozenset[str]] = frozenset({"slug"})
    response_type: ClassVar[type[VersionsResponse]] = VersionsResponse

    slug: str
    pagination: Pagination
    include_hidden_channels: bool | None = Field(
        default=None, description="Whether to include hidden-by-default channels; the server defaults to true"
    )
    channel: str | None = Field(default=None, description="Name of a version channel to filter for")
    platform: Platform | None = None
    platform_version: str | None = None

    def endpoint(self) -> str:
        return f"/projects/{self.slug}/versions"


class VersionRequest(HangarRequest):
    """Returns one version of a project."""

    path_fields: ClassVar[frozenset[str]] = frozenset({"slug", "name"})
    response_type: ClassVar[type[Version]] = Version

    slug: str
    name: str

    def endpoint(self) -> str:
        return f"/projects/{self.slug}/versions/{self.name}"
