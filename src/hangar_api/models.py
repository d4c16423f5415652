"""Data models for the Hangar REST API.

Uses StrEnum for the closed value sets the server emits, so an unknown value
fails validation instead of slipping through as a bare string. Pydantic models
define the response shapes; every model is frozen and maps snake_case
attributes onto the camelCase keys used on the wire.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from enum import StrEnum
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, GetCoreSchemaHandler, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import core_schema

HANGAR_URL = "https://hangar.papermc.io"
BASE_API_URL = f"{HANGAR_URL}/api/v1"

T = TypeVar("T")


class HangarModel(BaseModel):
    """Base for every Hangar payload: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# --- Enums -------------------------------------------------------------------


class ProjectsSort(StrEnum):
    """Sort keys for project searches.

    Hangar sorts these highest/most-recent first, so every key except ``slug``
    carries the leading dash the server expects.
    """

    VIEWS = "-views"
    DOWNLOADS = "-downloads"
    NEWEST = "-newest"
    STARS = "-stars"
    UPDATED = "-updated"
    RECENT_DOWNLOADS = "-recent-downloads"
    RECENT_VIEWS = "-recent-views"
    SLUG = "slug"  # not inverted

    @property
    def descending(self) -> bool:
        return self.value.startswith("-")


class Category(StrEnum):
    """Project categories."""

    ADMIN_TOOLS = "admin_tools"
    CHAT = "chat"
    DEV_TOOLS = "dev_tools"
    ECONOMY = "economy"
    GAMEPLAY = "gameplay"
    GAMES = "games"
    PROTECTION = "protection"
    ROLE_PLAYING = "role_playing"
    WORLD_MANAGEMENT = "world_management"
    MISC = "misc"
    UNDEFINED = "undefined"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Admin Tools'."""
        return self.value.replace("_", " ").title()


class Platform(StrEnum):
    """Server platforms a project or version can target."""

    PAPER = "PAPER"
    WATERFALL = "WATERFALL"
    VELOCITY = "VELOCITY"

    @property
    def label(self) -> str:
        return self.value.title()


class Visibility(StrEnum):
    """Lifecycle state of a project or version."""

    PUBLIC = "public"
    NEW = "new"
    NEEDS_CHANGES = "needsChanges"
    NEEDS_APPROVAL = "needsApproval"
    SOFT_DELETE = "softDelete"


class ReviewState(StrEnum):
    UNREVIEWED = "unreviewed"
    REVIEWED = "reviewed"
    UNDER_REVIEW = "underReview"
    PARTIALLY_REVIEWED = "partiallyReviewed"


class ChannelFlag(StrEnum):
    FROZEN = "FROZEN"
    UNSTABLE = "UNSTABLE"
    PINNED = "PINNED"
    SENDS_NOTIFICATIONS = "SENDS_NOTIFICATIONS"
    HIDE_BY_DEFAULT = "HIDE_BY_DEFAULT"


class PinnedStatus(StrEnum):
    NONE = "NONE"
    VERSION = "VERSION"
    CHANNEL = "CHANNEL"


class ProjectTag(StrEnum):
    ADDON = "ADDON"
    LIBRARY = "LIBRARY"
    SUPPORTS_FOLIA = "SUPPORTS_FOLIA"


# --- Timestamps --------------------------------------------------------------

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(?:([Zz])|([+-])(\d{2}):(\d{2}))",
    re.ASCII,
)


def parse_rfc3339(value: Any) -> datetime:
    """Parse a strict RFC 3339 timestamp into an aware datetime.

    Date-only strings, timestamps without an offset and numeric epochs are all
    rejected. Fractional seconds past microsecond precision are truncated.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        return value
    if not isinstance(value, str):
        raise ValueError("expected an RFC 3339 timestamp string")

    match = _RFC3339.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")

    year, month, day, hour, minute, second, fraction, zulu, sign, off_hours, off_minutes = match.groups()
    if zulu:
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(off_hours), minutes=int(off_minutes))
        tz = timezone(-offset if sign == "-" else offset)

    microsecond = int((fraction or "0")[:6].ljust(6, "0"))
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        microsecond,
        tzinfo=tz,
    )


Timestamp = Annotated[datetime, BeforeValidator(parse_rfc3339)]


# --- Request-side values -----------------------------------------------------


class Pagination(HangarModel):
    """Page window for list requests. Accepts a ``(limit, offset)`` tuple too."""

    limit: int = Field(default=25, ge=0)
    offset: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def accept_pair(cls, data: Any) -> Any:
        if isinstance(data, tuple | list) and len(data) == 2:  # noqa: PLR2004
            limit, offset = data
            return {"limit": limit, "offset": offset}
        return data


# --- Per-platform map --------------------------------------------------------


class ByPlatform(HangarModel, Generic[T]):
    """Sparse map with at most one value per platform.

    A missing key means the data does not apply to that platform; ``get``
    never fills in a default.
    """

    paper: T | None = Field(default=None, alias="PAPER")
    waterfall: T | None = Field(default=None, alias="WATERFALL")
    velocity: T | None = Field(default=None, alias="VELOCITY")

    def get(self, platform: Platform) -> T | None:
        match platform:
            case Platform.PAPER:
                return self.paper
            case Platform.WATERFALL:
                return self.waterfall
            case Platform.VELOCITY:
                return self.velocity
        raise ValueError(f"Unknown platform: {platform!r}")

    def items(self) -> Iterator[tuple[Platform, T]]:
        """Yield ``(platform, value)`` pairs for present entries, Paper first."""
        for platform in Platform:
            value = self.get(platform)
            if value is not None:
                yield platform, value

    def platforms(self) -> list[Platform]:
        return [platform for platform, _ in self.items()]

    def __contains__(self, platform: object) -> bool:
        return isinstance(platform, Platform) and self.get(platform) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.items())


# --- Projects ----------------------------------------------------------------


class PaginationResponse(HangarModel):
    """Pagination echoed by the server for list endpoints."""

    limit: int
    offset: int
    count: int = Field(description="Total number of matching records")


class Namespace(HangarModel):
    owner: str
    slug: str

    @property
    def url(self) -> str:
        """Web page of the project on Hangar."""
        return f"{HANGAR_URL}/{self.owner}/{self.slug}"


class ProjectStats(HangarModel):
    views: int
    downloads: int
    recent_views: int
    recent_downloads: int
    stars: int
    watchers: int


class UserActions(HangarModel):
    """How the calling user has interacted with the project."""

    starred: bool
    watching: bool
    flagged: bool


class ActualLink(HangarModel):
    id: int
    name: str
    # Required by the published schema, but the server omits it in practice.
    url: str | None = None


class Link(HangarModel):
    """A group of links shown in one place on the project page."""

    id: int
    type: str = Field(description="Placement of the group, either SIDEBAR or TOP")
    title: str | None = None
    links: list[ActualLink]


class License(HangarModel):
    name: str | None = None
    url: str | None = None
    type: str


class Donation(HangarModel):
    enable: bool
    subject: str


class ProjectSettings(HangarModel):
    links: list[Link]
    tags: list[ProjectTag]
    license: License
    keywords: list[str]
    sponsors: str
    donation: Donation


class Project(HangarModel):
    """A project hosted on Hangar, unique by ``namespace.owner`` + ``namespace.slug``."""

    created_at: Timestamp
    name: str
    namespace: Namespace
    stats: ProjectStats
    category: Category
    last_updated: Timestamp
    visibility: Visibility
    avatar_url: str
    description: str
    user_actions: UserActions
    settings: ProjectSettings

    @property
    def slug(self) -> str:
        return self.namespace.slug

    @property
    def url(self) -> str:
        return self.namespace.url


class ProjectsResponse(HangarModel):
    pagination: PaginationResponse
    result: list[Project]


# --- Versions ----------------------------------------------------------------


class FileInfo(HangarModel):
    name: str
    size_bytes: int
    sha256_hash: str


class InternalDownload(HangarModel):
    """A file uploaded to Hangar itself."""

    file_info: FileInfo
    download_url: str

    @property
    def url(self) -> str:
        return self.download_url

    @property
    def external(self) -> bool:
        return False


class ExternalDownload(HangarModel):
    """A download hosted elsewhere; Hangar only knows the link."""

    external_url: str

    @property
    def url(self) -> str:
        return self.external_url

    @property
    def external(self) -> bool:
        return True


class _FirstMatchingShape:
    """Try the internal shape, then the external one; the server sends no tag.

    The first variant that validates wins. When neither does, a single
    ``download_shape`` error is reported at the downloads entry itself.
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.union_schema(
            [handler.generate_schema(InternalDownload), handler.generate_schema(ExternalDownload)],
            mode="left_to_right",
            custom_error_type="download_shape",
            custom_error_message="Expected either fileInfo and downloadUrl, or externalUrl",
        )


VersionDownloads = Annotated[InternalDownload | ExternalDownload, _FirstMatchingShape]


class PluginDependency(HangarModel):
    name: str = Field(description="Hangar project name, or a free-form name for external dependencies")
    required: bool
    external_url: str | None = None
    platform: Platform


class VersionStats(HangarModel):
    total_downloads: int
    platform_downloads: ByPlatform[int]


class Channel(HangarModel):
    """Release track a version is published in."""

    created_at: Timestamp
    name: str
    description: str | None = None
    color: str
    flags: list[ChannelFlag]


class Version(HangarModel):
    created_at: Timestamp
    name: str
    visibility: Visibility
    description: str
    stats: VersionStats
    author: str
    review_state: ReviewState
    channel: Channel
    pinned_status: PinnedStatus
    downloads: ByPlatform[VersionDownloads]
    plugin_dependencies: ByPlatform[list[PluginDependency]]
    platform_dependencies: ByPlatform[list[str]]
    platform_dependencies_formatted: ByPlatform[list[str]]


class VersionsResponse(HangarModel):
    pagination: PaginationResponse
    result: list[Version]
