"""Typed request/response models for the Hangar plugin repository API."""

from __future__ import annotations

from hangar_api.client import fetch, fetch_sync
from hangar_api.decoding import DecodeError, HangarError, decode
from hangar_api.models import (
    BASE_API_URL,
    HANGAR_URL,
    ActualLink,
    ByPlatform,
    Category,
    Channel,
    ChannelFlag,
    Donation,
    ExternalDownload,
    FileInfo,
    InternalDownload,
    License,
    Link,
    Namespace,
    Pagination,
    PaginationResponse,
    PinnedStatus,
    Platform,
    PluginDependency,
    Project,
    ProjectSettings,
    ProjectsResponse,
    ProjectsSort,
    ProjectStats,
    ProjectTag,
    ReviewState,
    UserActions,
    Version,
    VersionDownloads,
    VersionsResponse,
    VersionStats,
    Visibility,
)
from hangar_api.requests import (
    HangarRequest,
    PageRequest,
    ProjectRequest,
    ProjectsRequest,
    VersionRequest,
    VersionsRequest,
)

__all__ = [
    "BASE_API_URL",
    "HANGAR_URL",
    "ActualLink",
    "ByPlatform",
    "Category",
    "Channel",
    "ChannelFlag",
    "DecodeError",
    "Donation",
    "ExternalDownload",
    "FileInfo",
    "HangarError",
    "HangarRequest",
    "InternalDownload",
    "License",
    "Link",
    "Namespace",
    "PageRequest",
    "Pagination",
    "PaginationResponse",
    "PinnedStatus",
    "Platform",
    "PluginDependency",
    "Project",
    "ProjectRequest",
    "ProjectSettings",
    "ProjectStats",
    "ProjectTag",
    "ProjectsRequest",
    "ProjectsResponse",
    "ProjectsSort",
    "ReviewState",
    "UserActions",
    "Version",
    "VersionDownloads",
    "VersionRequest",
    "VersionStats",
    "VersionsRequest",
    "VersionsResponse",
    "Visibility",
    "decode",
    "fetch",
    "fetch_sync",
]
