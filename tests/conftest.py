"""Shared payload fixtures shaped like real Hangar API responses."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def project_payload() -> dict[str, Any]:
    return {
        "id": 1021,
        "createdAt": "2022-12-20T14:45:25.123456Z",
        "name": "Maintenance",
        "namespace": {"owner": "kennytv", "slug": "Maintenance"},
        "stats": {
            "views": 40512,
            "downloads": 9876,
            "recentViews": 512,
            "recentDownloads": 128,
            "stars": 77,
            "watchers": 12,
        },
        "category": "admin_tools",
        "lastUpdated": "2023-03-01T08:00:00+01:00",
        "visibility": "public",
        "avatarUrl": "https://hangarcdn.papermc.io/avatars/project/1021.webp",
        "description": "Enable maintenance mode with a custom motd",
        "userActions": {"starred": False, "watching": False, "flagged": False},
        "settings": {
            "links": [
                {
                    "id": 0,
                    "type": "TOP",
                    "title": None,
                    "links": [
                        {"id": 0, "name": "Issues", "url": "https://github.com/kennytv/Maintenance/issues"},
                        {"id": 1, "name": "Discord"},
                    ],
                },
            ],
            "tags": ["SUPPORTS_FOLIA"],
            "license": {"name": None, "url": None, "type": "GPL"},
            "keywords": ["maintenance", "motd"],
            "sponsors": "",
            "donation": {"enable": False, "subject": ""},
        },
    }


@pytest.fixture
def version_payload() -> dict[str, Any]:
    return {
        "id": 5531,
        "createdAt": "2023-06-01T10:00:00.5Z",
        "name": "4.1.0",
        "visibility": "public",
        "description": "Fixes and Folia support",
        "stats": {"totalDownloads": 1200, "platformDownloads": {"PAPER": 1000, "VELOCITY": 200}},
        "author": "kennytv",
        "reviewState": "reviewed",
        "channel": {
            "createdAt": "2022-12-20T14:45:25Z",
            "name": "Release",
            "description": None,
            "color": "#009600",
            "flags": ["PINNED", "SENDS_NOTIFICATIONS"],
        },
        "pinnedStatus": "NONE",
        "downloads": {
            "PAPER": {
                "fileInfo": {
                    "name": "Maintenance-4.1.0.jar",
                    "sizeBytes": 318_213,
                    "sha256Hash": "ab" * 32,
                },
                "externalUrl": None,
                "downloadUrl": "https://hangarcdn.papermc.io/plugins/kennytv/Maintenance/versions/4.1.0/PAPER/Maintenance-4.1.0.jar",
            },
            "VELOCITY": {
                "fileInfo": None,
                "externalUrl": "https://github.com/kennytv/Maintenance/releases/tag/4.1.0",
                "downloadUrl": None,
            },
        },
        "pluginDependencies": {
            "PAPER": [
                {"name": "ProtocolLib", "required": False, "externalUrl": None, "platform": "PAPER"},
            ],
        },
        "platformDependencies": {"PAPER": ["1.19", "1.20"], "VELOCITY": ["3.2"]},
        "platformDependenciesFormatted": {"PAPER": ["1.19-1.20"], "VELOCITY": ["3.2"]},
    }
