"""Tests for decode() and DecodeError reporting."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from hangar_api.decoding import DecodeError, HangarError, decode
from hangar_api.models import PaginationResponse, Project
from hangar_api.requests import ProjectRequest, ProjectsRequest, VersionRequest


class TestDecode:
    def test_accepts_str_bytes_and_parsed_data(self):
        payload = {"limit": 25, "offset": 0, "count": 3}
        expected = PaginationResponse(limit=25, offset=0, count=3)
        assert decode(PaginationResponse, json.dumps(payload)) == expected
        assert decode(PaginationResponse, json.dumps(payload).encode()) == expected
        assert decode(PaginationResponse, payload) == expected

    def test_invalid_json_is_a_root_error(self):
        with pytest.raises(DecodeError) as excinfo:
            decode(PaginationResponse, "{not json")
        assert excinfo.value.paths == [""]
        assert "<root>" in str(excinfo.value)

    def test_wrong_top_level_type(self):
        with pytest.raises(DecodeError):
            decode(PaginationResponse, "[]")

    def test_missing_required_field(self):
        with pytest.raises(DecodeError) as excinfo:
            decode(PaginationResponse, '{"limit": 25, "offset": 0}')
        assert excinfo.value.paths == ["count"]

    def test_reports_every_failing_path(self, project_payload):
        project_payload["category"] = "cosmetics"
        del project_payload["name"]
        project_payload["stats"]["views"] = "lots"
        with pytest.raises(DecodeError) as excinfo:
            decode(Project, project_payload)
        assert sorted(excinfo.value.paths) == ["category", "name", "stats.views"]

    def test_error_carries_type_and_cause(self, project_payload):
        project_payload["visibility"] = "hidden"
        with pytest.raises(DecodeError) as excinfo:
            decode(Project, project_payload)
        error = excinfo.value
        assert error.response_type is Project
        assert isinstance(error.__cause__, ValidationError)
        assert error.errors[0]["type"] == "enum"
        assert "Project" in str(error)

    def test_error_hierarchy(self):
        assert issubclass(DecodeError, HangarError)
        assert issubclass(DecodeError, ValueError)


class TestRequestDecode:
    def test_project_request_decodes_project(self, project_payload):
        project = ProjectRequest(slug="Maintenance").decode(json.dumps(project_payload))
        assert isinstance(project, Project)

    def test_projects_request_decodes_page(self, project_payload):
        body = json.dumps({"pagination": {"limit": 1, "offset": 0, "count": 9}, "result": [project_payload]})
        response = ProjectsRequest(pagination=(1, 0)).decode(body)
        assert response.pagination.count == 9

    def test_version_request_rejects_project_body(self, project_payload):
        with pytest.raises(DecodeError):
            VersionRequest(slug="Maintenance", name="4.1.0").decode(json.dumps(project_payload))
