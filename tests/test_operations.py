"""Tests for the operation registry."""

import json

import httpx
import pytest

from core.domain import samples
from core.services.operations import OperationRunner, build_operation_registry


@pytest.fixture
def registry(settings, recording_renderer, recording_transport):
    runner = OperationRunner(settings, recording_renderer, recording_transport.client_factory())
    return build_operation_registry(runner)


def by_label(registry, label):
    return next(operation for operation in registry if operation.label == label)


class TestRegistryShape:
    def test_has_every_operation_once(self, registry):
        labels = [operation.label for operation in registry]

        assert len(labels) == 64
        assert len(set(labels)) == len(labels)

    def test_keeps_menu_order(self, registry):
        assert registry[0].label == "create_attachment"
        assert registry[1].label == "get_attachment_for_attachment_id"
        assert registry[5].label == "get_all_causes"
        assert registry[-1].label == "get_all_user_types"

    def test_labels_are_snake_case(self, registry):
        for operation in registry:
            assert operation.label == operation.label.lower()
            assert " " not in operation.label


class TestInvocation:
    @pytest.mark.asyncio
    async def test_each_operation_sends_one_request_and_renders_once(
        self, registry, recording_renderer, recording_transport
    ):
        """Should issue exactly one HTTP call per operation and render it under its label."""
        for operation in registry:
            await operation.invoke()

        assert len(recording_transport.requests) == len(registry)
        assert [label for label, _ in recording_renderer.rendered] == [op.label for op in registry]
        assert all(response.status_code == 200 for _, response in recording_renderer.rendered)

    @pytest.mark.asyncio
    async def test_requests_carry_the_api_key(self, registry, recording_transport):
        await by_label(registry, "get_all_causes").invoke()

        request = recording_transport.requests[0]
        assert request.headers["X-Issuetrak-API-Key"] == "secret-key"
        assert str(request.url) == "http://issuetrak.test/api/v1/causes"

    @pytest.mark.asyncio
    async def test_create_issue_posts_sample_issue(self, registry, recording_transport):
        await by_label(registry, "create_issue").invoke()

        request = recording_transport.requests[0]
        body = json.loads(request.content)
        assert request.method == "POST"
        assert request.url.path == "/api/v1/issues"
        assert body["IssueTypeID"] == 1
        assert body["EnteredBy"] == samples.USER_ID
        assert body["ShouldSuppressEmailForCreateOperation"] is True

    @pytest.mark.asyncio
    async def test_location_lookup_uses_string_id(self, registry, recording_transport):
        await by_label(registry, "get_location_for_location_id").invoke()

        assert recording_transport.requests[0].url.path == "/api/v1/locations/HQ"

    @pytest.mark.asyncio
    async def test_issue_lookup_includes_notes(self, registry, recording_transport):
        await by_label(registry, "get_issue_for_issue_number").invoke()

        request = recording_transport.requests[0]
        assert request.url.path == f"/api/v1/issues/{samples.ISSUE_NUMBER}"
        assert request.url.params["includeNotes"] == "true"

    @pytest.mark.asyncio
    async def test_password_update_is_a_put(self, registry, recording_transport):
        await by_label(registry, "update_user_password").invoke()

        request = recording_transport.requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/api/v1/users/password"
        assert json.loads(request.content)["UserID"] == samples.PASSWORD_USER_ID

    @pytest.mark.asyncio
    async def test_error_status_is_still_rendered(
        self, settings, recording_renderer, make_transport
    ):
        """Should hand non-2xx responses to the renderer like any other."""
        transport = make_transport(lambda request: httpx.Response(404, text="missing"))
        runner = OperationRunner(settings, recording_renderer, transport.client_factory())
        await by_label(build_operation_registry(runner), "get_all_causes").invoke()

        label, response = recording_renderer.rendered[0]
        assert label == "get_all_causes"
        assert response.status_code == 404
        assert response.response_text == "missing"
