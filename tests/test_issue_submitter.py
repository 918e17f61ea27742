"""Tests for the single-issue submission mode."""

import json

import httpx
import pytest

from core.config import SubmitterSettings
from core.services.issue_submitter import build_submission, submit_issue


@pytest.fixture
def submitter_settings() -> SubmitterSettings:
    return SubmitterSettings(
        url="http://issuetrak.test",
        api_version=1,
        api_key="secret-key",
        username="jdoe",
    )


class TestBuildSubmission:
    def test_uses_username_as_enterer(self):
        issue = build_submission("jdoe")

        assert issue.entered_by == "jdoe"
        assert issue.submitted_by == "admin"
        assert issue.issue_sub_type_id == 4
        assert issue.should_suppress_email_for_create_operation is False


class TestSubmitIssue:
    @pytest.mark.asyncio
    async def test_prints_new_issue_number(self, submitter_settings, console, make_transport):
        transport = make_transport(lambda request: httpx.Response(200, text="123"))

        response = await submit_issue(submitter_settings, console, transport.client_factory())

        output = console.file.getvalue()
        assert response.is_success
        assert "Creating Issue" in output
        assert "Successful. ID is 123" in output

        request = transport.requests[0]
        body = json.loads(request.content)
        assert request.method == "POST"
        assert str(request.url) == "http://issuetrak.test/api/v1/issues"
        assert body["EnteredBy"] == "jdoe"
        assert body["SubmittedBy"] == "admin"
        assert body["IssueSubTypeID"] == 4

    @pytest.mark.asyncio
    async def test_prints_reason_and_body_on_failure(self, submitter_settings, console, make_transport):
        transport = make_transport(lambda request: httpx.Response(400, text="Subject is required"))

        response = await submit_issue(submitter_settings, console, transport.client_factory())

        output = console.file.getvalue()
        assert not response.is_success
        assert "Error: Bad Request" in output
        assert "Subject is required" in output
        assert "Successful" not in output

    @pytest.mark.asyncio
    async def test_reports_transport_failure(self, submitter_settings, console, make_transport):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport = make_transport(refuse)

        response = await submit_issue(submitter_settings, console, transport.client_factory())

        assert response.status_code == 0
        assert "Error: ConnectError" in console.file.getvalue()
