"""Single-issue submission mode.

Creates one hardcoded issue on behalf of the configured user and reports the
outcome on the console instead of opening the menu.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from rich.console import Console

from adapters.issuetrak_client import IssuetrakAPIClient
from core.config import SubmitterSettings
from core.domain.api import ApiResponse, PayloadRequest
from core.domain.models import CreateIssueDTO

SubmitterClientFactory = Callable[[str, SubmitterSettings], IssuetrakAPIClient]


def build_submission(username: str) -> CreateIssueDTO:
    return CreateIssueDTO(
        should_suppress_email_for_create_operation=False,
        entered_by=username,
        submitted_by="admin",
        submitted_date=datetime.now(),
        subject="something",
        description="Testing api ..",
        issue_type_id=1,
        issue_sub_type_id=4,
        priority_id=4,
        organization_id=1,
    )


async def submit_issue(
    settings: SubmitterSettings,
    console: Console,
    client_factory: SubmitterClientFactory = IssuetrakAPIClient,
) -> ApiResponse:
    """Create the issue and print the new issue number or the error."""

    request = PayloadRequest(
        base_url=settings.url,
        api_version=settings.api_version,
        payload=build_submission(settings.username),
    )

    console.print("Creating Issue")
    async with client_factory(settings.api_key, settings) as client:
        response = await client.create_issue(request)

    if response.is_success:
        console.print(f"Successful. ID is {response.response_text}", markup=False)
    else:
        console.print(f"Error: {response.reason_phrase}", markup=False)
        console.print(response.response_text or "", markup=False)
    return response
