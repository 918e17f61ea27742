"""Literal test data sent by the demo operations.

The identifiers must exist in the target Issuetrak instance for the lookups to
succeed; otherwise the API answers with an error status, which is rendered
like any other response.
"""

from __future__ import annotations

from datetime import datetime

from core.domain.models import (
    CreateAttachmentDTO,
    CreateIssueDTO,
    CreateLocationDTO,
    CreateNoteDTO,
    CreateOrganizationDTO,
    CreateUserDTO,
    InactivateUserDTO,
    QueryExpressionOperation,
    QueryExpressionOperator,
    QueryOrderingDirection,
    QuerySetOperator,
    SearchIssueDTO,
    SearchQueryExpressionDTO,
    SearchQueryOrderingDTO,
    SearchQuerySetDTO,
    UpdateIssueDTO,
    UpdateLocationDTO,
    UpdateOrganizationDTO,
    UpdateUserDTO,
    UpdateUserPasswordDTO,
)

CAUSE_ID = 5
CLASS_ID = 1
ISSUE_NUMBER = 1
ATTACHMENT_ID = 26
NOTE_ID = 1
DEPARTMENT_ID = 1
ISSUE_TYPE_ID = 5
ISSUE_SUB_TYPE_ID = 21
ISSUE_SUB_TYPE2_ID = 3
ISSUE_SUB_TYPE3_ID = 3
ISSUE_SUB_TYPE4_ID = 3
LOCATION_ID = "HQ"
NEW_LOCATION_ID = "HQ-2"
MENU_ITEM_ID = 1
ORGANIZATION_ID = 106
ORGANIZATION_NAME = "My Organization"
PRIORITY_ID = 1
PROJECT_ID = 1
SERVICE_LEVEL_ID = 1
SERVICE_LEVEL_AGREEMENT_ID = 1
SERVICE_LEVEL_SEVERITY_ID = 1
SERVICE_LEVEL_TERM_ID = 1
SUBSTATUS_ID = 13
TIME_ZONE_ID = 26
USER_TYPE_ID = 1
END_USER_TYPE_ID = 2
USER_ID = "APIUser"
UPDATE_USER_ID = "InactiveUser"
UPDATE_USER_NUMBER = 14
PASSWORD_USER_ID = "Test-End-User-0"
USER_DEFINED_FIELD_TYPE_ID = 1
LIST_FORMAT = "Standard"
REDIRECT_URL = "CSIssue_Submit.asp"

# Large attachment body (5,000,000 bytes).
LONG_TEXT_BLOCK_BYTES = b"A" * 5_000_000


def _stamp(moment: datetime) -> str:
    return moment.strftime("%m-%d-%Y-%I%M%S")


def create_attachment() -> CreateAttachmentDTO:
    return CreateAttachmentDTO(
        created_by="Admin",
        created_date=datetime.now(),
        file_name="Test-Attachment-File.txt",
        file_content=LONG_TEXT_BLOCK_BYTES,
        file_size_in_bytes=len(LONG_TEXT_BLOCK_BYTES),
        issue_number=ISSUE_NUMBER,
    )


def create_issue() -> CreateIssueDTO:
    return CreateIssueDTO(
        should_suppress_email_for_create_operation=True,
        entered_by=USER_ID,
        submitted_by=USER_ID,
        submitted_date=datetime.now(),
        subject="Test Subject",
        description="Issue Description",
        issue_type_id=1,
        priority_id=1,
        organization_id=1,
    )


def update_issue() -> UpdateIssueDTO:
    return UpdateIssueDTO(
        issue_number=2,
        submitted_by=USER_ID,
        subject="Updated Subject",
        description="Updated Description",
        status="Open",
        issue_type_id=1,
        priority_id=1,
        organization_id=1,
    )


def search_issues() -> SearchIssueDTO:
    """First page of ten issues, ordered by number, with one filter set."""

    return SearchIssueDTO(
        can_include_notes=False,
        page_index=0,
        page_size=10,
        query_ordering_definitions=[
            SearchQueryOrderingDTO(
                field_name="IssueNumber",
                query_ordering_direction=QueryOrderingDirection.ASC,
            )
        ],
        query_set_definitions=[
            SearchQuerySetDTO(
                query_set_index=1,
                query_set_operator=QuerySetOperator.AND,
                query_set_expressions=[
                    # Exclude issue 122.
                    SearchQueryExpressionDTO(
                        field_name="IssueNumber",
                        field_filter_value1="122",
                        query_expression_operation=QueryExpressionOperation.NOT_EQUAL,
                        query_expression_operator=QueryExpressionOperator.AND,
                    ),
                    SearchQueryExpressionDTO(
                        field_name="Description",
                        field_filter_value1="volatility",
                        query_expression_operation=QueryExpressionOperation.CONTAINS,
                        query_expression_operator=QueryExpressionOperator.AND,
                    ),
                ],
            )
        ],
    )


def create_location() -> CreateLocationDTO:
    return CreateLocationDTO(location_id=NEW_LOCATION_ID, location_name=NEW_LOCATION_ID)


def update_location() -> UpdateLocationDTO:
    return UpdateLocationDTO(location_id=LOCATION_ID, location_name=LOCATION_ID)


def create_note() -> CreateNoteDTO:
    return CreateNoteDTO(
        created_by=USER_ID,
        created_date=datetime.now(),
        is_private=False,
        is_rich_text=False,
        issue_number=122,
        note_text="Test Note Text",
        should_suppress_email_for_create_operation=True,
    )


def create_organization() -> CreateOrganizationDTO:
    return CreateOrganizationDTO(organization_name=ORGANIZATION_NAME)


def update_organization() -> UpdateOrganizationDTO:
    return UpdateOrganizationDTO(
        organization_id=ORGANIZATION_ID,
        organization_name=ORGANIZATION_NAME,
    )


def _user_profile(run_date: datetime) -> dict[str, object]:
    return {
        "last_name": "User",
        "address1": "Test Address 1",
        "address2": "Test Address 2",
        "city": "Test City",
        "state": "Test State",
        "zip_code": "12345-6789",
        "country": "United States",
        "email_address": "test.user@test.com",
        "phone": "757-555-1111",
        "pager": "757-555-2222",
        "organization_id": 1,
        "is_active": True,
        "should_show_debug": False,
        "is_sys_admin": False,
        "created_by": USER_ID,
        "created_date": run_date,
        "modified_by": USER_ID,
        "modified_date": run_date,
        "time_zone_id": TIME_ZONE_ID,
        "does_time_zone_use_daylight_savings": True,
        "home_page_id": 1,
        "redirect_to": REDIRECT_URL,
        "list_format": LIST_FORMAT,
    }


def create_user() -> CreateUserDTO:
    """New user whose ID is unique per run (`TestUser<timestamp>`)."""

    run_date = datetime.now()
    return CreateUserDTO(
        user_id=f"TestUser{_stamp(run_date)}",
        user_type_id=USER_TYPE_ID,
        password="Test.Password.1234",
        first_name="Test",
        display_name="Test.User",
        cannot_login=False,
        has_no_authentication=False,
        login_attempts=0,
        **_user_profile(run_date),
    )


def update_user() -> UpdateUserDTO:
    run_date = datetime.now()
    return UpdateUserDTO(
        user_id=UPDATE_USER_ID,
        user_number=UPDATE_USER_NUMBER,
        user_type_id=END_USER_TYPE_ID,
        first_name="Test.Inactive",
        display_name="Inactive.User-UPDATE",
        cannot_login=True,
        has_no_authentication=True,
        **_user_profile(run_date),
    )


def inactivate_user() -> InactivateUserDTO:
    return InactivateUserDTO(user_id=UPDATE_USER_ID)


def update_user_password() -> UpdateUserPasswordDTO:
    return UpdateUserPasswordDTO(
        user_id=PASSWORD_USER_ID,
        password=f"New.Password.{_stamp(datetime.now())}",
    )
