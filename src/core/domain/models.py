"""Issuetrak request payloads (Pydantic v2).

These models describe *what* the program sends to the API, not *how* it is
sent. Field names are snake_case in Python and PascalCase on the wire, the
way the Issuetrak .NET DTOs name them (`IssueTypeID`,
`ShouldSuppressEmailForCreateOperation`, ...).
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


def to_wire_name(name: str) -> str:
    """`issue_sub_type_id` -> `IssueSubTypeID`."""

    parts = name.split("_")
    return "".join("ID" if part == "id" else part[:1].upper() + part[1:] for part in parts)


class IssuetrakDTO(BaseModel):
    """Base for every payload: PascalCase aliases, base64 bytes."""

    model_config = ConfigDict(
        alias_generator=to_wire_name,
        populate_by_name=True,
        ser_json_bytes="base64",
        extra="forbid",
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Attachments
# ---------------------------------------------------------------------------


class CreateAttachmentDTO(IssuetrakDTO):
    created_by: str
    created_date: datetime
    file_name: str = Field(..., min_length=1)
    file_content: bytes
    file_size_in_bytes: int = Field(..., ge=0)
    issue_number: int


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------


class CreateIssueDTO(IssuetrakDTO):
    should_suppress_email_for_create_operation: bool = False
    entered_by: str
    submitted_by: str
    submitted_date: datetime
    subject: str
    description: str | None = None
    issue_type_id: int
    issue_sub_type_id: int | None = None
    priority_id: int
    organization_id: int


class UpdateIssueDTO(IssuetrakDTO):
    issue_number: int
    submitted_by: str
    subject: str
    description: str | None = None
    status: str | None = None
    issue_type_id: int
    priority_id: int
    organization_id: int


class QueryOrderingDirection(str, Enum):
    ASC = "Asc"
    DESC = "Desc"


class QuerySetOperator(str, Enum):
    AND = "And"
    OR = "Or"


class QueryExpressionOperator(str, Enum):
    AND = "And"
    OR = "Or"


class QueryExpressionOperation(str, Enum):
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    CONTAINS = "Contains"
    DOES_NOT_CONTAIN = "DoesNotContain"
    GREATER_THAN = "GreaterThan"
    LESS_THAN = "LessThan"
    BETWEEN = "Between"


class SearchQueryOrderingDTO(IssuetrakDTO):
    field_name: str
    query_ordering_direction: QueryOrderingDirection = QueryOrderingDirection.ASC


class SearchQueryExpressionDTO(IssuetrakDTO):
    field_name: str
    field_filter_value1: str | None = None
    field_filter_value2: str | None = None
    query_expression_operation: QueryExpressionOperation
    query_expression_operator: QueryExpressionOperator = QueryExpressionOperator.AND


class SearchQuerySetDTO(IssuetrakDTO):
    query_set_index: int
    query_set_operator: QuerySetOperator = QuerySetOperator.AND
    query_set_expressions: list[SearchQueryExpressionDTO] = Field(default_factory=list)


class SearchIssueDTO(IssuetrakDTO):
    can_include_notes: bool = False
    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=10, gt=0)
    query_ordering_definitions: list[SearchQueryOrderingDTO] = Field(default_factory=list)
    query_set_definitions: list[SearchQuerySetDTO] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Locations, notes, organizations
# ---------------------------------------------------------------------------


class CreateLocationDTO(IssuetrakDTO):
    location_id: str = Field(..., min_length=1)
    location_name: str


class UpdateLocationDTO(IssuetrakDTO):
    location_id: str = Field(..., min_length=1)
    location_name: str


class CreateNoteDTO(IssuetrakDTO):
    created_by: str
    created_date: datetime
    is_private: bool = False
    is_rich_text: bool = False
    issue_number: int
    note_text: str
    should_suppress_email_for_create_operation: bool = True


class CreateOrganizationDTO(IssuetrakDTO):
    organization_name: str = Field(..., min_length=1)


class UpdateOrganizationDTO(IssuetrakDTO):
    organization_id: int
    organization_name: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class UserProfileDTO(IssuetrakDTO):
    """Fields shared by user creation and update."""

    user_id: str = Field(..., min_length=1)
    user_type_id: int
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    email_address: str | None = None
    phone: str | None = None
    pager: str | None = None
    organization_id: int | None = None
    department_id: int | None = None
    location_id: str | None = None
    is_active: bool = True
    should_show_debug: bool = False
    is_sys_admin: bool = False
    created_by: str | None = None
    created_date: datetime | None = None
    modified_by: str | None = None
    modified_date: datetime | None = None
    last_login_date: datetime | None = None
    cannot_login: bool = False
    has_no_authentication: bool = False
    last_password_change: datetime | None = None
    login_attempts: int | None = None
    user_defined1_id: int | None = None
    user_defined1: str | None = None
    user_defined2_id: int | None = None
    user_defined2: str | None = None
    user_defined3_id: int | None = None
    user_defined3: str | None = None
    user_defined_date: datetime | None = None
    time_zone_id: int | None = None
    does_time_zone_use_daylight_savings: bool = True
    home_page_id: int | None = None
    dashboard_reload: int | None = None
    should_dashboard_show_timer: bool | None = None
    dashboard_default_class: int | None = None
    user_photo_bytes: bytes | None = None
    dashboard_default_months: int | None = None
    redirect_to: str | None = None
    list_format: str | None = None


class CreateUserDTO(UserProfileDTO):
    password: str = Field(..., min_length=1)


class UpdateUserDTO(UserProfileDTO):
    user_number: int


class InactivateUserDTO(IssuetrakDTO):
    user_id: str = Field(..., min_length=1)


class UpdateUserPasswordDTO(IssuetrakDTO):
    user_id: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
