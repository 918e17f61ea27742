"""Operation registry.

Every selectable demo action follows the same pattern: build a request from
the configuration and the sample data, await one client call, render the
response. `OperationRunner` owns that pattern; `build_operation_registry`
lists the actions in menu order.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import NamedTuple, Protocol

from adapters.issuetrak_client import IssuetrakAPIClient
from core.config import AppSettings
from core.domain import samples
from core.domain.api import (
    ApiResponse,
    EntityRequest,
    IssueListRequest,
    IssueRequest,
    ListRequest,
    PayloadRequest,
)
from core.domain.models import IssuetrakDTO


class Renderer(Protocol):
    def render(self, description: str, response: ApiResponse) -> object: ...


ClientFactory = Callable[[str, AppSettings], IssuetrakAPIClient]
ClientCall = Callable[[IssuetrakAPIClient], Awaitable[ApiResponse]]


class Operation(NamedTuple):
    """A menu entry: label plus zero-argument async invoker."""

    label: str
    invoke: Callable[[], Awaitable[None]]


class OperationRunner:
    """Builds requests from configuration and turns client calls into operations."""

    def __init__(
        self,
        settings: AppSettings,
        renderer: Renderer,
        client_factory: ClientFactory = IssuetrakAPIClient,
    ) -> None:
        self._settings = settings
        self._renderer = renderer
        self._client_factory = client_factory

    def list_request(self, *, logged: bool = False) -> ListRequest:
        return ListRequest(
            base_url=self._settings.base_api_url,
            api_version=self._settings.api_version,
            should_include_request_logging=logged,
        )

    def entity_request(self, entity_id: int | str) -> EntityRequest:
        return EntityRequest(
            base_url=self._settings.base_api_url,
            api_version=self._settings.api_version,
            entity_id=entity_id,
        )

    def issue_request(
        self,
        issue_number: int,
        *,
        include_notes: bool = False,
        logged: bool = False,
    ) -> IssueRequest:
        return IssueRequest(
            base_url=self._settings.base_api_url,
            api_version=self._settings.api_version,
            issue_number=issue_number,
            should_include_notes=include_notes,
            should_include_request_logging=logged,
        )

    def issue_list_request(
        self,
        issue_numbers: Sequence[int],
        *,
        include_notes: bool = False,
    ) -> IssueListRequest:
        return IssueListRequest(
            base_url=self._settings.base_api_url,
            api_version=self._settings.api_version,
            issue_numbers=tuple(issue_numbers),
            should_include_notes=include_notes,
        )

    def payload_request(self, payload: IssuetrakDTO, *, logged: bool = False) -> PayloadRequest:
        return PayloadRequest(
            base_url=self._settings.base_api_url,
            api_version=self._settings.api_version,
            payload=payload,
            should_include_request_logging=logged,
        )

    def operation(self, label: str, call: ClientCall) -> Operation:
        async def invoke() -> None:
            async with self._client_factory(self._settings.api_key, self._settings) as client:
                response = await call(client)
            self._renderer.render(label, response)

        return Operation(label, invoke)


def build_operation_registry(runner: OperationRunner) -> list[Operation]:
    """All demo operations, in menu order."""

    r = runner
    op = runner.operation
    return [
        # Attachments
        op("create_attachment",
           lambda c: c.create_attachment(r.payload_request(samples.create_attachment()))),
        op("get_attachment_for_attachment_id",
           lambda c: c.get_attachment_for_attachment_id(r.entity_request(samples.ATTACHMENT_ID))),
        op("get_attachments_for_issue_number",
           lambda c: c.get_attachments_for_issue_number(r.issue_request(samples.ISSUE_NUMBER))),
        op("get_attachments_in_compressed_archive_for_issue_number",
           lambda c: c.get_attachments_in_compressed_archive_for_issue_number(
               r.issue_request(samples.ISSUE_NUMBER))),
        # Causes
        op("get_cause_for_cause_id",
           lambda c: c.get_cause_for_cause_id(r.entity_request(samples.CAUSE_ID))),
        op("get_all_causes", lambda c: c.get_all_causes(r.list_request())),
        # Classes
        op("get_class_for_class_id",
           lambda c: c.get_class_for_class_id(r.entity_request(samples.CLASS_ID))),
        op("get_all_classes", lambda c: c.get_all_classes(r.list_request())),
        # Departments
        op("get_department_for_department_id",
           lambda c: c.get_department_for_department_id(r.entity_request(samples.DEPARTMENT_ID))),
        op("get_all_departments", lambda c: c.get_all_departments(r.list_request(logged=True))),
        # Issues
        op("create_issue", lambda c: c.create_issue(r.payload_request(samples.create_issue(), logged=True))),
        op("update_issue", lambda c: c.update_issue(r.payload_request(samples.update_issue(), logged=True))),
        op("get_issue_for_issue_number",
           lambda c: c.get_issue_for_issue_number(
               r.issue_request(samples.ISSUE_NUMBER, include_notes=True))),
        op("get_issues_for_issue_number_list",
           lambda c: c.get_issues_for_issue_number_list(
               r.issue_list_request([samples.ISSUE_NUMBER], include_notes=True))),
        op("search_issues", lambda c: c.search_issues(r.payload_request(samples.search_issues(), logged=True))),
        # Issue types and subtypes
        op("get_issue_type_for_issue_type_id",
           lambda c: c.get_issue_type_for_issue_type_id(r.entity_request(samples.ISSUE_TYPE_ID))),
        op("get_all_issue_types", lambda c: c.get_all_issue_types(r.list_request(logged=True))),
        op("get_issue_sub_type_for_issue_sub_type_id",
           lambda c: c.get_issue_sub_type_for_issue_sub_type_id(
               r.entity_request(samples.ISSUE_SUB_TYPE_ID))),
        op("get_all_issue_sub_types", lambda c: c.get_all_issue_sub_types(r.list_request(logged=True))),
        op("get_issue_sub_type2_for_issue_sub_type2_id",
           lambda c: c.get_issue_sub_type2_for_issue_sub_type2_id(
               r.entity_request(samples.ISSUE_SUB_TYPE2_ID))),
        op("get_all_issue_sub_types2", lambda c: c.get_all_issue_sub_types2(r.list_request(logged=True))),
        op("get_issue_sub_type3_for_issue_sub_type3_id",
           lambda c: c.get_issue_sub_type3_for_issue_sub_type3_id(
               r.entity_request(samples.ISSUE_SUB_TYPE3_ID))),
        op("get_all_issue_sub_types3", lambda c: c.get_all_issue_sub_types3(r.list_request(logged=True))),
        op("get_issue_sub_type4_for_issue_sub_type4_id",
           lambda c: c.get_issue_sub_type4_for_issue_sub_type4_id(
               r.entity_request(samples.ISSUE_SUB_TYPE4_ID))),
        op("get_all_issue_sub_types4", lambda c: c.get_all_issue_sub_types4(r.list_request(logged=True))),
        # Locations
        op("get_location_for_location_id",
           lambda c: c.get_location_for_location_id(r.entity_request(samples.LOCATION_ID))),
        op("get_all_locations", lambda c: c.get_all_locations(r.list_request(logged=True))),
        op("create_location",
           lambda c: c.create_location(r.payload_request(samples.create_location(), logged=True))),
        op("update_location",
           lambda c: c.update_location(r.payload_request(samples.update_location(), logged=True))),
        # Menu items
        op("get_menu_item_for_menu_item_id",
           lambda c: c.get_menu_item_for_menu_item_id(r.entity_request(samples.MENU_ITEM_ID))),
        op("get_all_menu_items", lambda c: c.get_all_menu_items(r.list_request(logged=True))),
        # Notes
        op("create_note", lambda c: c.create_note(r.payload_request(samples.create_note()))),
        op("get_note_for_note_id", lambda c: c.get_note_for_note_id(r.entity_request(samples.NOTE_ID))),
        op("get_notes_for_issue_number",
           lambda c: c.get_notes_for_issue_number(r.issue_request(samples.ISSUE_NUMBER, logged=True))),
        # Organizations
        op("get_organization_for_organization_id",
           lambda c: c.get_organization_for_organization_id(r.entity_request(samples.ORGANIZATION_ID))),
        op("get_all_organizations", lambda c: c.get_all_organizations(r.list_request(logged=True))),
        op("create_organization",
           lambda c: c.create_organization(r.payload_request(samples.create_organization(), logged=True))),
        op("update_organization",
           lambda c: c.update_organization(r.payload_request(samples.update_organization(), logged=True))),
        # Priorities
        op("get_priority_for_priority_id",
           lambda c: c.get_priority_for_priority_id(r.entity_request(samples.PRIORITY_ID))),
        op("get_all_priorities", lambda c: c.get_all_priorities(r.list_request())),
        # Projects
        op("get_project_for_project_id",
           lambda c: c.get_project_for_project_id(r.entity_request(samples.PROJECT_ID))),
        op("get_all_projects", lambda c: c.get_all_projects(r.list_request())),
        # Service levels
        op("get_service_level_for_service_level_id",
           lambda c: c.get_service_level_for_service_level_id(r.entity_request(samples.SERVICE_LEVEL_ID))),
        op("get_all_service_levels", lambda c: c.get_all_service_levels(r.list_request())),
        op("get_service_level_agreement_for_service_level_agreement_id",
           lambda c: c.get_service_level_agreement_for_service_level_agreement_id(
               r.entity_request(samples.SERVICE_LEVEL_AGREEMENT_ID))),
        op("get_all_service_level_agreements", lambda c: c.get_all_service_level_agreements(r.list_request())),
        op("get_service_level_severity_for_severity_id",
           lambda c: c.get_service_level_severity_for_severity_id(
               r.entity_request(samples.SERVICE_LEVEL_SEVERITY_ID))),
        op("get_all_service_level_severities", lambda c: c.get_all_service_level_severities(r.list_request())),
        op("get_service_level_term_for_service_level_term_id",
           lambda c: c.get_service_level_term_for_service_level_term_id(
               r.entity_request(samples.SERVICE_LEVEL_TERM_ID))),
        op("get_all_service_level_terms", lambda c: c.get_all_service_level_terms(r.list_request())),
        # Substatuses
        op("get_substatus_for_substatus_id",
           lambda c: c.get_substatus_for_substatus_id(r.entity_request(samples.SUBSTATUS_ID))),
        op("get_all_substatuses", lambda c: c.get_all_substatuses(r.list_request())),
        # Time zones
        op("get_time_zone_for_time_zone_id",
           lambda c: c.get_time_zone_for_time_zone_id(r.entity_request(samples.TIME_ZONE_ID))),
        op("get_all_time_zones", lambda c: c.get_all_time_zones(r.list_request())),
        # Users
        op("create_user", lambda c: c.create_user(r.payload_request(samples.create_user()))),
        op("update_user", lambda c: c.update_user(r.payload_request(samples.update_user()))),
        op("update_user_password",
           lambda c: c.update_user_password(r.payload_request(samples.update_user_password()))),
        op("inactivate_user", lambda c: c.inactivate_user(r.payload_request(samples.inactivate_user()))),
        op("get_user_for_user_id", lambda c: c.get_user_for_user_id(r.entity_request(samples.USER_ID))),
        op("get_all_users", lambda c: c.get_all_users(r.list_request())),
        # User-defined field types
        op("get_user_defined_field_type_for_user_defined_field_type_id",
           lambda c: c.get_user_defined_field_type_for_user_defined_field_type_id(
               r.entity_request(samples.USER_DEFINED_FIELD_TYPE_ID))),
        op("get_all_user_defined_field_types", lambda c: c.get_all_user_defined_field_types(r.list_request())),
        # User types
        op("get_user_type_for_user_type_id",
           lambda c: c.get_user_type_for_user_type_id(r.entity_request(samples.USER_TYPE_ID))),
        op("get_all_user_types", lambda c: c.get_all_user_types(r.list_request())),
    ]
