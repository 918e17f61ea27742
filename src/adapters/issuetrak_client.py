"""Issuetrak REST API client.

One awaitable method per API operation. Every method takes a request value
from `core.domain.api` and returns an `ApiResponse`; the client never
interprets the outcome. Error statuses come back as ordinary responses, and
transport failures come back as a response with status code 0 whose text is
the exception message.

Routes follow `{base_url}/api/v{api_version}/{resource}`.
"""

from __future__ import annotations

import logging
import time
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings, SubmitterSettings
from core.domain.api import (
    ApiRequest,
    ApiResponse,
    EntityRequest,
    IssueListRequest,
    IssueRequest,
    ListRequest,
    PayloadRequest,
)

logger = logging.getLogger(__name__)

TRANSPORT_FAILURE_STATUS = 0

_TEXTUAL_TYPES = ("json", "text", "xml", "javascript")


def build_url(request: ApiRequest, route: str) -> str:
    base = request.base_url.rstrip("/")
    return f"{base}/api/v{request.api_version}/{route.lstrip('/')}"


def _segment(value: int | str) -> str:
    return quote(str(value), safe="")


def _is_textual(content_type: str) -> bool:
    content_type = content_type.lower()
    return not content_type or any(kind in content_type for kind in _TEXTUAL_TYPES)


def to_api_response(response: httpx.Response) -> ApiResponse:
    """Map an httpx response onto the client's response value."""

    content_type = response.headers.get("content-type", "")
    if not response.content:
        text = None
    elif _is_textual(content_type):
        text = response.text
    else:
        text = f"<{len(response.content)} bytes of {content_type}>"

    payload: Any | None = None
    if text is not None and "json" in content_type.lower():
        try:
            payload = response.json()
        except ValueError:
            payload = None

    return ApiResponse(
        status_code=response.status_code,
        reason_phrase=response.reason_phrase or None,
        response_text=text,
        response_object=payload,
    )


class IssuetrakAPIClient:
    """Async client for the Issuetrak API, used as `async with`."""

    def __init__(
        self,
        api_key: str,
        settings: AppSettings | SubmitterSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._settings = settings or AppSettings()
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> IssuetrakAPIClient:
        self._get_http()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = build_async_client(
                self._settings,
                extra_headers={self._settings.api_key_header: self._api_key},
                transport=self._transport,
            )
        return self._http

    async def aclose(self) -> None:
        if self._http is not None and not self._http.is_closed:
            await self._http.aclose()

    async def send(
        self,
        request: ApiRequest,
        method: str,
        route: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> ApiResponse:
        url = build_url(request, route)
        level = logging.INFO if request.should_include_request_logging else logging.DEBUG
        started = time.perf_counter()
        try:
            response = await self._get_http().request(method, url, params=params, json=body)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return ApiResponse(
                status_code=TRANSPORT_FAILURE_STATUS,
                reason_phrase=type(exc).__name__,
                response_text=str(exc) or repr(exc),
            )
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.log(level, "%s %s -> %s (%.0f ms)", method, url, response.status_code, elapsed_ms)
        return to_api_response(response)

    async def _get_one(self, request: EntityRequest, resource: str) -> ApiResponse:
        return await self.send(request, "GET", f"{resource}/{_segment(request.entity_id)}")

    async def _get_all(self, request: ListRequest, resource: str) -> ApiResponse:
        return await self.send(request, "GET", resource)

    async def _post(self, request: PayloadRequest, route: str) -> ApiResponse:
        return await self.send(request, "POST", route, body=request.payload.to_wire())

    async def _put(self, request: PayloadRequest, route: str) -> ApiResponse:
        return await self.send(request, "PUT", route, body=request.payload.to_wire())

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------

    async def create_attachment(self, request: PayloadRequest) -> ApiResponse:
        return await self._post(request, "attachments")

    async def get_attachment_for_attachment_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "attachments")

    async def get_attachments_for_issue_number(self, request: IssueRequest) -> ApiResponse:
        return await self.send(request, "GET", f"attachments/issue/{request.issue_number}")

    async def get_attachments_in_compressed_archive_for_issue_number(
        self, request: IssueRequest
    ) -> ApiResponse:
        """Zip archive of all attachments of one issue."""

        return await self.send(request, "GET", f"attachments/issue/{request.issue_number}/archive")

    # ------------------------------------------------------------------
    # Reference data: causes, classes, departments
    # ------------------------------------------------------------------

    async def get_cause_for_cause_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "causes")

    async def get_all_causes(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "causes")

    async def get_class_for_class_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "classes")

    async def get_all_classes(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "classes")

    async def get_department_for_department_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "departments")

    async def get_all_departments(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "departments")

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    async def create_issue(self, request: PayloadRequest) -> ApiResponse:
        """Create an issue; on success the body is the new issue number."""

        return await self._post(request, "issues")

    async def update_issue(self, request: PayloadRequest) -> ApiResponse:
        return await self._put(request, "issues")

    async def get_issue_for_issue_number(self, request: IssueRequest) -> ApiResponse:
        return await self.send(
            request,
            "GET",
            f"issues/{request.issue_number}",
            params={"includeNotes": str(request.should_include_notes).lower()},
        )

    async def get_issues_for_issue_number_list(self, request: IssueListRequest) -> ApiResponse:
        return await self.send(
            request,
            "GET",
            "issues",
            params={
                "issueNumbers": ",".join(str(number) for number in request.issue_numbers),
                "includeNotes": str(request.should_include_notes).lower(),
            },
        )

    async def search_issues(self, request: PayloadRequest) -> ApiResponse:
        return await self._post(request, "issues/search")

    # ------------------------------------------------------------------
    # Issue types and subtypes
    # ------------------------------------------------------------------

    async def get_issue_type_for_issue_type_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "issuetypes")

    async def get_all_issue_types(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "issuetypes")

    async def get_issue_sub_type_for_issue_sub_type_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "issuesubtypes")

    async def get_all_issue_sub_types(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "issuesubtypes")

    async def get_issue_sub_type2_for_issue_sub_type2_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "issuesubtypes2")

    async def get_all_issue_sub_types2(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "issuesubtypes2")

    async def get_issue_sub_type3_for_issue_sub_type3_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "issuesubtypes3")

    async def get_all_issue_sub_types3(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "issuesubtypes3")

    async def get_issue_sub_type4_for_issue_sub_type4_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "issuesubtypes4")

    async def get_all_issue_sub_types4(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "issuesubtypes4")

    # ------------------------------------------------------------------
    # Locations and menu items
    # ------------------------------------------------------------------

    async def get_location_for_location_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "locations")

    async def get_all_locations(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "locations")

    async def create_location(self, request: PayloadRequest) -> ApiResponse:
        return await self._post(request, "locations")

    async def update_location(self, request: PayloadRequest) -> ApiResponse:
        return await self._put(request, "locations")

    async def get_menu_item_for_menu_item_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "menuitems")

    async def get_all_menu_items(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "menuitems")

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    async def create_note(self, request: PayloadRequest) -> ApiResponse:
        return await self._post(request, "notes")

    async def get_note_for_note_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "notes")

    async def get_notes_for_issue_number(self, request: IssueRequest) -> ApiResponse:
        return await self.send(request, "GET", f"notes/issue/{request.issue_number}")

    # ------------------------------------------------------------------
    # Organizations
    # ------------------------------------------------------------------

    async def get_organization_for_organization_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "organizations")

    async def get_all_organizations(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "organizations")

    async def create_organization(self, request: PayloadRequest) -> ApiResponse:
        return await self._post(request, "organizations")

    async def update_organization(self, request: PayloadRequest) -> ApiResponse:
        return await self._put(request, "organizations")

    # ------------------------------------------------------------------
    # Priorities, projects, service levels
    # ------------------------------------------------------------------

    async def get_priority_for_priority_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "priorities")

    async def get_all_priorities(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "priorities")

    async def get_project_for_project_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "projects")

    async def get_all_projects(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "projects")

    async def get_service_level_for_service_level_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "servicelevels")

    async def get_all_service_levels(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "servicelevels")

    async def get_service_level_agreement_for_service_level_agreement_id(
        self, request: EntityRequest
    ) -> ApiResponse:
        return await self._get_one(request, "servicelevelagreements")

    async def get_all_service_level_agreements(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "servicelevelagreements")

    async def get_service_level_severity_for_severity_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "servicelevelseverities")

    async def get_all_service_level_severities(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "servicelevelseverities")

    async def get_service_level_term_for_service_level_term_id(
        self, request: EntityRequest
    ) -> ApiResponse:
        return await self._get_one(request, "servicelevelterms")

    async def get_all_service_level_terms(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "servicelevelterms")

    # ------------------------------------------------------------------
    # Substatuses and time zones
    # ------------------------------------------------------------------

    async def get_substatus_for_substatus_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "substatuses")

    async def get_all_substatuses(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "substatuses")

    async def get_time_zone_for_time_zone_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "timezones")

    async def get_all_time_zones(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "timezones")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def create_user(self, request: PayloadRequest) -> ApiResponse:
        return await self._post(request, "users")

    async def update_user(self, request: PayloadRequest) -> ApiResponse:
        return await self._put(request, "users")

    async def update_user_password(self, request: PayloadRequest) -> ApiResponse:
        return await self._put(request, "users/password")

    async def inactivate_user(self, request: PayloadRequest) -> ApiResponse:
        return await self._put(request, "users/inactivate")

    async def get_user_for_user_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "users")

    async def get_all_users(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "users")

    # ------------------------------------------------------------------
    # User-defined field types and user types
    # ------------------------------------------------------------------

    async def get_user_defined_field_type_for_user_defined_field_type_id(
        self, request: EntityRequest
    ) -> ApiResponse:
        return await self._get_one(request, "userdefinedfieldtypes")

    async def get_all_user_defined_field_types(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "userdefinedfieldtypes")

    async def get_user_type_for_user_type_id(self, request: EntityRequest) -> ApiResponse:
        return await self._get_one(request, "usertypes")

    async def get_all_user_types(self, request: ListRequest) -> ApiResponse:
        return await self._get_all(request, "usertypes")
