"""Request handlers that turn service results into HTTP status and body."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from medtrace.models import ListResponse, error_list_response
from medtrace.services import DrugService, OrganizationService


def _status_for(resp: ListResponse[Any]) -> int:
    if resp.success:
        return HTTPStatus.OK.value
    code = resp.error.code if resp.error is not None else 0
    return code or HTTPStatus.INTERNAL_SERVER_ERROR.value


class DrugHandler:
    """Handles drug endpoints."""

    def __init__(self, service: DrugService) -> None:
        self.service = service

    def get_history_drug(self, drug_id: str) -> tuple[int, ListResponse[Any]]:
        if not drug_id:
            status = HTTPStatus.BAD_REQUEST.value
            return status, error_list_response(status, "Drug ID parameter is required")
        resp = self.service.get_history_drug(drug_id)
        return _status_for(resp), resp


class OrganizationHandler:
    """Handles organization endpoints."""

    def __init__(self, service: OrganizationService) -> None:
        self.service = service

    def get_organizations(self) -> tuple[int, ListResponse[Any]]:
        resp = self.service.get_organizations()
        return _status_for(resp), resp