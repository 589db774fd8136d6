"""Services that query the ledger contract and wrap the results."""

from __future__ import annotations

import json
from typing import Any, Protocol

from medtrace.models import (
    HistoryDrug,
    ListResponse,
    Organization,
    error_list_response,
    success_list_response,
)


class Contract(Protocol):
    """A deployed chaincode that read-only transactions can be evaluated against."""

    def evaluate_transaction(self, name: str, *args: str) -> bytes:
        """Evaluate the named transaction and return its raw result."""


def _decode_array(raw: bytes | str) -> list[Any]:
    data = json.loads(raw)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("expected a JSON array")
    return data


class DrugService:
    """Reads drug history from the ledger."""

    def __init__(self, contract: Contract) -> None:
        self._contract = contract

    def get_history_drug(self, drug_id: str) -> ListResponse[HistoryDrug]:
        try:
            raw = self._contract.evaluate_transaction("GetHistoryDrug", drug_id)
        except Exception as err:
            return error_list_response(500, f"Failed to evaluate GetHistoryDrug transaction: {err}")
        try:
            records = [HistoryDrug.from_dict(item) for item in _decode_array(raw)]
        except (ValueError, TypeError) as err:
            return error_list_response(
                500, f"Failed to unmarshal history drug data for GetHistoryDrug: {err}"
            )
        return success_list_response(records)


class OrganizationService:
    """Reads organizations from the ledger."""

    def __init__(self, contract: Contract) -> None:
        self._contract = contract

    def get_organizations(self) -> ListResponse[Organization]:
        try:
            raw = self._contract.evaluate_transaction("GetAllOrganizations")
        except Exception as err:
            return error_list_response(500, f"Failed to evaluate transaction to Fabric: {err}")
        try:
            organizations = [Organization.from_dict(item) for item in _decode_array(raw)]
        except (ValueError, TypeError) as err:
            return error_list_response(500, f"Failed to unmarshal Fabric response: {err}")
        return success_list_response(organizations)