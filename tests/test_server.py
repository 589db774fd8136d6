import json

import pytest

from medtrace.handlers import DrugHandler, OrganizationHandler
from medtrace.models import Organization
from medtrace.server import create_app
from medtrace.services import DrugService, OrganizationService

ORIGIN = "http://localhost:5173"


class FakeContract:
    def __init__(self, results=None, error=None):
        self.results = results or {}
        self.error = error
        self.calls = []

    def evaluate_transaction(self, name, *args):
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error
        return self.results.get(name, b"[]")


class BrokenOrganizationHandler:
    def get_organizations(self):
        raise RuntimeError("crash")


def make_client(contract, organization_handler=None):
    app = create_app(
        DrugHandler(DrugService(contract)),
        organization_handler or OrganizationHandler(OrganizationService(contract)),
        [ORIGIN],
    )
    return app.test_client()


@pytest.fixture
def org():
    return Organization(id="O1", location="Jakarta", name="Pharma", org_type="Manufacturer")


def test_organizations_listed(org):
    contract = FakeContract({"GetAllOrganizations": json.dumps([org.to_dict()]).encode()})
    resp = make_client(contract).get("/organizations/")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "list": [org.to_dict()]}


def test_drug_history(org):
    payload = json.dumps([{"record": {"ID": "D1"}, "txId": "tx1"}]).encode()
    contract = FakeContract({"GetHistoryDrug": payload})
    resp = make_client(contract).get("/drugs/history/D1")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["list"][0]["TxID"] == "tx1"
    assert body["list"][0]["Drug"]["ID"] == "D1"
    assert contract.calls == [("GetHistoryDrug", ("D1",))]


def test_drug_history_without_id_is_bad_request():
    contract = FakeContract()
    resp = make_client(contract).get("/drugs/history/")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == {"code": 400, "message": "Drug ID parameter is required"}
    assert contract.calls == []


def test_contract_failure_gives_server_error():
    resp = make_client(FakeContract(error=RuntimeError("down"))).get("/organizations/")
    assert resp.status_code == 500
    body = resp.get_json()
    assert body["success"] is False
    assert body["list"] is None


def test_allowed_origin_gets_cors_header():
    resp = make_client(FakeContract()).get("/organizations/", headers={"Origin": ORIGIN})
    assert resp.headers["Access-Control-Allow-Origin"] == ORIGIN


def test_other_origin_gets_no_cors_header():
    resp = make_client(FakeContract()).get(
        "/organizations/", headers={"Origin": "http://evil.example.com"}
    )
    assert "Access-Control-Allow-Origin" not in resp.headers


def test_preflight():
    resp = make_client(FakeContract()).options(
        "/organizations/",
        headers={"Origin": ORIGIN, "Access-Control-Request-Method": "GET"},
    )
    assert resp.status_code == 204
    assert resp.headers["Access-Control-Allow-Headers"] == "Origin,Content-Type,Accept"
    assert resp.headers["Access-Control-Allow-Origin"] == ORIGIN


def test_unknown_path_is_json_not_found():
    resp = make_client(FakeContract()).get("/nowhere")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Not Found"}


def test_unhandled_error_is_recovered():
    client = make_client(FakeContract(), BrokenOrganizationHandler())
    resp = client.get("/organizations/")
    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Internal Server Error"}