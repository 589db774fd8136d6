"""HTTP application exposing the ledger queries."""

from __future__ import annotations

from collections.abc import Iterable
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request

from medtrace.config import ServerSettings
from medtrace.handlers import DrugHandler, OrganizationHandler

ALLOW_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"
ALLOW_HEADERS = "Origin,Content-Type,Accept"


def _is_http_error(err: Exception) -> bool:
    return hasattr(err, "get_response") and hasattr(err, "code")


def create_app(
    drug_handler: DrugHandler,
    organization_handler: OrganizationHandler,
    allow_origins: Iterable[str] = ServerSettings().allow_origins,
) -> Flask:
    """Build the application with drug and organization routes and CORS for the given origins."""
    app = Flask(__name__)
    app.json.sort_keys = False
    origins = frozenset(allow_origins)

    def respond(result: tuple[int, Any]) -> tuple[Response, int]:
        status, body = result
        return jsonify(body.to_dict()), status

    @app.get("/drugs/history/", defaults={"drug_id": ""})
    @app.get("/drugs/history/<drug_id>")
    def history_drug(drug_id: str):
        return respond(drug_handler.get_history_drug(drug_id))

    @app.get("/organizations/")
    def organizations():
        return respond(organization_handler.get_organizations())

    @app.before_request
    def preflight():
        if request.method != "OPTIONS":
            return None
        response = app.make_response(("", HTTPStatus.NO_CONTENT.value))
        response.vary.add("Access-Control-Request-Method")
        response.vary.add("Access-Control-Request-Headers")
        if request.headers.get("Origin") in origins:
            response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
            response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        return response

    @app.after_request
    def cors(response: Response) -> Response:
        response.vary.add("Origin")
        origin = request.headers.get("Origin")
        if origin in origins:
            response.headers["Access-Control-Allow-Origin"] = origin
        return response

    @app.errorhandler(Exception)
    def error(err: Exception):
        if _is_http_error(err):
            code = err.code or HTTPStatus.INTERNAL_SERVER_ERROR.value
            return jsonify({"message": HTTPStatus(code).phrase}), code
        app.logger.exception("unhandled error: %s", err)
        status = HTTPStatus.INTERNAL_SERVER_ERROR
        return jsonify({"message": status.phrase}), status.value

    return app