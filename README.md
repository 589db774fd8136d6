# medtrace

A small Flask API in front of a MedTrace ledger contract. It asks the
contract for drug history and organization records and returns them as JSON
in a uniform envelope.

## Endpoints

| Method | Path                         | Contract transaction    |
|--------|------------------------------|-------------------------|
| GET    | `/drugs/history/<drug_id>`   | `GetHistoryDrug`        |
| GET    | `/organizations/`            | `GetAllOrganizations`   |

A successful response looks like this:

```json
{"success": true, "list": [ ... ]}
```

and a failed one like this:

```json
{"success": false, "list": null, "error": {"code": 500, "message": "..."}}
```

The HTTP status is `error.code`, or 500 when the code is 0. A request to
`/drugs/history/` with no drug ID gets a 400 with the message
`Drug ID parameter is required`.

If the contract raises, or its reply is not a JSON array of objects of the
expected shape, the response is a 500 envelope whose message names the
transaction that failed. A JSON `null` reply counts as an empty list. Any other
unhandled error, and any unknown route, answers with `{"message": "<reason>"}`
and the matching status.

### CORS

`create_app` takes the origins that may call the API (by default
`http://localhost:5173`). A request from an allowed origin gets
`Access-Control-Allow-Origin` echoed back. `OPTIONS` preflight requests are
answered with 204; for an allowed origin they also carry
`Access-Control-Allow-Methods: GET,HEAD,PUT,PATCH,POST,DELETE` and
`Access-Control-Allow-Headers: Origin,Content-Type,Accept`.

## Usage

The services reach the ledger through a `medtrace.services.Contract`: any
object with `evaluate_transaction(name, *args)` that returns the contract's
JSON reply as bytes (or a string). Wire it into the app like this:

```python
import json

from medtrace.handlers import DrugHandler, OrganizationHandler
from medtrace.server import create_app
from medtrace.services import DrugService, OrganizationService


class StaticContract:
    def evaluate_transaction(self, name, *args):
        if name == "GetAllOrganizations":
            return json.dumps(
                [{"ID": "Org1", "Location": "Jakarta", "Name": "Org One", "Type": "Manufacturer"}]
            ).encode()
        return b"[]"


contract = StaticContract()
app = create_app(
    DrugHandler(DrugService(contract)),
    OrganizationHandler(OrganizationService(contract)),
    allow_origins=["http://localhost:5173"],
)
app.run(port=9090)
```

The handlers can also be used without Flask: `DrugHandler.get_history_drug`
and `OrganizationHandler.get_organizations` return a `(status, response)`
pair, and `response.to_dict()` gives the JSON body.

## Configuration

`medtrace.config.ServerSettings.from_env(environ=None)` reads from the given
mapping, or from `os.environ`:

- `CHAINCODE_NAME`: contract name, default `medtrace_cc`
- `CHANNEL_NAME`: channel name, default `medtrace`

An unset or empty variable keeps the default. `ServerSettings` also holds
`port` (9090), `host` and `allow_origins`.

`medtrace.config.OrgSetup` holds an organization's name, MSP ID, certificate,
key and TLS certificate paths, peer endpoint and gateway peer name, with
defaults for `Org1`.

## Models

`medtrace.models` provides:

- `Drug`, `HistoryDrug` and `Organization`, each with `from_dict` and `to_dict`.
  `HistoryDrug.from_dict` reads the contract's `record`, `txId`, `timestamp`
  and `isDelete` fields. `to_dict` writes them as `Drug`, `TxID`, `Timestamp`
  and `IsDelete`. Timestamps are RFC 3339, and a missing one becomes
  `0001-01-01T00:00:00Z`. Field names match exactly first and then
  case-insensitively. A missing field takes its empty default, and a field of
  the wrong type raises `ValueError`.
- The envelopes `ValueResponse` and `ListResponse`, with `ErrorInfo`, built
  with `success_value_response`, `error_value_response`,
  `success_list_response` and `error_list_response`.

## What this package does not do

- It has no ledger client of its own. You must supply the `Contract` object.
  Nothing reads the certificate, key or TLS paths in `OrgSetup`, and nothing
  uses them to connect to a peer.
- It has no command to start the server. Build the app with `create_app` and
  run it yourself. `ServerSettings` is not read by `create_app`, except for the
  default `allow_origins`.