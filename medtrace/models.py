"""Ledger entities and the JSON envelopes the API answers with."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, TypeVar

T = TypeVar("T")

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


def _serialize(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


def _object(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Find a key, preferring an exact match and falling back to a case-insensitive one."""
    if key in data:
        return data[key]
    folded = key.casefold()
    return next((v for k, v in data.items() if k.casefold() == folded), None)


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _lookup(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = _lookup(data, key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


def _parse_timestamp(raw: Any) -> datetime:
    if raw is None:
        return ZERO_TIME
    if not isinstance(raw, str):
        raise ValueError("timestamp must be a string")
    match = _RFC3339.fullmatch(raw)
    if match is None:
        raise ValueError(f"timestamp {raw!r} is not in RFC 3339 format")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tz = timezone(sign * offset)
    micros = int((fraction or "")[:6].ljust(6, "0"))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micros, tzinfo=tz
    )


def _format_timestamp(ts: datetime) -> str:
    text = (
        f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"
        f"T{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}"
    )
    if ts.microsecond:
        text += "." + f"{ts.microsecond:06d}".rstrip("0")
    offset = ts.utcoffset()
    if not offset:
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass
class ErrorInfo:
    """Error code and message carried by a failed response."""

    code: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass
class ValueResponse(Generic[T]):
    """Envelope around a single value."""

    success: bool
    value: T | None = None
    error: ErrorInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success}
        if self.value is not None:
            result["value"] = _serialize(self.value)
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


@dataclass
class ListResponse(Generic[T]):
    """Envelope around a list of values."""

    success: bool
    items: list[T] | None = None
    error: ErrorInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "success": self.success,
            "list": None if self.items is None else [_serialize(i) for i in self.items],
        }
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


def success_value_response(value: T) -> ValueResponse[T]:
    return ValueResponse(success=True, value=value)


def error_value_response(code: int, message: str) -> ValueResponse[Any]:
    return ValueResponse(success=False, error=ErrorInfo(code, message))


def success_list_response(items: list[T] | None) -> ListResponse[T]:
    return ListResponse(success=True, items=list(items) if items is not None else [])


def error_list_response(code: int, message: str) -> ListResponse[Any]:
    return ListResponse(success=False, items=None, error=ErrorInfo(code, message))


@dataclass
class Drug:
    """A drug unit as stored by the chaincode."""

    id: str = ""
    batch_id: str = ""
    owner_id: str = ""
    is_transferred: bool = False
    transfer_id: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Drug:
        obj = _object(data, "drug")
        return cls(
            id=_string(obj, "ID"),
            batch_id=_string(obj, "BatchID"),
            owner_id=_string(obj, "OwnerID"),
            is_transferred=_bool(obj, "isTransferred"),
            transfer_id=_string(obj, "TransferID"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "ID": self.id,
            "BatchID": self.batch_id,
            "OwnerID": self.owner_id,
            "isTransferred": self.is_transferred,
        }
        if self.transfer_id:
            result["TransferID"] = self.transfer_id
        return result


@dataclass
class HistoryDrug:
    """One entry of a drug's ledger history."""

    drug: Drug | None = None
    tx_id: str = ""
    timestamp: datetime = ZERO_TIME
    is_delete: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> HistoryDrug:
        """Build from the chaincode's history record (record, txId, timestamp, isDelete)."""
        obj = _object(data, "history record")
        record = _lookup(obj, "record")
        return cls(
            drug=None if record is None else Drug.from_dict(record),
            tx_id=_string(obj, "txId"),
            timestamp=_parse_timestamp(_lookup(obj, "timestamp")),
            is_delete=_bool(obj, "isDelete"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "Drug": None if self.drug is None else self.drug.to_dict(),
            "TxID": self.tx_id,
            "Timestamp": _format_timestamp(self.timestamp),
            "IsDelete": self.is_delete,
        }


@dataclass
class Organization:
    """An organization registered on the ledger."""

    id: str = ""
    location: str = ""
    name: str = ""
    org_type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Organization:
        obj = _object(data, "organization")
        return cls(
            id=_string(obj, "ID"),
            location=_string(obj, "Location"),
            name=_string(obj, "Name"),
            org_type=_string(obj, "Type"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "ID": self.id,
            "Location": self.location,
            "Name": self.name,
            "Type": self.org_type,
        }