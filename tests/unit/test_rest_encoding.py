"""Unit tests for Firestore REST value encoding."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from schoolpay.infrastructure.firebase._rest_encoding import (
    decode_document,
    document_id,
    encode_document,
    encode_value,
)


def test_bool_is_not_encoded_as_integer() -> None:
    assert encode_value(True) == {"booleanValue": True}
    assert encode_value(3) == {"integerValue": "3"}


def test_aware_datetime_is_converted_to_utc() -> None:
    lagos = timezone(timedelta(hours=1))
    value = datetime(2024, 9, 1, 9, 30, tzinfo=lagos)
    assert encode_value(value) == {"timestampValue": "2024-09-01T08:30:00.000000Z"}


def test_unsupported_type_raises() -> None:
    with pytest.raises(TypeError):
        encode_value(object())


def test_decode_document_reads_typed_fields() -> None:
    document = {
        "name": "projects/p/databases/(default)/documents/payments/fee-1",
        "fields": {
            "title": {"stringValue": "Tuition"},
            "amount": {"doubleValue": 50000},
            "count": {"integerValue": "2"},
            "unread": {"booleanValue": True},
            "org_id": {"nullValue": None},
            "createdAt": {"timestampValue": "2024-09-01T08:30:00.123456Z"},
            "tags": {"arrayValue": {"values": [{"stringValue": "a"}]}},
            "meta": {"mapValue": {"fields": {"k": {"stringValue": "v"}}}},
        },
    }
    data = decode_document(document)
    assert data["title"] == "Tuition"
    assert data["amount"] == 50000.0
    assert data["count"] == 2
    assert data["unread"] is True
    assert data["org_id"] is None
    assert data["createdAt"].tzinfo is not None
    assert data["createdAt"].astimezone(UTC).hour == 8
    assert data["tags"] == ["a"]
    assert data["meta"] == {"k": "v"}
    assert document_id(document) == "fee-1"


def test_decode_empty_array_and_missing_fields() -> None:
    assert decode_document({"name": "x/y"}) == {}
    assert decode_document({"fields": {"v": {"arrayValue": {}}}}) == {"v": []}


def test_encode_document_wraps_fields() -> None:
    body = encode_document({"title": "Bus", "amount": 1500.5})
    assert body == {
        "fields": {
            "title": {"stringValue": "Bus"},
            "amount": {"doubleValue": 1500.5},
        }
    }
