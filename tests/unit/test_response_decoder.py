"""Unit tests for response status translation and decoding."""

from typing import List

import httpx
import pytest

from blnk_client.exceptions import APIError, DecodeError
from blnk_client.models import Ledger
from blnk_client.utils.http import check_response, decode_response, is_server_error


def test_success_decodes_into_model():
    response = httpx.Response(
        201, json={"ledger_id": "ldg_1", "name": "Main", "created_at": "2024-02-20T05:28:03Z"}
    )
    ledger = decode_response(response, Ledger)
    assert isinstance(ledger, Ledger)
    assert ledger.created_at.year == 2024


def test_success_decodes_into_list():
    response = httpx.Response(200, json=[{"ledger_id": "ldg_1"}, {"ledger_id": "ldg_2"}])
    ledgers = decode_response(response, List[Ledger])
    assert [l.ledger_id for l in ledgers] == ["ldg_1", "ldg_2"]


@pytest.mark.parametrize("status", [301, 400, 401, 404, 409, 422])
def test_non_success_status_raises_api_error(status):
    response = httpx.Response(status, text='{"error":"nope"}')
    with pytest.raises(APIError) as exc_info:
        check_response(response)
    assert exc_info.value.status_code == status
    assert exc_info.value.response_body == '{"error":"nope"}'
    assert exc_info.value.to_dict()["details"]["status_code"] == status


def test_status_checked_before_body_decoding():
    response = httpx.Response(400, text="not json at all")
    with pytest.raises(APIError):
        decode_response(response, Ledger)


def test_malformed_json_raises_decode_error():
    response = httpx.Response(200, text="{")
    with pytest.raises(DecodeError) as exc_info:
        decode_response(response, Ledger)
    assert not isinstance(exc_info.value, APIError)


def test_schema_mismatch_raises_decode_error():
    response = httpx.Response(200, json={"name": "missing id"})
    with pytest.raises(DecodeError):
        decode_response(response, Ledger)


def test_none_result_type_skips_body():
    assert decode_response(httpx.Response(200, text=""), None) is None


def test_server_error_classification():
    assert is_server_error(500)
    assert is_server_error(503)
    assert not is_server_error(499)
