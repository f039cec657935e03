"""Unit tests for outbound request construction."""

import json
from datetime import datetime, timezone

import pytest

from blnk_client.exceptions import EncodingError, URLError
from blnk_client.models import CreateLedgerRequest, ListParams, SearchParams
from blnk_client.utils.http import (
    API_KEY_HEADER,
    build_request,
    encode_json_body,
    encode_query_params,
    resolve_url,
)

BASE = "http://blnk.test/api/"


def test_resolve_url_appends_endpoint():
    assert str(resolve_url(BASE, "ledgers")) == "http://blnk.test/api/ledgers"
    assert str(resolve_url(BASE, "/ledgers/ldg_1")) == "http://blnk.test/api/ledgers/ldg_1"


@pytest.mark.parametrize("base", ["not a url/", "/relative/", "ftp://blnk.test/"])
def test_resolve_url_rejects_non_http_base(base):
    with pytest.raises(URLError):
        resolve_url(base, "ledgers")


def test_get_payload_becomes_query_params():
    request = build_request(BASE, "ledgers", "GET", ListParams(limit=10))

    assert request.method == "GET"
    assert request.url.params["limit"] == "10"
    assert "offset" not in request.url.params
    assert request.content == b""
    assert "content-type" not in request.headers


def test_query_params_from_mapping_skip_none_and_lower_bools():
    params = encode_query_params({"include_inflight": True, "cursor": None, "ids": ["a", "b"]})
    assert params == {"include_inflight": "true", "ids": ["a", "b"]}


def test_query_params_reject_nested_objects():
    with pytest.raises(EncodingError):
        encode_query_params({"filter": {"name": "World"}})


def test_query_params_reject_unsupported_payload():
    with pytest.raises(EncodingError):
        encode_query_params(42)


def test_post_payload_becomes_json_body():
    request = build_request(BASE, "search/ledgers", "POST", SearchParams(q="*", filter_by="name:World"))

    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"q": "*", "filter_by": "name:World"}
    assert request.url.query == b""


def test_json_body_omits_unset_optional_fields():
    body = json.loads(encode_json_body(CreateLedgerRequest(name="Main")))
    assert body == {"name": "Main"}


def test_json_body_encodes_datetimes_in_mappings():
    body = json.loads(
        encode_json_body({"scheduled_for": datetime(2024, 2, 20, tzinfo=timezone.utc)})
    )
    assert body["scheduled_for"].startswith("2024-02-20T00:00:00")


def test_json_body_rejects_unserializable_values():
    with pytest.raises(EncodingError):
        encode_json_body({"handle": object()})


def test_api_key_header_only_when_configured():
    with_key = build_request(BASE, "ledgers", "POST", None, api_key="secret")
    without_key = build_request(BASE, "ledgers", "POST", None)

    assert with_key.headers[API_KEY_HEADER] == "secret"
    assert API_KEY_HEADER not in without_key.headers
    assert without_key.headers["content-type"] == "application/json"


def test_get_without_payload_has_no_query():
    request = build_request(BASE, "ledgers/ldg_1", "get")
    assert request.method == "GET"
    assert str(request.url) == "http://blnk.test/api/ledgers/ldg_1"


def test_timeout_is_attached_to_request():
    request = build_request(BASE, "ledgers", "GET", timeout=10.0)
    assert request.extensions["timeout"]["read"] == 10.0


def test_each_call_builds_a_new_request():
    first = build_request(BASE, "ledgers", "GET")
    second = build_request(BASE, "ledgers", "GET")
    assert first is not second
