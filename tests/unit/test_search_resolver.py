"""Unit tests for search document resolution."""

from datetime import datetime, timezone

import pytest

from blnk_client.exceptions import DecodeError, UnsupportedResourceError
from blnk_client.models import (
    DOCUMENT_TYPES,
    Document,
    Ledger,
    LedgerBalance,
    ResourceType,
    SearchResponse,
    Transaction,
    resolve_document,
)

CREATED = datetime(2024, 2, 20, 5, 28, 3, tzinfo=timezone.utc)

KNOWN_DOCUMENTS = {
    ResourceType.LEDGERS: Ledger(
        ledger_id="ldg_1", name="World Ledger", created_at=CREATED, meta_data={"type": "main"}
    ),
    ResourceType.BALANCES: LedgerBalance(
        balance_id="bln_1",
        ledger_id="ldg_1",
        currency="USD",
        balance=12500,
        credit_balance=15000,
        debit_balance=2500,
        currency_multiplier=100,
        created_at=CREATED,
        meta_data={"owner": "alice"},
    ),
    ResourceType.TRANSACTIONS: Transaction(
        transaction_id="txn_1",
        reference="ref_1",
        amount=125.5,
        precision=100,
        currency="USD",
        source="bln_1",
        destination="bln_2",
        status="APPLIED",
        created_at=CREATED,
        meta_data={"order": 7, "tags": ["a", "b"]},
    ),
}


def test_every_resource_type_has_a_document_model():
    assert set(DOCUMENT_TYPES) == set(ResourceType)


@pytest.mark.parametrize("resource", list(ResourceType))
def test_round_trip_through_resolver(resource):
    expected = KNOWN_DOCUMENTS[resource]
    raw = expected.model_dump(mode="json")

    resolved = resolve_document(resource, raw)

    assert type(resolved) is type(expected)
    assert resolved == expected
    assert isinstance(resolved, Document)
    assert resolved.get_created_at() == CREATED
    assert resolved.get_meta_data() == expected.meta_data


def test_resolve_accepts_plain_string_tag():
    doc = resolve_document("ledgers", {"ledger_id": "ldg_1"})
    assert isinstance(doc, Ledger)
    assert doc.get_meta_data() == {}
    assert doc.get_created_at() is None


def test_unknown_resource_leaves_hits_unresolved(ledger_document):
    response = SearchResponse.model_validate(
        {"found": 1, "out_of": 1, "page": 1, "search_time_ms": 1, "hits": [{"document": ledger_document}]}
    )

    with pytest.raises(UnsupportedResourceError) as exc_info:
        response.resolve("accounts")

    assert exc_info.value.resource == "accounts"
    assert response.hits[0].document is None
    assert response.hits[0].raw_document == ledger_document


def test_malformed_hit_names_failing_index(ledger_document):
    response = SearchResponse.model_validate(
        {"hits": [{"document": ledger_document}, {"document": {"name": "no id"}}]}
    )

    with pytest.raises(DecodeError) as exc_info:
        response.resolve(ResourceType.LEDGERS)

    assert exc_info.value.hit_index == 1
    assert "hit 1" in exc_info.value.message


def test_resolve_populates_documents(ledger_document):
    response = SearchResponse.model_validate(
        {"found": 1, "out_of": 3, "page": 1, "search_time_ms": 2, "hits": [{"document": ledger_document}]}
    ).resolve(ResourceType.LEDGERS)

    assert response.out_of == 3
    assert isinstance(response.hits[0].document, Ledger)
    assert response.documents[0].ledger_id == ledger_document["ledger_id"]


def test_null_hits_become_empty_list():
    response = SearchResponse.model_validate({"found": 0, "hits": None})
    assert response.hits == []
    assert response.resolve(ResourceType.BALANCES).documents == []


def test_balance_display_amount():
    balance = KNOWN_DOCUMENTS[ResourceType.BALANCES]
    assert balance.display_balance == 125.0
