"""Search request/response models and typed document resolution.

The search endpoint returns hits whose ``document`` is raw JSON. Which
resource the document describes is not part of the payload; it is the
``ResourceType`` the caller searched. :func:`resolve_document` turns a raw
document into the matching model using an explicit lookup table.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Type, Union, runtime_checkable

import pydantic
from pydantic import Field, PrivateAttr, field_validator

from ..exceptions import DecodeError, UnsupportedResourceError
from .base_models import BlnkModel, BlnkRequest, DocumentModel
from .ledger import Ledger, LedgerBalance, Transaction


class ResourceType(str, Enum):
    """Searchable collections; the value is the search path segment."""

    LEDGERS = "ledgers"
    BALANCES = "balances"
    TRANSACTIONS = "transactions"

    @classmethod
    def coerce(cls, value: Union["ResourceType", str]) -> "ResourceType":
        """Return ``value`` as a member or raise UnsupportedResourceError."""
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedResourceError(value) from None


@runtime_checkable
class Document(Protocol):
    """Capability shared by every resolved search document."""

    def get_created_at(self) -> Optional[datetime]: ...

    def get_meta_data(self) -> Dict[str, Any]: ...


DOCUMENT_TYPES: Dict[ResourceType, Type[DocumentModel]] = {
    ResourceType.LEDGERS: Ledger,
    ResourceType.BALANCES: LedgerBalance,
    ResourceType.TRANSACTIONS: Transaction,
}

# Every ResourceType member must resolve to a document model.
if set(DOCUMENT_TYPES) != set(ResourceType):
    raise RuntimeError(
        f"no document model for {set(ResourceType) - set(DOCUMENT_TYPES)}"
    )


def resolve_document(
    resource: Union[ResourceType, str],
    raw: Dict[str, Any],
    hit_index: Optional[int] = None,
) -> DocumentModel:
    """Deserialize ``raw`` into the document model selected by ``resource``.

    :param resource: Resource type the document was searched under
    :param raw: Raw JSON document from a search hit
    :param hit_index: Position of the hit, reported in errors
    :return: Populated Ledger, LedgerBalance or Transaction
    :raises UnsupportedResourceError: If ``resource`` is unknown
    :raises DecodeError: If the document does not match the model
    """
    model = DOCUMENT_TYPES[ResourceType.coerce(resource)]
    try:
        return model.model_validate(raw)
    except pydantic.ValidationError as e:
        where = f"hit {hit_index}" if hit_index is not None else "document"
        raise DecodeError(
            f"failed to decode {where} as {model.__name__}: {e}",
            hit_index=hit_index,
        ) from e


class SearchParams(BlnkRequest):
    """Search request body.

    :param q: Query text, ``*`` matches everything
    :type q: str
    :param query_by: Comma separated fields searched for ``q``
    :type query_by: Optional[str]
    :param filter_by: Filter expression, e.g. ``name:World``
    :type filter_by: Optional[str]
    :param sort_by: Sort expression, e.g. ``created_at:desc``
    :type sort_by: Optional[str]
    :param page: 1-based page number
    :type page: Optional[int]
    :param per_page: Hits per page
    :type per_page: Optional[int]
    """

    q: str = ""
    query_by: Optional[str] = None
    filter_by: Optional[str] = None
    sort_by: Optional[str] = None
    page: Optional[int] = Field(None, ge=1)
    per_page: Optional[int] = Field(None, ge=1)


class SearchHit(BlnkModel):
    """One search hit.

    ``raw_document`` is the document as sent by the service; ``document``
    is populated by :meth:`SearchResponse.resolve`.
    """

    raw_document: Dict[str, Any] = Field(default_factory=dict, alias="document")
    highlights: List[Dict[str, Any]] = Field(default_factory=list)
    text_match: Optional[int] = None

    _document: Optional[DocumentModel] = PrivateAttr(default=None)

    @field_validator("highlights", mode="before")
    @classmethod
    def none_highlights(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def document(self) -> Optional[DocumentModel]:
        return self._document

    def resolve(self, resource: Union[ResourceType, str], index: Optional[int] = None) -> DocumentModel:
        self._document = resolve_document(resource, self.raw_document, hit_index=index)
        return self._document


class SearchResponse(BlnkModel):
    found: int = 0
    out_of: int = 0
    page: int = 0
    search_time_ms: int = 0
    hits: List[SearchHit] = Field(default_factory=list)

    @field_validator("hits", mode="before")
    @classmethod
    def none_hits(cls, v: Any) -> Any:
        return [] if v is None else v

    def resolve(self, resource: Union[ResourceType, str]) -> "SearchResponse":
        """Resolve every hit's raw document in place.

        The resource tag is checked before any hit is touched, so an
        unsupported tag leaves all hits unresolved.
        """
        resource = ResourceType.coerce(resource)
        for i, hit in enumerate(self.hits):
            hit.resolve(resource, index=i)
        return self

    @property
    def documents(self) -> List[DocumentModel]:
        return [hit.document for hit in self.hits if hit.document is not None]
