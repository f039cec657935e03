"""Shared Pydantic base models for the Blnk client.

The models provide type safety and validation for:
- Resource payloads returned by the service
- Request bodies and query parameters sent to the service
- The document capability shared by searchable resources
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class BlnkModel(BaseModel):
    """Base model for all service payloads.

    Unknown fields sent by the service are kept rather than rejected, so
    newer server versions do not break older clients.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )


class BlnkRequest(BaseModel):
    """Base model for request bodies and query parameters.

    Optional fields left as ``None`` are omitted from the wire form.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
    )


class DocumentModel(BlnkModel):
    """Base for resources exposed through the search document capability.

    :param created_at: When the resource was created
    :type created_at: Optional[datetime]
    :param meta_data: Free-form metadata attached to the resource
    :type meta_data: Dict[str, Any]
    """

    created_at: Optional[datetime] = None
    meta_data: Dict[str, Any] = Field(default_factory=dict)

    def get_created_at(self) -> Optional[datetime]:
        return self.created_at

    def get_meta_data(self) -> Dict[str, Any]:
        return self.meta_data


class ListParams(BlnkRequest):
    """Pagination query parameters for list endpoints.

    :param limit: Maximum number of items to return
    :type limit: Optional[int]
    :param offset: Number of items to skip
    :type offset: Optional[int]
    """

    limit: Optional[int] = Field(None, ge=1)
    offset: Optional[int] = Field(None, ge=0)
