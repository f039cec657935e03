"""Pydantic models for identities and reconciliation uploads."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from .base_models import BlnkModel, BlnkRequest


class IdentityType(str, Enum):
    INDIVIDUAL = "individual"
    ORGANIZATION = "organization"


class Identity(BlnkModel):
    """A person or organization that owns balances."""

    identity_id: str
    identity_type: Optional[IdentityType] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    other_names: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[datetime] = None
    email_address: Optional[str] = None
    phone_number: Optional[str] = None
    nationality: Optional[str] = None
    organization_name: Optional[str] = None
    category: Optional[str] = None
    street: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    post_code: Optional[str] = None
    city: Optional[str] = None
    created_at: Optional[datetime] = None
    meta_data: Dict[str, Any] = Field(default_factory=dict)


class IdentityRequest(BlnkRequest):
    """Request body for creating or updating an identity."""

    identity_type: IdentityType
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    other_names: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[datetime] = None
    email_address: Optional[str] = None
    phone_number: Optional[str] = None
    nationality: Optional[str] = None
    organization_name: Optional[str] = None
    category: Optional[str] = None
    street: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    post_code: Optional[str] = None
    city: Optional[str] = None
    meta_data: Optional[Dict[str, Any]] = None


class ReconciliationUpload(BlnkModel):
    """Result of uploading an external statement for reconciliation.

    :param upload_id: Identifier used to start a reconciliation run
    :type upload_id: str
    :param record_count: Number of records parsed from the file
    :type record_count: int
    :param source: Name of the external source
    :type source: Optional[str]
    """

    upload_id: str
    record_count: int = 0
    source: Optional[str] = None
