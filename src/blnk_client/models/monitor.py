"""Pydantic models for balance monitors."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from .base_models import BlnkModel, BlnkRequest


class MonitorField(str, Enum):
    BALANCE = "balance"
    CREDIT_BALANCE = "credit_balance"
    DEBIT_BALANCE = "debit_balance"


class MonitorOperator(str, Enum):
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_OR_EQUAL = ">="
    LESS_OR_EQUAL = "<="
    EQUAL = "="
    NOT_EQUAL = "!="


class MonitorCondition(BlnkModel):
    """Condition evaluated against a balance after every update.

    :param field: Balance field being watched
    :type field: MonitorField
    :param operator: Comparison operator
    :type operator: MonitorOperator
    :param value: Threshold in display units
    :type value: float
    :param precision: Multiplier applied to ``value`` by the service
    :type precision: Optional[float]
    """

    field: MonitorField
    operator: MonitorOperator
    value: float
    precision: Optional[float] = None
    precise_value: Optional[int] = None


class BalanceMonitor(BlnkModel):
    monitor_id: str
    balance_id: str
    condition: MonitorCondition
    description: Optional[str] = None
    call_back_url: Optional[str] = None
    created_at: Optional[datetime] = None


class CreateBalanceMonitorRequest(BlnkRequest):
    """Request body for creating or updating a balance monitor."""

    balance_id: str = Field(..., min_length=1)
    condition: MonitorCondition
    description: Optional[str] = None
    call_back_url: Optional[str] = None
