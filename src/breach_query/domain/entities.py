"""
Core Domain Entities.

This module defines the breach record shape and the field metadata that the
query chain operates on. Field names mirror the wire format exactly and are
case-sensitive.
"""

from __future__ import annotations

import ipaddress
import re
from datetime import datetime
from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# RFC 1123 hostname label
_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")


class FieldType(str, Enum):
    """Semantic type of a breach field, used to pick a comparison rule."""

    DATE = "date"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


# Wire fields holding ISO-8601 timestamps
DATE_FIELDS: Tuple[str, ...] = ("AddedDate", "BreachDate", "ModifiedDate")

# Boolean flags exposed as chain filters
BOOLEAN_FLAGS: Tuple[str, ...] = (
    "IsVerified",
    "IsFabricated",
    "IsSensitive",
    "IsRetired",
    "IsSpamList",
)


class SortField(str, Enum):
    """Fields a breach collection can be sorted by."""

    ADDED_DATE = "AddedDate"
    BREACH_DATE = "BreachDate"
    DOMAIN = "Domain"
    IS_FABRICATED = "IsFabricated"
    IS_RETIRED = "IsRetired"
    IS_SENSITIVE = "IsSensitive"
    IS_SPAM_LIST = "IsSpamList"
    IS_VERIFIED = "IsVerified"
    MODIFIED_DATE = "ModifiedDate"
    NAME = "Name"
    PWN_COUNT = "PwnCount"

    @property
    def field_type(self) -> FieldType:
        """Declared semantic type of this field."""
        return FIELD_TYPES[self]


FIELD_TYPES: Dict[SortField, FieldType] = {
    SortField.ADDED_DATE: FieldType.DATE,
    SortField.BREACH_DATE: FieldType.DATE,
    SortField.DOMAIN: FieldType.STRING,
    SortField.IS_FABRICATED: FieldType.BOOLEAN,
    SortField.IS_RETIRED: FieldType.BOOLEAN,
    SortField.IS_SENSITIVE: FieldType.BOOLEAN,
    SortField.IS_SPAM_LIST: FieldType.BOOLEAN,
    SortField.IS_VERIFIED: FieldType.BOOLEAN,
    SortField.MODIFIED_DATE: FieldType.DATE,
    SortField.NAME: FieldType.STRING,
    SortField.PWN_COUNT: FieldType.NUMBER,
}


def is_hostname(value: str) -> bool:
    """Check whether value is a hostname or an IP address literal."""
    try:
        ipaddress.ip_address(value)
        return True
    except ValueError:
        pass

    name = value[:-1] if value.endswith(".") else value
    if not name or len(name) > 253:
        return False
    return all(_HOSTNAME_LABEL.match(label) for label in name.split("."))


class BreachRecord(BaseModel):
    """Declared shape of a single breach as served by the breach list API."""

    Name: str = Field(..., description="Unique breach identifier")
    Title: str = Field(..., description="Human readable title")
    Domain: str = Field(..., description="Primary domain, may be empty")
    AddedDate: datetime = Field(..., description="When the breach was loaded")
    BreachDate: datetime = Field(..., description="When the breach occurred")
    ModifiedDate: datetime = Field(..., description="Last modification")
    PwnCount: int = Field(..., description="Number of affected accounts")
    Description: str
    LogoPath: str
    DataClasses: List[str] = Field(..., description="Compromised data kinds")
    IsVerified: bool
    IsFabricated: bool
    IsSensitive: bool
    IsRetired: bool
    IsSpamList: bool

    # Unknown descriptive fields are carried through untouched
    model_config = ConfigDict(extra="allow")

    @field_validator("Domain")
    @classmethod
    def _check_domain(cls, value: str) -> str:
        if value and not is_hostname(value):
            raise ValueError(f"must be a valid hostname or empty, got {value!r}")
        return value
