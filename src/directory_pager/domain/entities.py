"""
Core Domain Entities.

This module defines the user records flowing through the listing pipeline
and the single normalization policy every stage relies on when a field is
missing from upstream data.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

EMAIL_ATTRIBUTE = "email"


class UserStatus(str, Enum):
    """Account status values reported by the identity directory."""

    UNCONFIRMED = "UNCONFIRMED"
    CONFIRMED = "CONFIRMED"
    ARCHIVED = "ARCHIVED"
    COMPROMISED = "COMPROMISED"
    UNKNOWN = "UNKNOWN"
    RESET_REQUIRED = "RESET_REQUIRED"
    FORCE_CHANGE_PASSWORD = "FORCE_CHANGE_PASSWORD"
    EXTERNAL_PROVIDER = "EXTERNAL_PROVIDER"


class UserAttribute(BaseModel):
    """Single name/value pair attached to a user."""

    name: str = Field(..., description="Attribute name, e.g. 'email'")
    value: Optional[str] = Field(default=None, description="Attribute value")

    model_config = {"frozen": True}


class UserRecord(BaseModel):
    """One entry of the identity directory."""

    username: Optional[str] = Field(
        default=None, description="Directory-unique user name"
    )
    attributes: List[UserAttribute] = Field(
        default_factory=list,
        description="Ordered attributes (names are not guaranteed unique)",
    )
    enabled: Optional[bool] = Field(default=None, description="Account enabled")
    status: Optional[str] = Field(default=None, description="Raw account status")
    created_at: Optional[datetime] = Field(
        default=None, description="Creation timestamp (informational only)"
    )
    updated_at: Optional[datetime] = Field(
        default=None, description="Last modification timestamp (informational only)"
    )

    model_config = {"frozen": True}

    @property
    def email(self) -> Optional[str]:
        """Email derived from the attribute list."""
        return derive_email(self)


# =============================================================================
# Normalization policy shared by filtering and sorting
# =============================================================================


def derive_email(record: UserRecord) -> Optional[str]:
    """Return the value of the first attribute named ``email``, if any."""
    for attribute in record.attributes:
        if attribute.name == EMAIL_ATTRIBUTE:
            return attribute.value
    return None


def normalized_email(record: UserRecord) -> str:
    return derive_email(record) or ""


def normalized_username(record: UserRecord) -> str:
    return record.username or ""


def normalized_status(record: UserRecord) -> str:
    return record.status or ""


def normalized_enabled(record: UserRecord) -> bool:
    return bool(record.enabled)
