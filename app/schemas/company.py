"""
Pydantic schemas for Company API requests/responses.

Public field names are camelCase (numEmployees, logoUrl); the CRUD layer
maps them to storage columns.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse
from pydantic import BaseModel, Field, field_validator


class CompanyField(str, Enum):
    """Company fields that may be changed by a partial update."""
    NAME = "name"
    DESCRIPTION = "description"
    NUM_EMPLOYEES = "numEmployees"
    LOGO_URL = "logoUrl"


def _valid_url(v: str) -> bool:
    p = urlparse(v)
    return bool(p.scheme in ("http", "https") and p.netloc)


class CompanyCreateRequest(BaseModel):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    @field_validator("logo_url")
    @classmethod
    def validate_logo_url(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not _valid_url(v):
            raise ValueError("logoUrl must be an absolute http(s) URL")
        return v

    class Config:
        populate_by_name = True
        extra = "forbid"


class CompanyUpdateRequest(BaseModel):
    """
    Schema for a partial company update.

    handle is immutable and therefore not accepted here.
    """
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("logo_url")
    @classmethod
    def validate_logo_url(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not _valid_url(v):
            raise ValueError("logoUrl must be an absolute http(s) URL")
        return v

    def to_update(self) -> Dict[CompanyField, Any]:
        """Fields the client actually sent, keyed by public name."""
        sent = self.model_dump(by_alias=True, exclude_unset=True)
        return {CompanyField(key): value for key, value in sent.items()}

    class Config:
        populate_by_name = True
        extra = "forbid"


class CompanyResponse(BaseModel):
    """Schema for company response"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    class Config:
        populate_by_name = True


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyListResponse(BaseModel):
    companies: List[CompanyResponse]


class CompanyDeleteResponse(BaseModel):
    deleted: str
