from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


class JobField(str, Enum):
    """Job fields that may be changed by a partial update"""
    TITLE = "title"
    SALARY = "salary"
    EQUITY = "equity"


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)

    class Config:
        extra = "forbid"


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    id and company_handle cannot be changed; sending them is a validation error.
    """
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("title may not be null")
        return v

    def to_update(self) -> Dict[JobField, Any]:
        """Fields the client actually sent"""
        sent = self.model_dump(exclude_unset=True)
        return {JobField(key): value for key, value in sent.items()}

    class Config:
        extra = "forbid"


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company_handle: str


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListResponse(BaseModel):
    jobs: List[JobResponse]


class JobDeleteResponse(BaseModel):
    deleted: str
