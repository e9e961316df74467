from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin
from app.crud import company as company_crud
from app.schemas.company import (
    CompanyCreateRequest,
    CompanyUpdateRequest,
    CompanyEnvelope,
    CompanyListResponse,
    CompanyDeleteResponse,
)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("", status_code=201, response_model=CompanyEnvelope, dependencies=[Depends(ensure_admin)])
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a company.

    Authorization required: admin
    """
    company = company_crud.create(db, request)
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the name"),
    min_employees: Optional[int] = Query(None, ge=0, alias="minEmployees"),
    max_employees: Optional[int] = Query(None, ge=0, alias="maxEmployees"),
    db: Session = Depends(get_db)
):
    """
    List companies ordered by name, optionally filtered.

    minEmployees may not exceed maxEmployees.
    """
    companies = company_crud.find_all(
        db,
        name=name,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company by handle."""
    return {"company": company_crud.get(db, handle)}


@router.patch("/{handle}", response_model=CompanyEnvelope, dependencies=[Depends(ensure_admin)])
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Partially update a company. Fields can be: name, description, numEmployees, logoUrl.

    Authorization required: admin
    """
    company = company_crud.update(db, handle, request.to_update())
    return {"company": company}


@router.delete("/{handle}", response_model=CompanyDeleteResponse, dependencies=[Depends(ensure_admin)])
def delete_company(handle: str, db: Session = Depends(get_db)):
    """
    Delete a company and its jobs.

    Authorization required: admin
    """
    company_crud.remove(db, handle)
    return {"deleted": handle}
