from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin
from app.crud import job as job_crud
from app.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobEnvelope,
    JobListResponse,
    JobDeleteResponse,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post("", status_code=201, response_model=JobEnvelope, dependencies=[Depends(ensure_admin)])
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a job for an existing company.

    Authorization required: admin
    """
    job = job_crud.create(db, request)
    return {"job": job}


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive substring of the title"),
    min_salary: Optional[int] = Query(None, ge=0, alias="minSalary"),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    company_handle: Optional[str] = Query(None, alias="companyHandle"),
    db: Session = Depends(get_db)
):
    """
    List jobs ordered by title, optionally filtered.

    hasEquity=true keeps only jobs with non-zero equity.
    """
    jobs = job_crud.find_all(
        db,
        title=title,
        min_salary=min_salary,
        has_equity=has_equity,
        company_handle=company_handle,
    )
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope, dependencies=[Depends(ensure_admin)])
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Partially update a job. Fields can be: title, salary, equity.

    Authorization required: admin
    """
    job = job_crud.update(db, job_id, request.to_update())
    return {"job": job}


@router.delete("/{job_id}", response_model=JobDeleteResponse, dependencies=[Depends(ensure_admin)])
def delete_job(job_id: int, db: Session = Depends(get_db)):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)
    return {"deleted": str(job_id)}
