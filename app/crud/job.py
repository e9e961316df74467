"""
CRUD operations for jobs.

Statements are written out here and completed by the builders in
app.core.sql. equity is stored as NUMERIC and surfaced as float.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import execute
from app.core.exceptions import DuplicateResource, InvalidInput, NotFound
from app.core.sql import FieldMapper, WhereBuilder, sql_for_partial_update
from app.schemas.job import JobCreateRequest, JobField

logger = logging.getLogger(__name__)

# Public job fields already match their columns
JOB_FIELDS = FieldMapper({
    JobField.TITLE: "title",
    JobField.SALARY: "salary",
    JobField.EQUITY: "equity",
})

_RETURNING = "id, title, salary, equity, company_handle"


def normalize(row: Dict[str, Any]) -> Dict[str, Any]:
    """Coerce NUMERIC equity to float."""
    if row.get("equity") is not None:
        row["equity"] = float(row["equity"])
    return row


def _as_fields(data: Mapping[Any, Any]) -> Dict[JobField, Any]:
    try:
        return {JobField(key): value for key, value in data.items()}
    except ValueError as e:
        raise InvalidInput(f"Cannot update field: {e}")


def create(db: Session, job_data: JobCreateRequest) -> Dict[str, Any]:
    """
    Create a job.

    Uniqueness of (title, company_handle) is enforced by the
    uq_jobs_title_company constraint; a violation is reported as
    DuplicateResource.

    Raises:
        DuplicateResource: If the company already has a job with this title
        InvalidInput: If the company does not exist
    """
    try:
        rows = execute(
            db,
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {_RETURNING}""",
            [job_data.title, job_data.salary, job_data.equity, job_data.company_handle],
        )
        db.commit()
    except IntegrityError:
        db.rollback()
        _raise_for_conflict(db, job_data)
        raise

    job = normalize(rows[0])
    logger.info(f"Created job {job['id']}: {job['title']} ({job['company_handle']})")
    return job


def _raise_for_conflict(db: Session, job_data: JobCreateRequest) -> None:
    """Translate a failed insert into a domain error, if it is one."""
    duplicate = execute(
        db,
        "SELECT id FROM jobs WHERE title = $1 AND company_handle = $2",
        [job_data.title, job_data.company_handle],
    )
    if duplicate:
        raise DuplicateResource(
            f"Duplicate job: {job_data.title} already exists for company: {job_data.company_handle}"
        )

    company = execute(db, "SELECT handle FROM companies WHERE handle = $1", [job_data.company_handle])
    if not company:
        raise InvalidInput(f"No company: {job_data.company_handle}")


def find_all(
    db: Session,
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None,
    company_handle: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    List jobs ordered by title.

    Args:
        db: Database session
        title: Case-insensitive substring of the title
        min_salary: Lower bound on salary (inclusive)
        has_equity: If true, only jobs with equity > 0; false means no filter
        company_handle: Exact company handle
    """
    where = (
        WhereBuilder()
        .contains("title", title)
        .at_least("salary", min_salary)
        .positive("equity", has_equity)
        .equals("company_handle", company_handle)
    )
    clause, values = where.render()

    rows = execute(db, f"SELECT {_RETURNING} FROM jobs{clause} ORDER BY title", values)
    return [normalize(row) for row in rows]


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Fetch a job by id.

    Raises:
        NotFound: If there is no such job
    """
    rows = execute(db, f"SELECT {_RETURNING} FROM jobs WHERE id = $1", [job_id])
    if not rows:
        raise NotFound(f"No job: {job_id}")
    return normalize(rows[0])


def update(db: Session, job_id: int, data: Mapping[JobField, Any]) -> Dict[str, Any]:
    """
    Partially update a job; only fields in data change.

    Raises:
        InvalidInput: If data is empty
        NotFound: If there is no such job
        DuplicateResource: If the new title is taken within the company
    """
    data = _as_fields(data)
    changes = sql_for_partial_update(data, JOB_FIELDS)

    try:
        rows = execute(
            db,
            f"""UPDATE jobs
                SET {changes.set_cols}
                WHERE id = ${changes.next_index}
                RETURNING {_RETURNING}""",
            [*changes.values, job_id],
        )
    except IntegrityError:
        db.rollback()
        raise DuplicateResource(f"Duplicate job: {data.get(JobField.TITLE)}")

    if not rows:
        db.rollback()
        raise NotFound(f"No job: {job_id}")

    db.commit()
    logger.info(f"Updated job {job_id}: {', '.join(f.value for f in data)}")
    return normalize(rows[0])


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job.

    Raises:
        NotFound: If there is no such job
    """
    rows = execute(db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
    if not rows:
        db.rollback()
        raise NotFound(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
