"""
CRUD operations for companies.

Statements are written out here and completed by the builders in
app.core.sql; rows come back as dicts keyed by public field names.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import execute
from app.core.exceptions import DuplicateResource, InvalidInput, NotFound
from app.core.sql import FieldMapper, WhereBuilder, sql_for_partial_update
from app.schemas.company import CompanyCreateRequest, CompanyField

logger = logging.getLogger(__name__)

COMPANY_FIELDS = FieldMapper({
    CompanyField.NUM_EMPLOYEES: "num_employees",
    CompanyField.LOGO_URL: "logo_url",
})

_RETURNING = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


def _as_fields(data: Mapping[Any, Any]) -> Dict[CompanyField, Any]:
    try:
        return {CompanyField(key): value for key, value in data.items()}
    except ValueError as e:
        raise InvalidInput(f"Cannot update field: {e}")


def create(db: Session, company_data: CompanyCreateRequest) -> Dict[str, Any]:
    """
    Create a company.

    Raises:
        DuplicateResource: If the handle or the name is already taken
    """
    try:
        rows = execute(
            db,
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {_RETURNING}""",
            [
                company_data.handle,
                company_data.name,
                company_data.description,
                company_data.num_employees,
                company_data.logo_url,
            ],
        )
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateResource(f"Duplicate company: {company_data.handle}")

    logger.info(f"Created company {company_data.handle}")
    return rows[0]


def find_all(
    db: Session,
    name: Optional[str] = None,
    min_employees: Optional[int] = None,
    max_employees: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    List companies ordered by name.

    Args:
        db: Database session
        name: Case-insensitive substring of the company name
        min_employees: Lower bound on num_employees (inclusive)
        max_employees: Upper bound on num_employees (inclusive)

    Raises:
        InvalidInput: If min_employees > max_employees
    """
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise InvalidInput("minEmployees cannot be greater than maxEmployees.")

    where = (
        WhereBuilder()
        .contains("name", name)
        .at_least("num_employees", min_employees)
        .at_most("num_employees", max_employees)
    )
    clause, values = where.render()

    return execute(db, f"SELECT {_RETURNING} FROM companies{clause} ORDER BY name", values)


def get(db: Session, handle: str) -> Dict[str, Any]:
    """
    Fetch a company by handle.

    Raises:
        NotFound: If no company has this handle
    """
    rows = execute(db, f"SELECT {_RETURNING} FROM companies WHERE handle = $1", [handle])
    if not rows:
        raise NotFound(f"No company: {handle}")

    return rows[0]


def update(db: Session, handle: str, data: Mapping[CompanyField, Any]) -> Dict[str, Any]:
    """
    Partially update a company; only fields in data change.

    Raises:
        InvalidInput: If data is empty
        NotFound: If no company has this handle
        DuplicateResource: If the new name belongs to another company
    """
    data = _as_fields(data)
    changes = sql_for_partial_update(data, COMPANY_FIELDS)

    try:
        rows = execute(
            db,
            f"""UPDATE companies
                SET {changes.set_cols}
                WHERE handle = ${changes.next_index}
                RETURNING {_RETURNING}""",
            [*changes.values, handle],
        )
    except IntegrityError:
        db.rollback()
        raise DuplicateResource(f"Duplicate company name: {data.get(CompanyField.NAME)}")

    if not rows:
        db.rollback()
        raise NotFound(f"No company: {handle}")

    db.commit()
    logger.info(f"Updated company {handle}: {', '.join(f.value for f in data)}")
    return rows[0]


def remove(db: Session, handle: str) -> None:
    """
    Delete a company (its jobs go with it).

    Raises:
        NotFound: If no company has this handle
    """
    rows = execute(db, "DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle])
    if not rows:
        db.rollback()
        raise NotFound(f"No company: {handle}")

    db.commit()
    logger.info(f"Deleted company {handle}")
