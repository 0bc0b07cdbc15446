import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import crud
from ..mappers import to_department_out, to_employee_out, to_page
from ..models import Department
from ..schemas import DepartmentCreate, DepartmentOut, DepartmentPage, DepartmentUpdate, EmployeePage
from ..utils.errors import ValidationError
from .employees import require_department, require_employee

logger = logging.getLogger(__name__)

def _duplicate_name(name: str) -> ValidationError:
    return ValidationError(f"Department with name '{name}' already exists.")

def _save(db: Session, department: Department) -> None:
    # The unique constraint still catches a concurrent insert of the same name
    name, department_id = department.name, department.id
    try:
        crud.add(db, department)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Integrity error while saving department '%s': %s", name, e.orig)
        if crud.department_name_exists(db, name, exclude_id=department_id):
            raise _duplicate_name(name) from e
        raise

def _roster(db: Session, department: Department, expand: bool):
    return crud.find_employees_by_department(db, department.id) if expand else None

def create_department(db: Session, payload: DepartmentCreate) -> DepartmentOut:
    if crud.department_name_exists(db, payload.name):
        logger.warning("Rejected duplicate department name '%s'", payload.name)
        raise _duplicate_name(payload.name)

    department = Department(name=payload.name, creation_date=payload.creation_date)
    if payload.department_head_id is not None:
        department.department_head = require_employee(db, payload.department_head_id)

    _save(db, department)
    db.refresh(department)
    logger.info("Created department %s '%s'", department.id, department.name)
    return to_department_out(department)

def list_departments(db: Session, page: int, size: int, expand: bool = False) -> DepartmentPage:
    items, total = crud.list_page(db, Department, page, size)
    return to_page(items, page, size, total, lambda d: to_department_out(d, _roster(db, d, expand)))

def get_department(db: Session, department_id: int, expand: bool = False) -> DepartmentOut:
    department = require_department(db, department_id)
    return to_department_out(department, _roster(db, department, expand))

def list_department_employees(db: Session, department_id: int, page: int, size: int) -> EmployeePage:
    require_department(db, department_id)
    items, total = crud.page_employees_by_department(db, department_id, page, size)
    return to_page(items, page, size, total, to_employee_out)

def update_department(db: Session, department_id: int, payload: DepartmentUpdate) -> DepartmentOut:
    """
    Name and creation date are always replaced. The head reference follows
    the body: an id sets it, a missing or null id removes the current head.
    """
    department = require_department(db, department_id)

    if department.name != payload.name and crud.department_name_exists(db, payload.name, exclude_id=department.id):
        logger.warning("Rejected rename of department %s to existing name '%s'", department.id, payload.name)
        raise _duplicate_name(payload.name)

    department.name = payload.name
    department.creation_date = payload.creation_date

    if payload.department_head_id is not None:
        department.department_head = require_employee(db, payload.department_head_id)
    else:
        department.department_head = None

    _save(db, department)
    db.refresh(department)
    logger.info("Updated department %s", department.id)
    return to_department_out(department)

def delete_department(db: Session, department_id: int) -> None:
    department = require_department(db, department_id)

    employee_count = crud.count_employees_by_department(db, department.id)
    if employee_count > 0:
        logger.warning("Rejected delete of department %s with %s employees", department.id, employee_count)
        raise ValidationError(
            f"Cannot delete department as there are {employee_count} employees assigned to it."
        )

    crud.delete(db, department)
    db.commit()
    logger.info("Deleted department %s", department_id)
