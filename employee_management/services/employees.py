import logging

from sqlalchemy.orm import Session

from .. import crud
from ..mappers import to_employee_lookup, to_employee_out, to_page
from ..models import Department, Employee
from ..schemas import EmployeeCreate, EmployeeOut, EmployeePage, EmployeeUpdate
from ..utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Fields copied as-is on update; a null here means "leave unchanged"
PLAIN_FIELDS = (
    "name",
    "date_of_birth",
    "salary",
    "address",
    "role",
    "joining_date",
    "yearly_bonus_percentage",
)

def require_employee(db: Session, employee_id: int, label: str = "Employee") -> Employee:
    employee = crud.get(db, Employee, employee_id)
    if employee is None:
        raise NotFoundError(f"{label} not found with ID: {employee_id}")
    return employee

def require_department(db: Session, department_id: int, label: str = "Department") -> Department:
    department = crud.get(db, Department, department_id)
    if department is None:
        raise NotFoundError(f"{label} not found with ID: {department_id}")
    return department

def _check_reporting_chain(employee: Employee, manager: Employee) -> None:
    # Walk upwards from the new manager; reaching the employee means a loop
    seen = set()
    current = manager
    while current is not None and current.id not in seen:
        if current.id == employee.id:
            raise ValidationError(
                f"Assigning reporting manager {manager.id} to employee {employee.id} would create a reporting cycle."
            )
        seen.add(current.id)
        current = current.reporting_manager

def create_employee(db: Session, payload: EmployeeCreate) -> EmployeeOut:
    employee = Employee(**payload.model_dump(exclude={"department_id", "reporting_manager_id"}))

    if payload.department_id is not None:
        employee.department = require_department(db, payload.department_id)

    if payload.reporting_manager_id is not None:
        employee.reporting_manager = require_employee(db, payload.reporting_manager_id, "Reporting manager")

    crud.add(db, employee)
    db.commit()
    db.refresh(employee)
    logger.info("Created employee %s (department=%s)", employee.id, employee.department_id)
    return to_employee_out(employee)

def list_employees(db: Session, page: int, size: int, lookup: bool = False) -> EmployeePage:
    items, total = crud.list_page(db, Employee, page, size)
    mapper = to_employee_lookup if lookup else to_employee_out
    return to_page(items, page, size, total, mapper)

def get_employee(db: Session, employee_id: int) -> EmployeeOut:
    return to_employee_out(require_employee(db, employee_id))

def update_employee(db: Session, employee_id: int, payload: EmployeeUpdate) -> EmployeeOut:
    """
    Partial update: only keys present in the request body are considered.

    For the department and reporting manager references an explicit null
    clears the reference; for every other field a null is ignored.
    """
    employee = require_employee(db, employee_id)
    changes = payload.model_dump(exclude_unset=True)

    for field in PLAIN_FIELDS:
        if changes.get(field) is not None:
            setattr(employee, field, changes[field])

    if "department_id" in changes:
        department_id = changes["department_id"]
        if department_id is None:
            employee.department = None
        else:
            employee.department = require_department(db, department_id, "New department")

    if "reporting_manager_id" in changes:
        manager_id = changes["reporting_manager_id"]
        if manager_id is None:
            employee.reporting_manager = None
        else:
            if manager_id == employee.id:
                logger.warning("Rejected self-reporting update for employee %s", employee.id)
                raise ValidationError("An employee cannot be their own reporting manager.")
            manager = require_employee(db, manager_id, "New reporting manager")
            _check_reporting_chain(employee, manager)
            employee.reporting_manager = manager

    db.commit()
    db.refresh(employee)
    logger.info("Updated employee %s fields=%s", employee.id, sorted(changes))
    return to_employee_out(employee)

def update_employee_department(db: Session, employee_id: int, new_department_id: int) -> EmployeeOut:
    employee = require_employee(db, employee_id)
    department = require_department(db, new_department_id, "New department")

    previous = employee.department_id
    employee.department = department
    db.commit()
    db.refresh(employee)
    logger.info("Moved employee %s from department %s to %s", employee.id, previous, department.id)
    return to_employee_out(employee)
