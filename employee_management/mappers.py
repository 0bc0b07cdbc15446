"""
Entity -> response conversion.

References between entities (department, department head, reporting
manager) are always rendered as {id, name} lookups. A department's roster
is only embedded when the caller asks for it, and its members carry their
department as a lookup again, so nesting stops after one level.
"""
import math
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from .models import Department, Employee
from .schemas import (
    DepartmentLookup,
    DepartmentOut,
    EmployeeLookup,
    EmployeeOut,
    PagedResponse,
)

S = TypeVar("S")
R = TypeVar("R")

def to_employee_lookup(employee: Optional[Employee]) -> Optional[EmployeeLookup]:
    if employee is None:
        return None
    return EmployeeLookup(id=employee.id, name=employee.name)

def to_department_lookup(department: Optional[Department]) -> Optional[DepartmentLookup]:
    if department is None:
        return None
    return DepartmentLookup(id=department.id, name=department.name)

def to_employee_out(employee: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=employee.id,
        name=employee.name,
        date_of_birth=employee.date_of_birth,
        salary=employee.salary,
        department=to_department_lookup(employee.department),
        address=employee.address,
        role=employee.role,
        joining_date=employee.joining_date,
        yearly_bonus_percentage=employee.yearly_bonus_percentage,
        reporting_manager=to_employee_lookup(employee.reporting_manager),
    )

def to_department_out(department: Department, roster: Optional[Iterable[Employee]] = None) -> DepartmentOut:
    # roster is None when expansion was not requested
    return DepartmentOut(
        id=department.id,
        name=department.name,
        creation_date=department.creation_date,
        department_head=to_employee_lookup(department.department_head),
        employees=None if roster is None else [to_employee_out(e) for e in roster],
    )

def to_page(items: Sequence[S], page: int, size: int, total: int, mapper: Callable[[S], R]) -> PagedResponse[R]:
    total_pages = math.ceil(total / size) if size else 0
    return PagedResponse(
        content=[mapper(i) for i in items],
        page_number=page,
        page_size=size,
        total_elements=total,
        total_pages=total_pages,
        is_first=page == 0,
        is_last=page + 1 >= total_pages,
    )
