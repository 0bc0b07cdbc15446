from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from ..db import get_db
from ..schemas import EmployeeCreate, EmployeeDepartmentUpdate, EmployeeOut, EmployeePage, EmployeeUpdate
from ..services import employees as service
from ..utils.settings import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

router = APIRouter(prefix="/employees", tags=["employees"])

@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(payload: EmployeeCreate, db: Session = Depends(get_db)):
    return service.create_employee(db, payload)

@router.get("", response_model=EmployeePage)
def list_employees(
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    lookup: bool = Query(False, description="Return only {id, name} for each employee"),
    db: Session = Depends(get_db),
):
    return service.list_employees(db, page, size, lookup)

@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return service.get_employee(db, employee_id)

# Partial update: omitted fields are left untouched
@router.put("/{employee_id}", response_model=EmployeeOut)
def update_employee(employee_id: int, payload: EmployeeUpdate, db: Session = Depends(get_db)):
    return service.update_employee(db, employee_id, payload)

@router.patch("/{employee_id}/department", response_model=EmployeeOut)
def update_employee_department(
    employee_id: int, payload: EmployeeDepartmentUpdate, db: Session = Depends(get_db)
):
    return service.update_employee_department(db, employee_id, payload.new_department_id)
