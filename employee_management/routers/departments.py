from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from ..db import get_db
from ..schemas import DepartmentCreate, DepartmentOut, DepartmentPage, DepartmentUpdate, EmployeePage
from ..services import departments as service
from ..utils.settings import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

router = APIRouter(prefix="/departments", tags=["departments"])

@router.post("", response_model=DepartmentOut, status_code=status.HTTP_201_CREATED)
def create_department(payload: DepartmentCreate, db: Session = Depends(get_db)):
    return service.create_department(db, payload)

@router.get("", response_model=DepartmentPage)
def list_departments(
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    expand: bool = Query(False, description="Embed each department's employees"),
    db: Session = Depends(get_db),
):
    return service.list_departments(db, page, size, expand)

@router.get("/{department_id}", response_model=DepartmentOut)
def get_department(
    department_id: int,
    expand: bool = Query(False, description="Embed the department's employees"),
    db: Session = Depends(get_db),
):
    return service.get_department(db, department_id, expand)

@router.get("/{department_id}/employees", response_model=EmployeePage)
def list_department_employees(
    department_id: int,
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    return service.list_department_employees(db, department_id, page, size)

# Full replace of name and creation date; a missing head id clears the head
@router.put("/{department_id}", response_model=DepartmentOut)
def update_department(department_id: int, payload: DepartmentUpdate, db: Session = Depends(get_db)):
    return service.update_department(db, department_id, payload)

@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department(department_id: int, db: Session = Depends(get_db)):
    service.delete_department(db, department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
