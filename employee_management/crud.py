from typing import List, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from .db import Base
from .models import Department, Employee

ModelT = TypeVar("ModelT", bound=Base)

# ----------------------------
# Generic helpers
# ----------------------------
def _paginate(stmt: Select, page: int, size: int) -> Select:
    # page is zero-indexed
    return stmt.offset(page * size).limit(size)

def get(db: Session, model: Type[ModelT], obj_id: int) -> Optional[ModelT]:
    return db.get(model, obj_id)

def list_page(db: Session, model: Type[ModelT], page: int, size: int) -> Tuple[Sequence[ModelT], int]:
    """
    Returns one page of rows ordered by id, plus the total row count.
    """
    stmt = select(model).order_by(model.id)
    items = db.execute(_paginate(stmt, page, size)).scalars().all()
    total = db.scalar(select(func.count()).select_from(model))
    return items, total or 0

def add(db: Session, obj: ModelT) -> ModelT:
    db.add(obj)
    db.flush()
    return obj

def delete(db: Session, obj: Base) -> None:
    db.delete(obj)
    db.flush()

# ----------------------------
# Employee queries
# ----------------------------
def find_employees_by_department(db: Session, department_id: int) -> List[Employee]:
    stmt = select(Employee).where(Employee.department_id == department_id).order_by(Employee.id)
    return list(db.execute(stmt).scalars().all())

def page_employees_by_department(
    db: Session, department_id: int, page: int, size: int
) -> Tuple[Sequence[Employee], int]:
    stmt = select(Employee).where(Employee.department_id == department_id).order_by(Employee.id)
    items = db.execute(_paginate(stmt, page, size)).scalars().all()
    return items, count_employees_by_department(db, department_id)

def count_employees_by_department(db: Session, department_id: int) -> int:
    stmt = select(func.count()).select_from(Employee).where(Employee.department_id == department_id)
    return db.scalar(stmt) or 0

# ----------------------------
# Department queries
# ----------------------------
def department_name_exists(db: Session, name: str, exclude_id: Optional[int] = None) -> bool:
    stmt = select(Department.id).where(Department.name == name)
    if exclude_id is not None:
        stmt = stmt.where(Department.id != exclude_id)
    return db.execute(stmt.limit(1)).first() is not None
