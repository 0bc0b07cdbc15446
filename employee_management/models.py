from datetime import date
from decimal import Decimal

from sqlalchemy import String, Integer, Date, Float, Numeric, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .db import Base

# Department model
class Department(Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    creation_date: Mapped[date] = mapped_column(Date, nullable=False)
    # employees -> departments -> employees is a cycle; the ALTER breaks it on create/drop
    head_employee_id: Mapped[int | None] = mapped_column(
        ForeignKey("employees.id", use_alter=True, name="fk_departments_head_employee_id"),
        nullable=True,
    )

    # Relationships (joins)
    department_head = relationship(
        "Employee", foreign_keys=[head_employee_id], post_update=True
    )

# Employee model
class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    salary: Mapped[Decimal] = mapped_column(Numeric(19, 2), nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    joining_date: Mapped[date] = mapped_column(Date, nullable=False)
    yearly_bonus_percentage: Mapped[float] = mapped_column(Float, nullable=False)
    department_id: Mapped[int | None] = mapped_column(
        ForeignKey("departments.id"), nullable=True, index=True
    )
    reporting_manager_id: Mapped[int | None] = mapped_column(
        ForeignKey("employees.id"), nullable=True
    )

    # Relationships (joins)
    department = relationship("Department", foreign_keys=[department_id])
    reporting_manager = relationship("Employee", remote_side=[id], foreign_keys=[reporting_manager_id])
