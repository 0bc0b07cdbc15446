from datetime import date
from decimal import Decimal
from typing import Annotated, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from .utils.validators import not_in_future, positive_amount, require_text

# Salary is stored as NUMERIC(19, 2) but sent as a JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
SALARY_MAX_DIGITS = 19

T = TypeVar("T")

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

# ----------------------------
# Lookups ({id, name})
# ----------------------------
class EmployeeLookup(CamelModel):
    id: int
    name: str

class DepartmentLookup(CamelModel):
    id: int
    name: str

# ----------------------------
# Employee
# ----------------------------
class EmployeeCreate(CamelModel):
    name: str
    date_of_birth: date
    salary: Decimal
    address: Optional[str] = None
    role: str
    joining_date: date
    yearly_bonus_percentage: float = Field(allow_inf_nan=False)
    department_id: Optional[int] = None
    reporting_manager_id: Optional[int] = None

    @field_validator("name", "role")
    @classmethod
    def _not_blank(cls, v, info):
        return require_text(v, info.field_name)

    @field_validator("date_of_birth", "joining_date")
    @classmethod
    def _not_future(cls, v, info):
        return not_in_future(v, info.field_name)

    @field_validator("salary")
    @classmethod
    def _positive_salary(cls, v):
        return positive_amount(v, "salary", SALARY_MAX_DIGITS)

# Every field is optional; the service applies only the ones the client sent
class EmployeeUpdate(CamelModel):
    name: Optional[str] = None
    date_of_birth: Optional[date] = None
    salary: Optional[Decimal] = None
    address: Optional[str] = None
    role: Optional[str] = None
    joining_date: Optional[date] = None
    yearly_bonus_percentage: Optional[float] = Field(None, allow_inf_nan=False)
    department_id: Optional[int] = None
    reporting_manager_id: Optional[int] = None

    @field_validator("name", "role")
    @classmethod
    def _not_blank(cls, v, info):
        return v if v is None else require_text(v, info.field_name)

    @field_validator("date_of_birth", "joining_date")
    @classmethod
    def _not_future(cls, v, info):
        return v if v is None else not_in_future(v, info.field_name)

    @field_validator("salary")
    @classmethod
    def _positive_salary(cls, v):
        return v if v is None else positive_amount(v, "salary", SALARY_MAX_DIGITS)

class EmployeeDepartmentUpdate(CamelModel):
    new_department_id: int

class EmployeeOut(CamelModel):
    id: int
    name: str
    date_of_birth: date
    salary: Money
    department: Optional[DepartmentLookup] = None
    address: Optional[str] = None
    role: str
    joining_date: date
    yearly_bonus_percentage: float
    reporting_manager: Optional[EmployeeLookup] = None

# ----------------------------
# Department
# ----------------------------
class DepartmentCreate(CamelModel):
    name: str = Field(max_length=120)
    creation_date: date
    department_head_id: Optional[int] = None

    @field_validator("name")
    @classmethod
    def _not_blank(cls, v):
        return require_text(v, "name")

# Same contract as create: name and creation date are always replaced
class DepartmentUpdate(DepartmentCreate):
    pass

class DepartmentOut(CamelModel):
    id: int
    name: str
    creation_date: date
    department_head: Optional[EmployeeLookup] = None
    employees: Optional[List[EmployeeOut]] = None

# ----------------------------
# Pagination
# ----------------------------
class PagedResponse(CamelModel, Generic[T]):
    content: List[T]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    is_last: bool
    is_first: bool

# Full records first; a lookup only matches once the detail shape does not
EmployeeListItem = Annotated[Union[EmployeeOut, EmployeeLookup], Field(union_mode="left_to_right")]

EmployeePage = PagedResponse[EmployeeListItem]
DepartmentPage = PagedResponse[DepartmentOut]
