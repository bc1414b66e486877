from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from typing import ClassVar
from .config import COMPANY_NAME
from .registry import increment_employee_count, decrement_employee_count, get_total_employees
from .utils import format_amount

class Employee(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    company_name: ClassVar[str] = COMPANY_NAME

    name: str
    employee_id: int = Field(..., frozen=True, description="ID asignado al crear el empleado")
    salary: float
    department: str = Field(..., frozen=True, description="Departamento, no cambia nunca")

    _released: bool = PrivateAttr(default=False)

    def __init__(self, name: str, employee_id: int, salary: float, department: str):
        super().__init__(name=name, employee_id=employee_id, salary=salary, department=department)
        self._register(f"Employee created: {self.name}")

    def _register(self, notice: str):
        increment_employee_count()
        print(notice)

    # Copias: siempre profundas, cada una cuenta como un empleado nuevo
    def _duplicate(self) -> "Employee":
        # model_construct no pasa por __init__: sin aviso de creación ni conteo
        return type(self).model_construct(**self.model_dump())

    def clone(self) -> "Employee":
        duplicate = self._duplicate()
        duplicate._register(f"Creating deep copy of: {self.name}")
        return duplicate

    def model_copy(self, *, update=None, deep: bool = False) -> "Employee":
        """
        Copia con cambios opcionales. Los cambios pasan por la validación de
        asignación, así que department y employee_id siguen siendo de solo
        lectura; si alguno falla no se registra ninguna copia.
        """
        duplicate = self._duplicate()
        for field, value in (update or {}).items():
            setattr(duplicate, field, value)
        duplicate._register(f"Creating deep copy of: {self.name}")
        return duplicate

    def __copy__(self) -> "Employee":
        return self.clone()

    def __deepcopy__(self, memo=None) -> "Employee":
        if memo is None:
            memo = {}
        if id(self) in memo:
            return memo[id(self)]
        duplicate = self.clone()
        memo[id(self)] = duplicate
        return duplicate

    def release(self):
        """
        Destruye el empleado: resta uno al contador compartido.
        Solo la primera llamada tiene efecto.
        """
        if self._released:
            return
        self._released = True
        print(f"Destroying employee: {self.name}")
        decrement_employee_count()

    @property
    def released(self) -> bool:
        return self._released

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()

    def display_info(self):
        print("\n--- Employee Details ---")
        print(f"Company: {self.company_name}")
        print(f"Name: {self.name}")
        print(f"ID: {self.employee_id}")
        print(f"Department: {self.department}")
        print(f"Salary: ${format_amount(self.salary)}")

    def identity_reference(self) -> "Employee":
        return self

    def update_salary(self, new_salary: float):
        self.salary = new_salary

    def update_name(self, new_name: str):
        self.name = new_name

    def get_name(self) -> str:
        return self.name

    def get_id(self) -> int:
        return self.employee_id

    def get_salary(self) -> float:
        return self.salary

    @classmethod
    def display_company_info(cls):
        print("\n=== Company Information ===")
        print(f"Company: {cls.company_name}")
        print(f"Total Employees: {get_total_employees()}")

    @classmethod
    def get_total_employees(cls) -> int:
        return get_total_employees()

class ConstEmployee(Employee):
    # Instancia de solo lectura: cualquier asignación lanza ValidationError
    model_config = ConfigDict(frozen=True)
