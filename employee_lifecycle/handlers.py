import copy
from .models import Employee

def print_employee_by_value(employee: Employee):
    """
    Trabaja sobre una copia propia del empleado; la copia se destruye
    al salir de la función.
    """
    with copy.deepcopy(employee) as emp:
        print(f"\n[Passed by Value] {emp.get_name()}")

# Paso por referencia: el mismo objeto, sin copias
def print_employee_by_reference(employee: Employee):
    print("\n[Passed by Reference]")
    employee.display_info()

def create_new_employee(name: str, employee_id: int, salary: float, department: str) -> Employee:
    new_emp = Employee(name, employee_id, salary, department)
    return new_emp
