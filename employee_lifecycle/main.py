import argparse
import logging
from contextlib import ExitStack
from .config import LOG_FORMAT, get_log_level
from .handlers import create_new_employee, print_employee_by_reference, print_employee_by_value
from .models import ConstEmployee, Employee
from .registry import get_total_employees
from .utils import address_of

logger = logging.getLogger(__name__)

BANNER = "======================================"

def run_demo():
    print(BANNER)
    print("   TECHSOLUTIONS EMPLOYEE SYSTEM")
    print(BANNER + "\n")

    Employee.display_company_info()

    # Cada empleado "de pila" queda en el stack: se destruyen en orden inverso al salir
    with ExitStack() as stack:
        print("\n--- Creating Employees ---")
        emp1 = stack.enter_context(Employee("Ahmed Khan", 101, 50000.0, "Engineering"))
        emp2 = stack.enter_context(Employee("Sara Ali", 102, 55000.0, "Marketing"))

        emp1.display_info()
        emp2.display_info()

        # Asignación "dinámica": se libera a mano más abajo
        print("\n--- Dynamic Allocation ---")
        emp3 = Employee("Fatima Hassan", 103, 60000.0, "Finance")
        stack.callback(emp3.release)
        emp3.display_info()

        print("\n--- This Pointer Demo ---")
        print(f"Address of emp1: {address_of(emp1)}")
        print(f"This pointer: {address_of(emp1.identity_reference())}")

        print("\n--- Passing Objects ---")
        print_employee_by_value(emp1)
        print_employee_by_reference(emp2)

        print("\n--- Returning Object ---")
        emp4 = stack.enter_context(create_new_employee("Ali Raza", 104, 52000.0, "HR"))
        emp4.display_info()

        print("\n" + BANNER)
        print("   DEEP COPY DEMONSTRATION")
        print(BANNER)

        original = stack.enter_context(Employee("Zain Malik", 105, 58000.0, "IT"))
        print("\nOriginal Employee:")
        original.display_info()

        deep_copy = stack.enter_context(original.clone())
        print("\nDeep Copy Created:")
        deep_copy.display_info()

        print("\n--- Modifying Original ---")
        original.update_name("Zain Malik (Senior)")
        original.update_salary(65000.0)

        print("\nAfter Modification:")
        print("\nOriginal (Modified):")
        original.display_info()

        print("\nDeep Copy (Unchanged):")
        deep_copy.display_info()

        print("\n** Deep copy has independent memory **")

        print("\n--- Adding New Employee ---")
        stack.enter_context(Employee("Ayesha Iqbal", 106, 54000.0, "Operations"))
        Employee.display_company_info()

        print("\n--- Const Object ---")
        const_emp = stack.enter_context(ConstEmployee("Hassan Ahmed", 107, 56000.0, "QA"))
        const_emp.display_info()

        emp3.release()

        print("\n--- Final Statistics ---")
        Employee.display_company_info()

        print("\n" + BANNER)
        print("   PROGRAM COMPLETED")
        print(BANNER + "\n")

    logger.debug("Demo finalizada, empleados vivos=%d", get_total_employees())

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="TechSolutions employee lifecycle demo")
    parser.add_argument("--verbose", action="store_true", help="Log registry changes at DEBUG level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format=LOG_FORMAT,
    )

    run_demo()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
