from employee_lifecycle.handlers import (
    create_new_employee,
    print_employee_by_reference,
    print_employee_by_value,
)
from employee_lifecycle.models import Employee


def test_pass_by_value_copies_and_destroys_temporary(capsys):
    emp = Employee("Ahmed Khan", 101, 50000.0, "Engineering")
    capsys.readouterr()

    print_employee_by_value(emp)
    out = capsys.readouterr().out
    assert "Creating deep copy of: Ahmed Khan" in out
    assert "[Passed by Value] Ahmed Khan" in out
    assert "Destroying employee: Ahmed Khan" in out
    assert Employee.get_total_employees() == 1
    assert not emp.released


def test_pass_by_reference_makes_no_copy(capsys):
    emp = Employee("Sara Ali", 102, 55000.0, "Marketing")
    capsys.readouterr()

    print_employee_by_reference(emp)
    out = capsys.readouterr().out
    assert "[Passed by Reference]" in out
    assert "Name: Sara Ali" in out
    assert "Creating deep copy" not in out
    assert "Employee created" not in out
    assert Employee.get_total_employees() == 1


def test_create_new_employee_returns_live_value():
    emp = create_new_employee("Ali Raza", 104, 52000.0, "HR")
    assert (emp.get_name(), emp.get_id(), emp.get_salary(), emp.department) == (
        "Ali Raza", 104, 52000.0, "HR"
    )
    assert Employee.get_total_employees() == 1
