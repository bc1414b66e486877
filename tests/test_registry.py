import logging

from employee_lifecycle import registry


def test_increment_and_decrement():
    assert registry.increment_employee_count() == 1
    assert registry.increment_employee_count() == 2
    assert registry.decrement_employee_count() == 1
    assert registry.get_total_employees() == 1


def test_decrement_at_zero_stays_zero(caplog):
    with caplog.at_level(logging.WARNING, logger="employee_lifecycle.registry"):
        assert registry.decrement_employee_count() == 0
    assert registry.get_total_employees() == 0
    assert any(rec.levelno == logging.WARNING for rec in caplog.records)
