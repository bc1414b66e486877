import logging
from .utils import registry_lock

logger = logging.getLogger(__name__)

_employee_count = 0

def increment_employee_count() -> int:
    global _employee_count
    with registry_lock:
        _employee_count += 1
        logger.debug("Empleado registrado, contador=%d", _employee_count)
        return _employee_count

def decrement_employee_count() -> int:
    """
    Resta un empleado vivo. Un decremento sin registro previo se ignora
    para que el contador nunca sea negativo.
    """
    global _employee_count
    with registry_lock:
        if _employee_count == 0:
            logger.warning("Liberación sin registro ignorada, el contador ya está en 0")
            return 0
        _employee_count -= 1
        logger.debug("Empleado liberado, contador=%d", _employee_count)
        return _employee_count

def get_total_employees() -> int:
    with registry_lock:
        return _employee_count
