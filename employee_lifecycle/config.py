import logging
import os

# Nombre fijo de la empresa, compartido por todos los empleados
COMPANY_NAME = "TechSolutions"

LOG_LEVEL_ENV = "EMPLOYEE_LIFECYCLE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def get_log_level() -> int:
    # Un nivel desconocido cae en WARNING en vez de romper el arranque
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "WARNING").upper())
    if isinstance(level, int):
        return level
    return logging.WARNING
