from threading import Lock

# Lock en proceso para el contador compartido de empleados
registry_lock = Lock()

def format_amount(value: float) -> str:
    # Seis cifras significativas, sin ceros finales (50000.0 -> "50000")
    return format(value, "g")

def address_of(obj) -> str:
    return f"0x{id(obj):x}"
