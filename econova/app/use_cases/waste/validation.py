import math
from typing import Any, Dict, Optional

from econova.libs.result import Error

QUANTITY_FIELDS = ("organic_waste", "inorganic_waste", "recyclable_waste", "poda_waste")
MEASURED_FIELDS = ("trees_saved", "water_saved", "energy_saved")


def validate_numbers(values: Dict[str, Any]) -> Optional[Error]:
    """VALIDATION_ERROR for the first negative or non-finite number, else None."""
    for field in QUANTITY_FIELDS + MEASURED_FIELDS:
        value = values.get(field)
        if value is None:
            continue
        if not math.isfinite(value):
            return Error("VALIDATION_ERROR", f"{field} must be a finite number", reason=field)
        if value < 0:
            return Error("VALIDATION_ERROR", f"{field} must not be negative", reason=field)
    return None
