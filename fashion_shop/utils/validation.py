"""
Request-body normalization and product rule checks.

Bodies may come from JSON or form posts, so every value can arrive as a
string. `normalize_product` trims and coerces, `validate_product` and
`validate_product_update` return a `ValidationResult` instead of raising.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from fashion_shop.models.product import SEASONS

STRING_FIELDS = ["Product Category", "Product Name", "Season"]
INTEGER_FIELDS = ["Units Sold", "Returns", "Stock Level"]
NUMBER_FIELDS = ["Revenue", "Customer Rating", "Trend Score"]
ALL_FIELDS = STRING_FIELDS + INTEGER_FIELDS + NUMBER_FIELDS

NON_NEGATIVE_FIELDS = ["Units Sold", "Returns", "Revenue", "Stock Level"]
# largest value an INTEGER column holds
MAX_COUNT = 2 ** 63 - 1
RATING_RANGE = (1, 5)
TREND_RANGE = (0, 100)


@dataclass
class FieldError:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    """Outcome of a validation pass: normalized data or a list of field errors."""
    data: Dict[str, Any] = field(default_factory=dict)
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def to_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        f = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    return f if math.isfinite(f) else 0.0


def to_int(value: Any) -> int:
    # "12.7" -> 12, anything unparseable -> 0
    return int(to_float(value))


def to_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_product(body: Mapping[str, Any], fields: List[str] = None) -> Dict[str, Any]:
    """Trim strings and coerce numbers for `fields` (all product fields by default)."""
    out = {}
    for name in fields if fields is not None else ALL_FIELDS:
        raw = body.get(name)
        if name in STRING_FIELDS:
            out[name] = to_str(raw)
        elif name in INTEGER_FIELDS:
            out[name] = to_int(raw)
        else:
            out[name] = to_float(raw)
    return out


def _check(data: Dict[str, Any]) -> List[FieldError]:
    errors = []
    for name in STRING_FIELDS:
        if name in data and not data[name]:
            errors.append(FieldError(name, f"{name} is required"))

    for name in NON_NEGATIVE_FIELDS:
        if name in data and data[name] < 0:
            errors.append(FieldError(name, f"{name} cannot be negative"))

    for name in INTEGER_FIELDS:
        if name in data and data[name] > MAX_COUNT:
            errors.append(FieldError(name, f"{name} is too large"))

    lo, hi = RATING_RANGE
    rating = data.get("Customer Rating")
    if rating is not None and not lo <= rating <= hi:
        errors.append(FieldError("Customer Rating", f"Customer Rating must be between {lo} and {hi}"))

    lo, hi = TREND_RANGE
    trend = data.get("Trend Score")
    if trend is not None and not lo <= trend <= hi:
        errors.append(FieldError("Trend Score", f"Trend Score must be between {lo} and {hi}"))

    season = data.get("Season")
    if season and season not in SEASONS:
        errors.append(FieldError("Season", "Season must be one of: " + ", ".join(SEASONS)))
    return errors


def validate_product(body: Mapping[str, Any]) -> ValidationResult:
    data = normalize_product(body)
    return ValidationResult(data=data, errors=_check(data))


def validate_product_update(body: Mapping[str, Any]) -> ValidationResult:
    """
    Validate only the product fields present in `body`.

    Unknown keys are dropped. "Product Name" is the lookup key, so it is
    checked for presence but never part of the returned changes.
    """
    present = [name for name in ALL_FIELDS if name in body]
    data = normalize_product(body, present)
    errors = _check(data)
    data.pop("Product Name", None)
    return ValidationResult(data=data, errors=errors)
