"""Row normalisation and classification."""
from .schemas import Category, ClassificationRule
from .normalize import (
    parse_amount,
    parse_datetime,
    classify_row,
    infer_is_dining,
    spend_value,
    service_key,
    normalize_rows,
)
