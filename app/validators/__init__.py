"""
app/validators package marker.
"""

from app.validators.monetary import MonetaryParse, parse_monetary_value, parse_monetary_value_checked
from app.validators.row_normalizer import RowNormalizer

__all__ = [
    "MonetaryParse",
    "RowNormalizer",
    "parse_monetary_value",
    "parse_monetary_value_checked",
]
