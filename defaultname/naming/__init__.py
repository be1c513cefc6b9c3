"""Name casing and candidate-list formatting."""

from defaultname.naming.case import (
    CaseTransform,
    apply_case_transform,
    camel_case,
    pascal_case,
    snake_case,
    split_words,
)
from defaultname.naming.variants import format_name_variants

__all__ = [
    "CaseTransform",
    "apply_case_transform",
    "camel_case",
    "format_name_variants",
    "pascal_case",
    "snake_case",
    "split_words",
]
