from .classifier import (
    SIZE_ORDER,
    SIZE_TO_PIXEL,
    SizeClass,
    determine_size_class,
    extract_base_name,
    size_class_for_width,
)
from .groups import GroupedIcon, group_by_base_name
from .validate import ValidationReport, validate_icon_manifest

__all__ = [
    # classification
    "SIZE_ORDER",
    "SIZE_TO_PIXEL",
    "SizeClass",
    "determine_size_class",
    "extract_base_name",
    "size_class_for_width",

    # grouping
    "GroupedIcon",
    "group_by_base_name",

    # validation
    "ValidationReport",
    "validate_icon_manifest",
]
