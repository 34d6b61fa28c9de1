from .case import create_safe_component_name, to_component_name, validate_component_name
from .component import ComponentOptions, build_component_code, component_file_stem, component_identifier, parse_icon_size
from .index_file import render_index_file, render_types_file
from .picker import pick_variant
from .svg_transform import EMPTY_VARIANT, SvgVariant, prepare_variant
from .variants import VariantSet

__all__ = [
    # naming
    "create_safe_component_name",
    "to_component_name",
    "validate_component_name",
    "component_file_stem",
    "component_identifier",

    # synthesis
    "ComponentOptions",
    "build_component_code",
    "parse_icon_size",
    "render_index_file",
    "render_types_file",

    # variants / runtime picker
    "EMPTY_VARIANT",
    "SvgVariant",
    "VariantSet",
    "prepare_variant",
    "pick_variant",
]
