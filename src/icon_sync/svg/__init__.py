from .optimize import Optimizer, apply_optimizer, minify_svg
from .scan import read_svg_dimensions, scan_icons_dir

__all__ = ["Optimizer", "apply_optimizer", "minify_svg", "read_svg_dimensions", "scan_icons_dir"]
