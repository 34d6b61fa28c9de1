from .client import FigmaApiError, FigmaClient, parse_figma_node_url
from .naming import icon_file_name, nearest_standard_size, safe_name
from .nodes import FigmaNode, IconCandidate, NodeKind, collect_icons, parse_node

__all__ = [
    # api
    "FigmaApiError",
    "FigmaClient",
    "parse_figma_node_url",

    # nodes
    "FigmaNode",
    "IconCandidate",
    "NodeKind",
    "collect_icons",
    "parse_node",

    # file names
    "icon_file_name",
    "nearest_standard_size",
    "safe_name",
]
