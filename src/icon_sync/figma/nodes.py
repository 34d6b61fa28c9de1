from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class NodeKind(str, Enum):
    COMPONENT = "COMPONENT"
    VECTOR = "VECTOR"
    FRAME = "FRAME"
    GROUP = "GROUP"
    COMPONENT_SET = "COMPONENT_SET"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, raw: Any) -> "NodeKind":
        try:
            return cls(str(raw or "").upper())
        except ValueError:
            return cls.OTHER


# leaves are exported as icons, containers are walked, anything else is ignored
ICON_KINDS = frozenset({NodeKind.COMPONENT, NodeKind.VECTOR})
CONTAINER_KINDS = frozenset({NodeKind.FRAME, NodeKind.GROUP, NodeKind.COMPONENT_SET})

MAX_ASPECT_DEVIATION = 0.2


@dataclass
class FigmaNode:
    id: str
    name: str
    kind: NodeKind
    width: Optional[float] = None
    height: Optional[float] = None
    children: list["FigmaNode"] = field(default_factory=list)


@dataclass(frozen=True)
class IconCandidate:
    id: str
    name: str
    width: int
    height: int


def parse_node(obj: dict[str, Any]) -> FigmaNode:
    """Figma document JSON -> FigmaNode tree."""
    node_id = str(obj.get("id") or "")
    bbox = obj.get("absoluteBoundingBox")
    width = height = None
    if isinstance(bbox, dict):
        w, h = bbox.get("width"), bbox.get("height")
        if isinstance(w, (int, float)) and isinstance(h, (int, float)):
            width, height = float(w), float(h)

    children = obj.get("children")
    return FigmaNode(
        id=node_id,
        name=str(obj.get("name") or f"icon-{node_id}"),
        kind=NodeKind.parse(obj.get("type")),
        width=width,
        height=height,
        children=[parse_node(c) for c in children if isinstance(c, dict)] if isinstance(children, list) else [],
    )


def _js_round(x: float) -> int:
    # half-up, like Math.round; Python's round() is half-to-even
    return int(x + 0.5) if x >= 0 else -int(-x + 0.5)


def collect_icons(
    root: FigmaNode,
    *,
    min_size: int = 12,
    max_size: int = 64,
    verbose: bool = False,
) -> list[IconCandidate]:
    out: list[IconCandidate] = []
    stack = [root]
    while stack:
        node = stack.pop()

        if node.kind in ICON_KINDS:
            cand = _as_icon(node, min_size=min_size, max_size=max_size, verbose=verbose)
            if cand is not None:
                out.append(cand)
        elif node.kind in CONTAINER_KINDS:
            # reversed so the output keeps document order
            stack.extend(reversed(node.children))

    return out


def _as_icon(node: FigmaNode, *, min_size: int, max_size: int, verbose: bool) -> Optional[IconCandidate]:
    if not node.id or node.width is None or node.height is None:
        return None

    w, h = _js_round(node.width), _js_round(node.height)
    if w < min_size or h < min_size or w > max_size or h > max_size:
        if verbose:
            print(f"[DEBUG] skip out of size range [{w}x{h}]: {node.name}")
        return None

    if h == 0 or abs(w / h - 1) > MAX_ASPECT_DEVIATION:
        if verbose:
            print(f"[DEBUG] skip aspect ratio [{w}x{h}]: {node.name}")
        return None

    return IconCandidate(id=node.id, name=node.name, width=w, height=h)
