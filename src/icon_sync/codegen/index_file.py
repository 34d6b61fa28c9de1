from __future__ import annotations

TYPES_FILE_STEM = "types"

TYPES_TSX = """\
import type { SVGProps } from "react";

export interface IconProps extends SVGProps<SVGSVGElement> {
  children?: never;
  fontSize?: "small" | "medium" | "large" | number;
  color?: string;
}
"""


def render_types_file() -> str:
    return TYPES_TSX


def render_index_file(components: dict[str, str], typescript: bool) -> str:
    """
    components: identifier -> file stem (e.g. {"ArrowLeft": "arrow-left"}).
    Exports are sorted by file stem so reruns produce identical files.
    """
    lines: list[str] = []
    if typescript:
        lines.append(f'export type {{ IconProps }} from "./{TYPES_FILE_STEM}";')
        lines.append("")
    for ident, stem in sorted(components.items(), key=lambda kv: (kv[1], kv[0])):
        lines.append(f'export {{ default as {ident} }} from "./{stem}";')
    return "\n".join(lines) + "\n"
