from __future__ import annotations

from dataclasses import dataclass

from icon_sync.codegen.case import FILENAME_CASES, create_safe_component_name, to_component_name
from icon_sync.codegen.picker import render_picker
from icon_sync.codegen.svg_transform import SvgVariant
from icon_sync.codegen.variants import VariantSet
from icon_sync.grouping.classifier import SIZE_ORDER, SizeClass


@dataclass(frozen=True)
class ComponentOptions:
    filename_case: str = "pascal"
    icon_size: str | int = "medium"
    typescript: bool = True
    memo: bool = False
    ref: bool = True

    def __post_init__(self) -> None:
        if self.filename_case not in FILENAME_CASES:
            raise ValueError(f"Unsupported filename case: {self.filename_case!r}")
        parse_icon_size(self.icon_size)

    @property
    def extension(self) -> str:
        return "tsx" if self.typescript else "jsx"


def parse_icon_size(size: str | int | float) -> str | int | float:
    """'24' -> 24, 'large' -> 'large'; anything else is rejected."""
    if isinstance(size, bool):
        raise ValueError(f"Invalid icon size: {size!r}")
    if isinstance(size, (int, float)):
        if size <= 0:
            raise ValueError(f"Icon size must be positive, got {size!r}")
        return size
    s = str(size).strip()
    if s.isdigit():
        return parse_icon_size(int(s))
    if s in {x.value for x in SizeClass}:
        return s
    raise ValueError(f"Invalid icon size: {size!r} (expected small|medium|large or a pixel number)")


def component_identifier(base_name: str) -> str:
    # JSX requires a capitalized identifier whatever case the file uses
    return create_safe_component_name(base_name, "pascal")


def component_file_stem(base_name: str, filename_case: str) -> str:
    ident = component_identifier(base_name)
    if filename_case == "pascal":
        return ident
    if filename_case == "camel":
        return ident[:1].lower() + ident[1:]
    return to_component_name(ident, filename_case)


def _js_literal(value: str | int | float) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def _render_slot(size: SizeClass, v: SvgVariant) -> str:
    if v.is_empty:
        return f'  {size.value}: {{ content: {{ __html: "" }}, viewBox: "{v.view_box}" }},\n'
    return (
        f"  {size.value}: {{\n"
        f"    content: {{\n"
        f"      __html: `{v.content}`,\n"
        f"    }},\n"
        f'    viewBox: "{v.view_box}",\n'
        f"  }},\n"
    )


def _render_doc(name: str, typescript: bool) -> str:
    if typescript:
        return f"""\
/**
 * {name} icon component.
 *
 * @description Supports sizes: small (12px), medium (16px, default), large (20px).
 * Automatically falls back to the closest available size if exact one is missing.
 *
 * @param fontSize - Icon size preset or custom pixel value
 * @param color - Icon color (supports CSS colors, variables, and 'currentColor')
 * @param ...props - All other SVG element props
 */
"""
    return f"""\
/**
 * {name} icon component.
 * Supports sizes: small (12px), medium (16px, default), large (20px).
 * Automatically falls back to the closest available size if exact one is missing.
 */
"""


def _render_body(name: str, opts: ComponentOptions) -> str:
    default_size = _js_literal(parse_icon_size(opts.icon_size))
    inner = f"{name}Base" if opts.memo else name
    ts = opts.typescript

    ref_attr = "      ref={ref}\n" if opts.ref else ""
    render = f"""\
  const {{ fontSize = {default_size}, color = "currentColor", style, ...other }} = props;

  const selected = pickClosestSvg(fontSize);
  const sizeValue =
    typeof fontSize === "number" ? fontSize : sizeToPixel[fontSize] ?? 16;

  return (
    <svg
{ref_attr}      width={{sizeValue}}
      height={{sizeValue}}
      viewBox={{selected.viewBox}}
      fill="none"
      style={{{{ ...style, color }}}}
      xmlns="http://www.w3.org/2000/svg"
      {{...other}}
    >
      {{selected.content.__html && (
        <g dangerouslySetInnerHTML={{selected.content}} />
      )}}
    </svg>
  );
"""

    if opts.ref:
        generic = "<SVGSVGElement, IconProps>" if ts else ""
        head = f"const {inner} = React.forwardRef{generic}((props, ref) => {{\n"
        tail = "});\n"
    else:
        params = "props: IconProps" if ts else "props"
        head = f"const {inner} = ({params}) => {{\n"
        tail = "};\n"

    out = head + render + tail
    if opts.memo:
        out += f"\nconst {name} = React.memo({inner});\n"
    return out


def build_component_code(component_name: str, variants: VariantSet, opts: ComponentOptions) -> str:
    """Render one component; same inputs always give the same text."""
    ts = opts.typescript

    parts: list[str] = ['import * as React from "react";\n']
    if ts:
        parts.append('import type { IconProps } from "./types";\n')
    parts.append("\n")
    parts.append(_render_doc(component_name, ts))
    parts.append("\n")
    parts.append(render_picker(ts))
    parts.append("\n")

    annotation = ": Record<SizeKey, SvgChild>" if ts else ""
    parts.append(f"const svgChildren{annotation} = {{\n")
    parts.append("\n".join(_render_slot(size, variants.get(size)) for size in SIZE_ORDER))
    parts.append("};\n\n")

    px_annotation = ": Record<SizeKey, number>" if ts else ""
    parts.append(
        f"const sizeToPixel{px_annotation} = {{\n"
        + "".join(f"  {s.value}: {s.pixels},\n" for s in SIZE_ORDER)
        + "};\n\n"
    )

    parts.append(_render_body(component_name, opts))
    parts.append(f'\n{component_name}.displayName = "{component_name}";\n\n')
    parts.append(f"export default {component_name};\n")
    return "".join(parts)
