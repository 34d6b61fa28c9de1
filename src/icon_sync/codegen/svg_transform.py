from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_VIEWBOX = "0 0 16 16"

_VIEWBOX_RE = re.compile(r"""viewBox=["']([^"']*)["']""")
_ATTR_RE = re.compile(r"([a-zA-Z:-]+)=")
_FILL_RE = re.compile(r'fill="(?!none"|transparent"|currentColor")[^"]*"')
_STROKE_RE = re.compile(r'stroke="(?!none"|transparent"|currentColor")[^"]*"')
_HEX_FILL_RE = re.compile(r'fill="(#(?:[A-Fa-f0-9]{6}|[A-Fa-f0-9]{3}))"')

# attributes whose camelCase form is not a plain dash->upper conversion
SPECIAL_ATTRIBUTES = {
    "xml:lang": "xmlLang",
    "xml:space": "xmlSpace",
    "xmlns:xlink": "xmlnsXlink",
    "xlink:href": "xlinkHref",
}


@dataclass(frozen=True)
class SvgVariant:
    content: str = ""
    view_box: str = DEFAULT_VIEWBOX

    @property
    def is_empty(self) -> bool:
        return not self.content


EMPTY_VARIANT = SvgVariant()


def strip_bom(text: str) -> str:
    return text[1:] if text.startswith("\ufeff") else text


def extract_view_box(svg: str) -> str:
    m = _VIEWBOX_RE.search(svg)
    return m.group(1) if m else DEFAULT_VIEWBOX


def clean_svg_content(svg: str) -> str:
    """Drop the prolog, doctype, comments and the outer <svg> wrapper, keeping the children."""
    out = re.sub(r"<\?xml.*?\?>", "", svg, flags=re.DOTALL)
    out = re.sub(r"<!DOCTYPE.*?>", "", out, flags=re.DOTALL | re.IGNORECASE)
    out = re.sub(r"<!--.*?-->", "", out, flags=re.DOTALL)
    out = re.sub(r"<svg\b[^>]*>", "", out)
    out = re.sub(r"</svg>", "", out)
    return out.strip()


def _camel_attr(m: re.Match[str]) -> str:
    attr = m.group(1)
    special = SPECIAL_ATTRIBUTES.get(attr)
    if special:
        return f"{special}="
    return re.sub(r"-([a-z])", lambda x: x.group(1).upper(), attr) + "="


def convert_attributes_to_camel_case(svg: str) -> str:
    if not svg:
        return ""
    return _ATTR_RE.sub(_camel_attr, svg)


def replace_color_attributes(svg: str) -> str:
    """Force paint values other than none/transparent/currentColor to currentColor."""
    if not svg:
        return ""
    out = _FILL_RE.sub('fill="currentColor"', svg)
    return _STROKE_RE.sub('stroke="currentColor"', out)


def replace_hex_fills(svg: str) -> str:
    return _HEX_FILL_RE.sub('fill="currentColor"', svg)


def escape_template_literal(s: str) -> str:
    return s.replace("\\", "\\\\").replace("`", "\\`").replace("$", "\\$")


def prepare_variant(svg: str) -> SvgVariant:
    """Raw (already normalized) SVG text -> embeddable variant."""
    if not svg or not svg.strip():
        return EMPTY_VARIANT
    view_box = extract_view_box(svg)
    body = clean_svg_content(svg)
    body = convert_attributes_to_camel_case(body)
    body = replace_color_attributes(body)
    if not body:
        return EMPTY_VARIANT
    return SvgVariant(content=escape_template_literal(body), view_box=view_box)
