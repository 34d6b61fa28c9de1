from __future__ import annotations

from numbers import Real

from icon_sync.codegen.svg_transform import EMPTY_VARIANT, SvgVariant
from icon_sync.codegen.variants import VariantSet
from icon_sync.grouping.classifier import SizeClass

SizeRequest = str | int | float | None


def _is_number(x: object) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool)


def pick_variant(variants: VariantSet, requested: SizeRequest = None) -> SvgVariant:
    """
    Python twin of the pickClosestSvg() function emitted into every component.

    1. only non-empty slots are candidates, in declared order
    2. nothing available -> empty shape
    3. exact class name -> that slot
    4. number -> nearest canonical pixel size, earliest slot wins ties
    5. otherwise medium, else the first available slot
    """
    available = variants.available()
    if not available:
        return EMPTY_VARIANT

    if isinstance(requested, str):
        for size in available:
            if size.value == requested:
                return variants.get(size)

    if _is_number(requested):
        best = available[0]
        for size in available[1:]:
            if abs(size.pixels - requested) < abs(best.pixels - requested):
                best = size
        return variants.get(best)

    if SizeClass.MEDIUM in available:
        return variants.get(SizeClass.MEDIUM)
    return variants.get(available[0])


PICKER_TS = """\
const sizeOrder = ["small", "medium", "large"] as const;

type SizeKey = (typeof sizeOrder)[number];

type SvgChild = { content: { __html: string }; viewBox: string };

const emptySvg: SvgChild = { content: { __html: "" }, viewBox: "0 0 16 16" };

function pickClosestSvg(fontSize?: SizeKey | number): SvgChild {
  const available = sizeOrder.filter((key) => svgChildren[key].content.__html);

  if (available.length === 0) {
    return emptySvg;
  }

  if (typeof fontSize === "string" && available.includes(fontSize)) {
    return svgChildren[fontSize];
  }

  if (typeof fontSize === "number") {
    const best = available.reduce((prev, curr) =>
      Math.abs(sizeToPixel[curr] - fontSize) < Math.abs(sizeToPixel[prev] - fontSize)
        ? curr
        : prev,
    );
    return svgChildren[best];
  }

  // Fallback to medium, then first available
  return svgChildren[available.includes("medium") ? "medium" : available[0]];
}
"""

PICKER_JS = """\
const sizeOrder = ["small", "medium", "large"];

const emptySvg = { content: { __html: "" }, viewBox: "0 0 16 16" };

function pickClosestSvg(fontSize) {
  const available = sizeOrder.filter((key) => svgChildren[key].content.__html);

  if (available.length === 0) {
    return emptySvg;
  }

  if (typeof fontSize === "string" && available.includes(fontSize)) {
    return svgChildren[fontSize];
  }

  if (typeof fontSize === "number") {
    const best = available.reduce((prev, curr) =>
      Math.abs(sizeToPixel[curr] - fontSize) < Math.abs(sizeToPixel[prev] - fontSize)
        ? curr
        : prev,
    );
    return svgChildren[best];
  }

  // Fallback to medium, then first available
  return svgChildren[available.includes("medium") ? "medium" : available[0]];
}
"""


def render_picker(typescript: bool) -> str:
    return PICKER_TS if typescript else PICKER_JS
