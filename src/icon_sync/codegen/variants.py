from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from icon_sync.codegen.svg_transform import EMPTY_VARIANT, SvgVariant
from icon_sync.grouping.classifier import SIZE_ORDER, SizeClass


@dataclass(frozen=True)
class VariantSet:
    """Exactly three slots; an empty SvgVariant is a declared-but-missing size."""

    small: SvgVariant = EMPTY_VARIANT
    medium: SvgVariant = EMPTY_VARIANT
    large: SvgVariant = EMPTY_VARIANT

    def get(self, size: SizeClass) -> SvgVariant:
        return getattr(self, size.value)

    def items(self) -> Iterator[tuple[SizeClass, SvgVariant]]:
        for size in SIZE_ORDER:
            yield size, self.get(size)

    def available(self) -> list[SizeClass]:
        return [size for size, v in self.items() if not v.is_empty]

    @classmethod
    def from_mapping(cls, variants: dict[SizeClass, SvgVariant]) -> "VariantSet":
        return cls(**{s.value: variants.get(s, EMPTY_VARIANT) for s in SIZE_ORDER})
