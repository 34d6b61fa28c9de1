from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from icon_sync.grouping.classifier import SIZE_ORDER, SizeClass, determine_size_class, extract_base_name
from icon_sync.manifest.models import ManifestEntry


@dataclass
class GroupedIcon:
    base_name: str
    # keyed by canonical class ("small"/"medium"/"large") AND by literal width ("16")
    sizes: dict[str, ManifestEntry] = field(default_factory=dict)

    def get(self, size: SizeClass) -> ManifestEntry | None:
        return self.sizes.get(size.value)

    def available_sizes(self) -> list[SizeClass]:
        return [s for s in SIZE_ORDER if s.value in self.sizes]


def width_key(width: float) -> str:
    if isinstance(width, float) and width.is_integer():
        width = int(width)
    return str(width)


def _put(sizes: dict[str, ManifestEntry], key: str, entry: ManifestEntry) -> None:
    # on collision the wider asset wins; ties keep the first one seen
    cur = sizes.get(key)
    if cur is None or entry.width > cur.width:
        sizes[key] = entry


def group_by_base_name(entries: Iterable[ManifestEntry]) -> list[GroupedIcon]:
    grouped: dict[str, GroupedIcon] = {}

    for e in entries:
        base = extract_base_name(e.file_name)
        size = determine_size_class(e.file_name, e.width)

        group = grouped.get(base)
        if group is None:
            group = GroupedIcon(base_name=base)
            grouped[base] = group

        _put(group.sizes, size.value, e)
        _put(group.sizes, width_key(e.width), e)

    return [grouped[k] for k in sorted(grouped)]
