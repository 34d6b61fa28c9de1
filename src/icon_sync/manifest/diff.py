from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from icon_sync.manifest.models import ManifestEntry

# fields compared to decide whether a known id changed; `last_modified` is bookkeeping only
COMPARED_FIELDS = ("name", "width", "height", "file_name", "hash")


@dataclass
class ManifestDiff:
    new: list[ManifestEntry] = field(default_factory=list)
    deleted: list[ManifestEntry] = field(default_factory=list)
    updated: list[ManifestEntry] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.new or self.deleted or self.updated)


def _require_ids(entries: Iterable[ManifestEntry], label: str) -> None:
    for i, e in enumerate(entries):
        if not e.id:
            raise ValueError(f"{label}[{i}] has no id (fileName={e.file_name!r})")


def _index_by_id(entries: Iterable[ManifestEntry]) -> dict[str, ManifestEntry]:
    # first occurrence wins, ids are expected to be unique anyway
    out: dict[str, ManifestEntry] = {}
    for e in entries:
        out.setdefault(e.id, e)
    return out


def _differs(a: ManifestEntry, b: ManifestEntry) -> bool:
    return any(getattr(a, f) != getattr(b, f) for f in COMPARED_FIELDS)


def find_new(current: list[ManifestEntry], previous: list[ManifestEntry]) -> list[ManifestEntry]:
    prev_ids = {e.id for e in previous}
    return [e for e in current if e.id not in prev_ids]


def find_deleted(current: list[ManifestEntry], previous: list[ManifestEntry]) -> list[ManifestEntry]:
    cur_ids = {e.id for e in current}
    return [e for e in previous if e.id not in cur_ids]


def find_updated(current: list[ManifestEntry], previous: list[ManifestEntry]) -> list[ManifestEntry]:
    by_id = _index_by_id(previous)
    out: list[ManifestEntry] = []
    for e in current:
        old = by_id.get(e.id)
        if old is not None and _differs(e, old):
            out.append(e)
    return out


def diff_manifests(current: list[ManifestEntry], previous: list[ManifestEntry]) -> ManifestDiff:
    """
    Partition every id of current ∪ previous into exactly one of
    new / deleted / updated / unchanged.
    """
    _require_ids(current, "current")
    _require_ids(previous, "previous")

    by_id = _index_by_id(previous)
    cur_ids: set[str] = set()
    res = ManifestDiff()

    for e in current:
        if e.id in cur_ids:
            continue
        cur_ids.add(e.id)
        old = by_id.get(e.id)
        if old is None:
            res.new.append(e)
        elif _differs(e, old):
            res.updated.append(e)
        else:
            res.unchanged.append(e.id)

    res.deleted = [e for e in by_id.values() if e.id not in cur_ids]
    return res
