from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Iterable

from icon_sync.grouping.groups import group_by_base_name
from icon_sync.manifest.models import ManifestEntry


@dataclass
class ValidationReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _positive_number(x: object) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool) and x > 0


def validate_icon_manifest(entries: Iterable[ManifestEntry]) -> ValidationReport:
    entries = list(entries)
    report = ValidationReport()

    if not entries:
        report.warnings.append("No icons found in manifest")
        return report

    seen_files: set[str] = set()
    seen_ids: set[str] = set()
    dup_files: list[str] = []
    dup_ids: list[str] = []
    usable: list[ManifestEntry] = []

    for e in entries:
        if not e.file_name:
            report.errors.append(f"Icon {e.id or '<no id>'} is missing fileName")
            continue
        if not e.id:
            report.errors.append(f"Icon {e.file_name} is missing id")
        elif e.id in seen_ids:
            dup_ids.append(e.id)
        seen_ids.add(e.id)

        if not _positive_number(e.width):
            report.errors.append(f"Invalid width for {e.file_name}")
        if not _positive_number(e.height):
            report.errors.append(f"Invalid height for {e.file_name}")

        if e.file_name in seen_files:
            dup_files.append(e.file_name)
        seen_files.add(e.file_name)
        usable.append(e)

    if dup_files:
        report.errors.append(f"Duplicate files found: {', '.join(sorted(set(dup_files)))}")
    if dup_ids:
        report.errors.append(f"Duplicate ids found: {', '.join(sorted(set(dup_ids)))}")

    for g in group_by_base_name(e for e in usable if _positive_number(e.width)):
        available = g.available_sizes()
        if len(available) == 1:
            report.warnings.append(f"Icon '{g.base_name}' has only one size: {available[0].value}")

    return report
