from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any

MANIFEST_VERSION = "1.0.0"


def utc_now_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat().replace("+00:00", "Z")


def _text(value: Any) -> str:
    # JSON null reads as "" so it is caught as missing, not kept as "None"
    return "" if value is None else str(value)


@dataclass
class ManifestEntry:
    id: str
    name: str
    file_name: str
    width: int
    height: int
    last_modified: str
    hash: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "fileName": self.file_name,
            "width": self.width,
            "height": self.height,
            "lastModified": self.last_modified,
            "hash": self.hash,
        }

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> "ManifestEntry":
        return cls(
            id=_text(obj["id"]),
            name=_text(obj["name"]),
            file_name=_text(obj["fileName"]),
            width=obj["width"],
            height=obj["height"],
            last_modified=str(obj.get("lastModified", "")),
            hash=str(obj.get("hash") or ""),
        )


@dataclass
class Manifest:
    version: str = MANIFEST_VERSION
    generated_at: str = field(default_factory=utc_now_iso)
    icons: list[ManifestEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "generatedAt": self.generated_at,
            "icons": [e.to_dict() for e in self.icons],
        }

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> "Manifest":
        icons = obj.get("icons")
        if not isinstance(icons, list):
            raise ValueError("manifest 'icons' must be a list")
        return cls(
            version=str(obj.get("version") or MANIFEST_VERSION),
            generated_at=str(obj.get("generatedAt") or utc_now_iso()),
            icons=[ManifestEntry.from_dict(x) for x in icons],
        )


def create_manifest_entry(
    id: str,
    name: str,
    file_name: str,
    width: int,
    height: int,
    hash: str = "",
) -> ManifestEntry:
    return ManifestEntry(
        id=id,
        name=name,
        file_name=file_name,
        width=width,
        height=height,
        last_modified=utc_now_iso(),
        hash=hash,
    )
