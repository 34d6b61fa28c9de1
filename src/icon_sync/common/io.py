from __future__ import annotations

import os
import tempfile
from pathlib import Path


class LocalStore:
    def __init__(self, root: Path):
        self.root = Path(root)

    def write_text(self, rel: str, text: str) -> Path:
        p = self.root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p

    def exists(self, rel: str) -> bool:
        return (self.root / rel).exists()

    def remove(self, rel: str) -> bool:
        p = self.root / rel
        if not p.is_file():
            return False
        p.unlink()
        return True


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Write to a temp sibling then rename, so readers never see a half-written file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise
