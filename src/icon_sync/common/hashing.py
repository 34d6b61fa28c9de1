from __future__ import annotations

import hashlib
from pathlib import Path


def sha256_hex(data: bytes) -> str:
    h = hashlib.sha256()
    h.update(data)
    return h.hexdigest()


def hash_content(data: bytes | str) -> str:
    """Digest of the exact bytes that get written/embedded (text is UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return sha256_hex(data)


def hash_file(path: str | Path) -> str:
    # "" marks a missing or unreadable file
    try:
        data = Path(path).read_bytes()
    except OSError:
        return ""
    return sha256_hex(data)
