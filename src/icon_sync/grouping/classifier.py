from __future__ import annotations

import re
from enum import Enum
from pathlib import PurePosixPath


class SizeClass(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def pixels(self) -> int:
        return SIZE_TO_PIXEL[self]


SIZE_TO_PIXEL: dict[SizeClass, int] = {
    SizeClass.SMALL: 12,
    SizeClass.MEDIUM: 16,
    SizeClass.LARGE: 20,
}

# declared order; every "first available" rule relies on it
SIZE_ORDER: tuple[SizeClass, ...] = (SizeClass.SMALL, SizeClass.MEDIUM, SizeClass.LARGE)

# most specific first
SIZE_SUFFIX_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[-_]\d+px$", re.IGNORECASE),
    re.compile(r"[-_](small|medium|large)$", re.IGNORECASE),
    re.compile(r"[-_](sm|md|lg)$", re.IGNORECASE),
    re.compile(r"[-_](s|m|l)$", re.IGNORECASE),
    re.compile(r"[-_]\d+$"),
)

# substring hints, checked in this order (small, large, medium)
_SUBSTRING_HINTS: tuple[tuple[tuple[str, ...], SizeClass], ...] = (
    (("small", "sm"), SizeClass.SMALL),
    (("large", "lg"), SizeClass.LARGE),
    (("medium", "md"), SizeClass.MEDIUM),
)
# one-letter codes only count as separate tokens
_TOKEN_HINTS: dict[str, SizeClass] = {
    "s": SizeClass.SMALL,
    "l": SizeClass.LARGE,
    "m": SizeClass.MEDIUM,
}
_TOKEN_SPLIT = re.compile(r"[-_\s.]+")


def strip_extension(file_name: str) -> str:
    name = PurePosixPath(file_name.replace("\\", "/")).name
    stem, dot, _ = name.rpartition(".")
    return stem if dot and stem else name


def _strip_once(name: str) -> str:
    for pat in SIZE_SUFFIX_PATTERNS:
        m = pat.search(name)
        if m and m.start() > 0:
            return name[: m.start()]
    return name


def extract_base_name(file_name: str) -> str:
    """
    "arrow-left-16px.svg" -> "arrow-left"
    "home_24.svg"         -> "home"
    "user-small.svg"      -> "user"
    "user-s.svg"          -> "user"

    Suffixes are stripped until none is left, so applying it to its own
    output changes nothing.
    """
    name = strip_extension(file_name)
    while True:
        stripped = _strip_once(name)
        if stripped == name:
            return name
        name = stripped


def size_hint(file_name: str) -> SizeClass | None:
    """Explicit size hint in a filename, if any."""
    stem = strip_extension(file_name.lower())
    for needles, size in _SUBSTRING_HINTS:
        if any(n in stem for n in needles):
            return size

    tokens = [t for t in _TOKEN_SPLIT.split(stem) if t]
    # the first token is the icon's own name ("m" in "m-16px" is not a hint)
    for tok in tokens[1:]:
        if tok in _TOKEN_HINTS:
            return _TOKEN_HINTS[tok]
    return None


def size_class_for_width(width: float) -> SizeClass:
    if width <= 12:
        return SizeClass.SMALL
    if width <= 16:
        return SizeClass.MEDIUM
    # the 20px bucket and anything wider
    return SizeClass.LARGE


def determine_size_class(file_name: str, width: float) -> SizeClass:
    hint = size_hint(file_name)
    if hint is not None:
        return hint
    return size_class_for_width(width)
