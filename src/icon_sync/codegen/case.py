from __future__ import annotations

import re
from typing import Literal

FilenameCase = Literal["pascal", "camel", "kebab", "snake"]
FILENAME_CASES: tuple[str, ...] = ("pascal", "camel", "kebab", "snake")

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")
_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")

RESERVED_WORDS = frozenset(
    {
        "break", "case", "catch", "class", "const", "continue", "debugger", "default",
        "delete", "do", "else", "export", "extends", "finally", "for", "function", "if",
        "import", "in", "instanceof", "new", "return", "super", "switch", "this", "throw",
        "try", "typeof", "var", "void", "while", "with", "yield", "enum", "implements",
        "interface", "let", "package", "private", "protected", "public", "static",
        "await", "async", "react", "component", "fragment",
    }
)


def to_pascal_case(s: str) -> str:
    # "arrow-left" -> "ArrowLeft"; existing camel humps are not split
    return "".join(w[:1].upper() + w[1:].lower() for w in _NON_ALNUM.sub(" ", s).split(" ") if w)


def to_camel_case(s: str) -> str:
    p = to_pascal_case(s)
    return p[:1].lower() + p[1:]


def _joined_lower(s: str, sep: str) -> str:
    out = _LOWER_UPPER.sub(rf"\1{sep}\2", s)
    out = _NON_ALNUM.sub(sep, out).lower()
    return out.strip(sep)


def to_kebab_case(s: str) -> str:
    return _joined_lower(s, "-")


def to_snake_case(s: str) -> str:
    return _joined_lower(s, "_")


def to_component_name(s: str, case: str) -> str:
    if case == "pascal":
        return to_pascal_case(s)
    if case == "camel":
        return to_camel_case(s)
    if case == "kebab":
        return to_kebab_case(s)
    if case == "snake":
        return to_snake_case(s)
    raise ValueError(f"Unsupported filename case: {case!r} (expected one of {', '.join(FILENAME_CASES)})")


def validate_component_name(name: str) -> list[str]:
    """Return the list of problems with `name` (empty when it is usable)."""
    errors: list[str] = []
    if not name or not name.strip():
        errors.append("Component name cannot be empty")
        return errors
    if not re.match(r"^[a-zA-Z]", name):
        errors.append("Component name must start with a letter")
    if not re.fullmatch(r"[a-zA-Z0-9_-]+", name):
        errors.append("Component name can only contain letters, numbers, hyphens, and underscores")
    if name.lower() in RESERVED_WORDS:
        errors.append(f'"{name}" is a reserved word and cannot be used as component name')
    return errors


def create_safe_component_name(s: str, case: str = "pascal") -> str:
    cleaned = re.sub(r"[^a-zA-Z0-9\s_-]", "", s)
    cleaned = re.sub(r"^\d+", "", cleaned).strip()
    if not cleaned:
        return "Icon"

    name = to_component_name(cleaned, case)
    if re.match(r"^\d", name):
        name = f"Icon{name}"
    if validate_component_name(name):
        name = f"Icon{to_pascal_case(cleaned)}"
    return name
