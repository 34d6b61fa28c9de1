# src/icon_sync/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from icon_sync.codegen.case import FILENAME_CASES
from icon_sync.codegen.component import ComponentOptions, parse_icon_size
from icon_sync.figma.client import parse_figma_node_url


@dataclass(frozen=True)
class Cfg:
    # project/storage
    root: Path
    icons_dir: Path
    components_dir: Path

    # figma
    file_key: str
    node_id: str
    token_env: str
    timeout_sec: int
    batch_size: int
    concurrency: int
    use_absolute_bounds: bool
    min_size: int
    max_size: int
    keep_original_name_spaces: bool

    # normalizer
    optimize: bool

    # generate
    filename_case: str
    icon_size: str | int
    typescript: bool
    memo: bool
    ref: bool

    # run
    dry_run: bool = False
    verbose: bool = False

    def component_options(self) -> ComponentOptions:
        return ComponentOptions(
            filename_case=self.filename_case,
            icon_size=self.icon_size,
            typescript=self.typescript,
            memo=self.memo,
            ref=self.ref,
        )

    def figma_token(self) -> str:
        token = os.environ.get(self.token_env, "").strip()
        if not token:
            raise ValueError(f"{self.token_env} is not set")
        return token

    def require_figma_target(self) -> None:
        if not self.file_key:
            raise ValueError("figma.file_key is not set (or give figma.node_url)")
        if not self.node_id:
            raise ValueError("figma.node_id is not set (or give figma.node_url)")

    def with_overrides(self, *, dry_run: Optional[bool] = None, verbose: Optional[bool] = None) -> "Cfg":
        return replace(
            self,
            dry_run=self.dry_run if dry_run is None else dry_run,
            verbose=self.verbose if verbose is None else verbose,
        )


def _as_rooted_path(root: Path, p: str | Path) -> Path:
    """Resolve a possibly-relative path under root."""
    pp = Path(p)
    return pp if pp.is_absolute() else (root / pp)


def _section(obj: dict[str, Any], name: str) -> dict[str, Any]:
    sec = obj.get(name, {}) or {}
    if not isinstance(sec, dict):
        raise ValueError(f"config section '{name}' must be a mapping")
    return sec


def _positive_int(value: Any, key: str) -> int:
    n = int(value)
    if n <= 0:
        raise ValueError(f"{key} must be > 0, got {value!r}")
    return n


def load_cfg(path: str | Path) -> Cfg:
    path = Path(path)
    obj: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(obj, dict):
        raise ValueError("config root must be a mapping (YAML dict)")

    project = _section(obj, "project")
    figma = _section(obj, "figma")
    naming = _section(obj, "naming")
    optimize = _section(obj, "optimize")
    paths = _section(obj, "paths")
    gen = _section(obj, "generate")
    run = _section(obj, "run")

    # relative paths resolve against the config file's directory by default
    root = _as_rooted_path(path.parent, project.get("root", "."))

    file_key = str(figma.get("file_key") or "")
    node_id = str(figma.get("node_id") or "")
    node_url = str(figma.get("node_url") or "")
    if node_url:
        file_key, node_id = parse_figma_node_url(node_url)

    filename_case = str(gen.get("filename_case", "pascal"))
    if filename_case not in FILENAME_CASES:
        raise ValueError(f"generate.filename_case must be one of {FILENAME_CASES}, got {filename_case!r}")

    min_size = _positive_int(figma.get("min_size", 12), "figma.min_size")
    max_size = _positive_int(figma.get("max_size", 64), "figma.max_size")
    if min_size > max_size:
        raise ValueError(f"figma.min_size ({min_size}) > figma.max_size ({max_size})")

    return Cfg(
        root=root,
        icons_dir=_as_rooted_path(root, paths.get("icons_dir", "icons")),
        components_dir=_as_rooted_path(root, paths.get("components_dir", "src")),

        file_key=file_key,
        node_id=node_id,
        token_env=str(figma.get("token_env", "FIGMA_TOKEN")),
        timeout_sec=_positive_int(figma.get("timeout_sec", 30), "figma.timeout_sec"),
        batch_size=_positive_int(figma.get("batch_size", 10), "figma.batch_size"),
        concurrency=_positive_int(figma.get("concurrency", 6), "figma.concurrency"),
        use_absolute_bounds=bool(figma.get("use_absolute_bounds", True)),
        min_size=min_size,
        max_size=max_size,
        keep_original_name_spaces=bool(naming.get("keep_original_name_spaces", False)),

        optimize=bool(optimize.get("enabled", False)),

        filename_case=filename_case,
        icon_size=parse_icon_size(gen.get("icon_size", "medium")),
        typescript=bool(gen.get("typescript", True)),
        memo=bool(gen.get("memo", False)),
        ref=bool(gen.get("ref", True)),

        dry_run=bool(run.get("dry_run", False)),
        verbose=bool(run.get("verbose", False)),
    )
