from __future__ import annotations

import argparse
import sys
from typing import Optional

import requests

from icon_sync.figma.client import FigmaApiError
from icon_sync.grouping.validate import validate_icon_manifest
from icon_sync.manifest.models import Manifest
from icon_sync.manifest.store import manifest_path, read_manifest, save_manifest
from icon_sync.pipeline.generate import run_generate
from icon_sync.pipeline.sync import run_sync
from icon_sync.settings import Cfg, load_cfg
from icon_sync.svg.scan import scan_icons_dir


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="icon-sync", description="Figma icons -> SVG files -> multi-size React components")
    p.add_argument("--config", default="configs/icons.yaml", help="Path to config YAML")
    p.add_argument("--dry-run", action="store_true", default=None, help="Compute everything, write nothing")
    p.add_argument("--verbose", action="store_true", default=None, help="Print [DEBUG] lines")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("sync", help="Export icons from Figma into icons_dir and update the manifest")
    sub.add_parser("generate", help="Generate components from icons_dir")
    sub.add_parser("run", help="sync -> generate")
    sub.add_parser("manifest", help="Rebuild the manifest from the SVG files in icons_dir")
    sub.add_parser("validate", help="Validate the manifest in icons_dir")
    return p


def cmd_manifest(cfg: Cfg) -> int:
    entries = scan_icons_dir(cfg.icons_dir)
    print(f"[MANIFEST] {len(entries)} svg files in {cfg.icons_dir}")
    if cfg.dry_run:
        print("[MANIFEST] dry-run: not written")
        return 0
    path = save_manifest(cfg.icons_dir, Manifest(icons=entries))
    print(f"[MANIFEST] written: {path}")
    return 0


def cmd_validate(cfg: Cfg) -> int:
    path = manifest_path(cfg.icons_dir)
    if not path.exists():
        print(f"[VALIDATE] manifest not found: {path}")
        return 1
    try:
        manifest = read_manifest(cfg.icons_dir)
    except KeyError as e:
        print(f"[ERROR] {path}: icon entry is missing {e}")
        return 1
    except (OSError, ValueError, TypeError) as e:
        print(f"[ERROR] {path}: {e}")
        return 1
    report = validate_icon_manifest(manifest.icons)

    for err in report.errors:
        print(f"[ERROR] {err}")
    for warn in report.warnings:
        print(f"[WARN] {warn}")
    print(f"[VALIDATE] icons={len(manifest.icons)} valid={report.is_valid}")
    return 0 if report.is_valid else 1


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_cfg(args.config).with_overrides(dry_run=args.dry_run, verbose=args.verbose)
        if cfg.verbose:
            print(f"[DEBUG] config={args.config}")
            print(f"[DEBUG] icons_dir={cfg.icons_dir}")
            print(f"[DEBUG] components_dir={cfg.components_dir}")

        if args.cmd in ("sync", "run"):
            run_sync(cfg)
        if args.cmd in ("generate", "run"):
            run_generate(cfg)
        if args.cmd == "manifest":
            return cmd_manifest(cfg)
        if args.cmd == "validate":
            return cmd_validate(cfg)
    except (ValueError, FileNotFoundError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    except (FigmaApiError, requests.RequestException) as e:
        print(f"[FIGMA FAIL] {e}", file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())
