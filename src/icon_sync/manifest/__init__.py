from .models import MANIFEST_VERSION, Manifest, ManifestEntry, create_manifest_entry
from .store import MANIFEST_FILE, load_manifest, manifest_path, read_manifest, save_manifest
from .diff import ManifestDiff, diff_manifests, find_deleted, find_new, find_updated

__all__ = [
    # models
    "MANIFEST_VERSION",
    "Manifest",
    "ManifestEntry",
    "create_manifest_entry",

    # persistence
    "MANIFEST_FILE",
    "load_manifest",
    "manifest_path",
    "read_manifest",
    "save_manifest",

    # diff
    "ManifestDiff",
    "diff_manifests",
    "find_new",
    "find_deleted",
    "find_updated",
]
