from .generate import GenerateResult, run_generate
from .sync import SyncResult, run_sync

__all__ = ["GenerateResult", "SyncResult", "run_generate", "run_sync"]
