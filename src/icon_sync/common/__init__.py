from .hashing import hash_content, hash_file, sha256_hex
from .io import LocalStore, write_bytes_atomic

__all__ = ["hash_content", "hash_file", "sha256_hex", "LocalStore", "write_bytes_atomic"]
