from pathlib import Path

from icon_sync.common.hashing import hash_content, hash_file, sha256_hex


def test_sha256_hex_deterministic():
    a = sha256_hex(b"hello")
    b = sha256_hex(b"hello")
    c = sha256_hex(b"hello!")
    assert a == b
    assert a != c
    assert len(a) == 64


def test_hash_content_text_equals_utf8_bytes():
    svg = '<svg viewBox="0 0 16 16"><path d="M0 0h16"/></svg>'
    assert hash_content(svg) == hash_content(svg.encode("utf-8"))


def test_identical_content_under_different_names_hashes_equal(tmp_path: Path):
    data = b"<svg><circle r='4'/></svg>"
    (tmp_path / "a-16px.svg").write_bytes(data)
    (tmp_path / "b-20px.svg").write_bytes(data)
    assert hash_file(tmp_path / "a-16px.svg") == hash_file(tmp_path / "b-20px.svg")
    assert hash_file(tmp_path / "a-16px.svg") == hash_content(data)


def test_hash_file_missing_returns_empty_sentinel(tmp_path: Path):
    assert hash_file(tmp_path / "nope.svg") == ""


def test_hash_file_unreadable_directory_returns_empty_sentinel(tmp_path: Path):
    # reading a directory raises an OSError subclass
    assert hash_file(tmp_path) == ""
