from __future__ import annotations

"""
Unit tests for the content sniffing component.

Verifies:
1. Text detection for ASCII, UTF-8 and BOM-prefixed files.
2. Binary detection for NUL bytes, signatures and control-byte noise.
3. Propagation of read errors.
"""

import codecs
from pathlib import Path

import pytest

from sharedfolder.core.components.reader import (
    SNIFF_BYTES,
    is_binary_content,
    is_binary_file,
)


@pytest.mark.parametrize(
    "sample",
    [
        b"",
        b"pragma solidity ^0.8.0;\n\ncontract A {}\n",
        "café 日本語 ✓\n".encode("utf-8"),
        b"line\twith\ttabs\r\nand\x0cform feed\n",
        b"\x1b[31mred\x1b[0m\n",
        codecs.BOM_UTF16_LE + "hi".encode("utf-16-le"),
        codecs.BOM_UTF8 + b"bom text",
    ],
)
def test_text_samples_are_not_binary(sample: bytes) -> None:
    assert is_binary_content(sample) is False


@pytest.mark.parametrize(
    "sample",
    [
        b"abc\x00def",
        b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n",
        bytes(range(1, 7)) * 20,
        b"\xc0\xc1\xf5\xf8" * 10 + b"\x01\x02\x03",
    ],
)
def test_binary_samples_are_binary(sample: bytes) -> None:
    assert is_binary_content(sample) is True


def test_utf8_sequence_cut_by_sample_boundary_is_text() -> None:
    sample = ("x" * (SNIFF_BYTES - 1) + "€").encode("utf-8")[:SNIFF_BYTES]
    assert is_binary_content(sample) is False


def test_is_binary_file_reads_only_the_prefix(tmp_path: Path) -> None:
    f = tmp_path / "late_nul.txt"
    f.write_bytes(b"a" * (SNIFF_BYTES + 10) + b"\x00")

    assert is_binary_file(str(f)) is False


def test_is_binary_file_classifies_by_content_not_name(tmp_path: Path) -> None:
    disguised = tmp_path / "notes.txt"
    disguised.write_bytes(b"\x00\x01\x02\x03")
    plain = tmp_path / "image.png"
    plain.write_text("just text", encoding="utf-8")

    assert is_binary_file(str(disguised)) is True
    assert is_binary_file(str(plain)) is False


def test_is_binary_file_propagates_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        is_binary_file(str(tmp_path / "missing.bin"))
