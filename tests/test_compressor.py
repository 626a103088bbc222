import sys
from pathlib import Path

import pytest

import compressor
from freqtable import build_frequency_table
from compressor import (
    compress,
    compress_bytes,
    compressed_size,
    decompress,
    decompress_bytes,
    decompressed_name,
)


@pytest.mark.parametrize("data", [
    b"",
    b"x",
    b"A" * 10240,
    b"Hello World" * 50,
    bytes(range(256)) * 3,
])
def test_bytes_roundtrip(data):
    blob, bits = compress_bytes(data)
    assert blob.startswith(b"{")
    assert decompress_bytes(blob) == data


def test_compressed_blob_is_header_plus_payload():
    blob, bits = compress_bytes(b"aaa")
    assert bits == "1110"
    assert blob == b"{97:3, 256:1}" + b"\xe0"
    assert compressed_size(b"{97:3, 256:1}", len(bits)) == len(blob)


def test_empty_input_still_writes_header():
    blob, bits = compress_bytes(b"")
    assert bits == ""
    assert blob == b"{256:1}"


def test_corrupt_header_yields_empty(capsys):
    blob = bytearray(compress_bytes(b"Hello World" * 5)[0])
    blob[0] ^= 0xFF
    assert decompress_bytes(bytes(blob)) == b""
    assert "Cannot decompress" in capsys.readouterr().err


def test_truncated_payload_is_tolerated():
    data = b"This is a test" * 100
    blob, _ = compress_bytes(data)
    out = decompress_bytes(blob[:-3])
    assert data.startswith(out)
    assert len(out) < len(data)


def test_file_roundtrip(tmp_path):
    src = tmp_path / "example.txt"
    src.write_bytes(b"she sells sea shells by the sea shore\n")

    bits = compress(src)
    huf = tmp_path / "example.txt.huf"
    assert huf.is_file()
    header = build_frequency_table(src).to_header()
    assert huf.stat().st_size == compressed_size(header, len(bits))

    out = decompress(huf)
    assert out == src.read_bytes()
    assert (tmp_path / "example_unc.txt").read_bytes() == src.read_bytes()


def test_empty_file_roundtrip(tmp_path):
    src = tmp_path / "empty.txt"
    src.write_bytes(b"")
    assert compress(src) == ""
    huf = tmp_path / "empty.txt.huf"
    assert huf.stat().st_size > 0
    assert decompress(huf) == b""


def test_decompress_accepts_name_without_extension(tmp_path):
    src = tmp_path / "notes.md"
    src.write_bytes(b"# title\n")
    compress(src)
    assert decompress(src) == b"# title\n"
    assert (tmp_path / "notes_unc.md").is_file()


def test_missing_input_reported(tmp_path, capsys):
    assert compress(tmp_path / "missing.txt") == ""
    assert decompress(tmp_path / "missing.txt.huf") == b""
    err = capsys.readouterr().err
    assert err.count("File does not exist") == 2
    assert not (tmp_path / "missing.txt.huf").exists()


def test_string_mode_returns_bits_only(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert compress("aaa", is_file=False) == "1110"
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("name, expected", [
    ("example.txt.huf", "example_unc.txt"),
    ("archive.tar.gz.huf", "archive_unc.tar.gz"),
    ("README.huf", "README_unc"),
    ("dir/data.bin.huf", "dir/data_unc.bin"),
])
def test_decompressed_name(name, expected):
    assert decompressed_name(name) == Path(expected)


def test_cli_compress_and_decompress(tmp_path, monkeypatch, capsys):
    src = tmp_path / "cli.txt"
    src.write_bytes(b"command line round trip")

    monkeypatch.setattr(sys, "argv", ["compressor.py", "compress", str(src)])
    assert compressor.main() == 0
    assert "Wrote" in capsys.readouterr().out

    monkeypatch.setattr(sys, "argv", ["compressor.py", "decompress", str(src) + ".huf"])
    assert compressor.main() == 0
    assert (tmp_path / "cli_unc.txt").read_bytes() == b"command line round trip"


def test_cli_string_and_missing(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["compressor.py", "compress", "--string", "aaa"])
    assert compressor.main() == 0
    assert "1110" in capsys.readouterr().out

    monkeypatch.setattr(sys, "argv", ["compressor.py", "decompress", str(tmp_path / "gone.huf")])
    assert compressor.main() == 1
    assert "File does not exist" in capsys.readouterr().err
