"""
Huffman file compressor.

A compressed file is the frequency table header ('{k:v, ...}') followed by the
packed code bits. Decompression reads the header back, rebuilds the same tree and
walks it until the PSEUDO_EOF code.

How to run:
  python compressor.py compress notes.txt          -> notes.txt.huf
  python compressor.py decompress notes.txt.huf    -> notes_unc.txt
  python compressor.py compress --string "hello"   (prints the bit pattern only)
"""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path
from typing import Tuple, Union

from bitstream import BitReader, BitWriter
from freqtable import FrequencyTable, build_frequency_table
from huffman import build_huffman_tree, free_tree, generate_huffman_codes, huffman_decode, huffman_encode

HUFFMAN_EXT = ".huf"
UNCOMPRESSED_SUFFIX = "_unc"


def compressed_size(header: bytes, bit_count: int) -> int:
    # header bytes + payload rounded up to whole bytes
    return len(header) + math.ceil(bit_count / 8)


def compress_bytes(data: bytes) -> Tuple[bytes, str]:
    """Compress in memory. Returns (header + packed payload, bit pattern)."""
    table = build_frequency_table(data, is_file=False)
    root = build_huffman_tree(table)
    try:
        code_map = generate_huffman_codes(root)
        writer = BitWriter()
        bits, _ = huffman_encode(data, code_map, writer)
        return table.to_header() + writer.finish(), bits
    finally:
        free_tree(root)


def decompress_bytes(blob: bytes) -> bytes:
    """Inverse of compress_bytes(). A malformed header is reported and yields b""."""
    try:
        table, consumed = FrequencyTable.from_header(blob)
    except ValueError as exc:
        print(f"Cannot decompress: {exc}", file=sys.stderr)
        return b""

    root = build_huffman_tree(table)
    try:
        return huffman_decode(BitReader(blob[consumed:]), root)
    finally:
        free_tree(root)


def compress(filename: Union[str, Path, bytes], is_file: bool = True) -> str:
    """
    Compress `filename` into `filename + '.huf'` and return the bit pattern.
    With is_file=False the argument is the text itself and nothing is written.
    A missing input is reported and returns an empty string.
    """
    if not is_file:
        _, bits = compress_bytes(filename.encode("utf-8") if isinstance(filename, str) else bytes(filename))
        return bits

    path = Path(filename)
    if not path.is_file():
        print(f"File does not exist: {path}", file=sys.stderr)
        return ""

    blob, bits = compress_bytes(path.read_bytes())
    out_path = path.with_name(path.name + HUFFMAN_EXT)
    out_path.write_bytes(blob)
    return bits


def decompressed_name(filename: Union[str, Path]) -> Path:
    """'example.txt.huf' -> 'example_unc.txt' (same directory)."""
    path = Path(filename)
    name = path.name
    if name.endswith(HUFFMAN_EXT):
        name = name[:-len(HUFFMAN_EXT)]
    stem, dot, ext = name.partition(".")
    return path.with_name(stem + UNCOMPRESSED_SUFFIX + dot + ext)


def decompress(filename: Union[str, Path]) -> bytes:
    """Decompress a '.huf' file next to it (see decompressed_name) and return the bytes."""
    path = Path(filename)
    if not path.name.endswith(HUFFMAN_EXT):
        path = path.with_name(path.name + HUFFMAN_EXT)
    if not path.is_file():
        print(f"File does not exist: {path}", file=sys.stderr)
        return b""

    decoded = decompress_bytes(path.read_bytes())
    decompressed_name(path).write_bytes(decoded)
    return decoded


def main() -> int:
    ap = argparse.ArgumentParser(description="Huffman compression with a duplicate-chain priority queue.")
    ap.add_argument("mode", choices=["compress", "decompress"])
    ap.add_argument("target", type=str, help="File path (or literal text with --string)")
    ap.add_argument("--string", action="store_true", help="Treat target as text to compress in memory")
    ap.add_argument("--show_bits", action="store_true", help="Print the encoded bit pattern")
    args = ap.parse_args()

    if args.mode == "compress":
        if args.string:
            bits = compress(args.target, is_file=False)
            print(bits)
            print(f"Encoded bits: {len(bits)}")
            return 0

        src = Path(args.target)
        if not src.is_file():
            print(f"File does not exist: {src}", file=sys.stderr)
            return 1
        bits = compress(src)
        out_path = src.with_name(src.name + HUFFMAN_EXT)
        if args.show_bits:
            print(bits)
        size = out_path.stat().st_size
        print(f"Wrote {out_path} ({size} bytes, {len(bits)} payload bits)")
        print(f"Compression ratio: {size / max(1, src.stat().st_size):.3f}")
        return 0

    if args.string:
        print("--string only applies to compress", file=sys.stderr)
        return 1
    src = Path(args.target)
    if not src.is_file():
        print(f"File does not exist: {src}", file=sys.stderr)
        return 1
    decoded = decompress(src)
    print(f"Wrote {decompressed_name(src)} ({len(decoded)} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
