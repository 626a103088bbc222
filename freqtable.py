import re
import sys
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

PSEUDO_EOF = 256 # synthetic end-of-stream symbol
NOT_A_CHAR = 257 # marks internal coding-tree nodes

_ENTRY = re.compile(r"\s*(\d+)\s*:\s*(\d+)\s*")


class FrequencyTable: # symbol -> count
    def __init__(self, counts: Dict[int, int] = None):
        self._counts: Dict[int, int] = dict(counts) if counts else {}

    def put(self, symbol: int, count: int) -> None:
        self._counts[symbol] = count

    def get(self, symbol: int) -> int:
        return self._counts.get(symbol, 0)

    def contains(self, symbol: int) -> bool:
        return symbol in self._counts

    def __contains__(self, symbol: int) -> bool:
        return symbol in self._counts

    def keys(self) -> List[int]:
        # ascending order keeps Huffman tie-breaking reproducible
        return sorted(self._counts)

    def items(self) -> List[Tuple[int, int]]:
        return [(k, self._counts[k]) for k in self.keys()]

    def __iter__(self) -> Iterator[int]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"FrequencyTable({self.to_header().decode('ascii')})"

    def to_header(self) -> bytes:
        """Serialize as '{k:v, k:v}'; the closing brace ends the header."""
        body = ", ".join(f"{k}:{v}" for k, v in self.items())
        return ("{" + body + "}").encode("ascii")

    @classmethod
    def from_header(cls, data: bytes) -> Tuple["FrequencyTable", int]:
        """
        Parse a header written by to_header() from the start of `data`.
        Returns the table and the number of bytes consumed.
        """
        if not data.startswith(b"{"):
            raise ValueError("Malformed header: missing '{'")
        end = data.find(b"}")
        if end < 0:
            raise ValueError("Malformed header: missing '}'")
        try:
            body = data[1:end].decode("ascii")
        except UnicodeDecodeError as exc:
            raise ValueError(f"Malformed header: {exc}") from exc

        table = cls()
        if body.strip():
            for entry in body.split(","):
                m = _ENTRY.fullmatch(entry)
                if m is None:
                    raise ValueError(f"Malformed header entry: {entry!r}")
                table.put(int(m.group(1)), int(m.group(2)))
        return table, end + 1


def count_bytes(data: bytes, table: FrequencyTable) -> FrequencyTable:
    for b in data:
        table.put(b, table.get(b) + 1)
    return table


def build_frequency_table(source: Union[str, Path, bytes], is_file: bool = True) -> FrequencyTable:
    """
    Tabulate the bytes of a file (is_file=True) or of the given text/bytes, then
    add PSEUDO_EOF with a count of 1. A missing file is reported on stderr and
    leaves only the PSEUDO_EOF entry.
    """
    table = FrequencyTable()
    if is_file:
        path = Path(source)
        if not path.is_file():
            print("File does not exist.", file=sys.stderr)
        else:
            count_bytes(path.read_bytes(), table)
    else:
        data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
        count_bytes(data, table)
    table.put(PSEUDO_EOF, 1)
    return table
