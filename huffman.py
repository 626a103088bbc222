from typing import Dict, Iterable, Optional, Tuple

from bitstream import BitReader, BitWriter
from freqtable import NOT_A_CHAR, PSEUDO_EOF, FrequencyTable
from priorityqueue import PriorityQueue


class HuffmanNode: # Node for Huffman tree
    def __init__(self, symbol, frequency, zero=None, one=None):
        self.symbol = symbol    # byte, PSEUDO_EOF, or NOT_A_CHAR for internal nodes
        self.frequency = frequency
        self.zero = zero
        self.one = one

    def is_leaf(self) -> bool:
        return self.zero is None and self.one is None

    def __repr__(self) -> str:
        return f"HuffmanNode(symbol={self.symbol}, frequency={self.frequency})"


def build_huffman_tree(frequency_table: FrequencyTable) -> Optional[HuffmanNode]:
    """
    One leaf per symbol goes into the priority queue keyed by its count. The two
    smallest are merged (first out becomes the zero branch) and the merged node
    goes back in, until a single node is left. Ties are settled by the queue's
    arrival order, which fixes the exact codes produced.
    """
    pq = PriorityQueue()
    for symbol in frequency_table.keys():
        count = frequency_table.get(symbol)
        pq.enqueue(HuffmanNode(symbol, count), count)

    while pq.size() > 1:
        zero = pq.dequeue()
        one = pq.dequeue()
        merged = HuffmanNode(NOT_A_CHAR, zero.frequency + one.frequency, zero, one)
        pq.enqueue(merged, merged.frequency)

    return pq.dequeue() # None for an empty table


def generate_huffman_codes(root: Optional[HuffmanNode]) -> Dict[int, str]:
    """
    Preorder walk (node, zero, one) recording the path to every real symbol.
    A tree that is a single leaf maps that symbol to the empty string.
    """
    codes: Dict[int, str] = {}
    if root is None:
        return codes

    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.symbol != NOT_A_CHAR:
            codes[node.symbol] = path
        if node.one is not None:
            stack.append((node.one, path + "1"))
        if node.zero is not None:
            stack.append((node.zero, path + "0"))
    return codes


def huffman_encode(data: Iterable[int], code_map: Dict[int, str],
                   writer: Optional[BitWriter] = None) -> Tuple[str, int]:
    """
    Concatenate the code of every symbol in `data` followed by the PSEUDO_EOF
    code. Returns the bitstring and its length; the bits also go to `writer`
    when one is given.
    """
    parts = [code_map[b] for b in data]
    parts.append(code_map[PSEUDO_EOF])
    bits = "".join(parts)
    if writer is not None:
        writer.write_bits(bits)
    return bits, len(bits)


def huffman_decode(reader: BitReader, root: Optional[HuffmanNode]) -> bytes:
    """
    Walk the tree one bit at a time, emitting a symbol and restarting at the root
    on every leaf. Stops at PSEUDO_EOF or when the reader runs dry; a stream cut
    off mid-code just returns what was decoded so far.
    """
    decoded = bytearray()
    if root is None or root.is_leaf():
        # a single-leaf tree has only the empty code, nothing to walk
        return bytes(decoded)

    node = root
    while True:
        bit = reader.read_bit()
        if bit < 0:
            break
        node = node.one if bit == 1 else node.zero
        if node.is_leaf():
            if node.symbol == PSEUDO_EOF:
                break
            decoded.append(node.symbol)
            node = root
    return bytes(decoded)


def free_tree(root: Optional[HuffmanNode]) -> int:
    # Detach every node from its children; returns how many nodes were released
    released = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.zero is not None:
            stack.append(node.zero)
        if node.one is not None:
            stack.append(node.one)
        node.zero = None
        node.one = None
        released += 1
    return released
