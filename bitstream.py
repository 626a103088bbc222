class BitWriter:
    """Packs single bits MSB-first into bytes; the last partial byte is zero-padded."""

    def __init__(self) -> None:
        self.buf = bytearray()
        self.acc = 0
        self.bits = 0
        self.bit_count = 0 # total bits written, padding excluded

    def write_bit(self, bit: int) -> None:
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self.acc = (self.acc << 1) | bit
        self.bits += 1
        self.bit_count += 1
        if self.bits == 8:
            self.buf.append(self.acc & 0xFF)
            self.acc = 0
            self.bits = 0

    def write_bits(self, bits: str) -> None: # bits: string of '0'/'1'
        for ch in bits:
            self.write_bit(1 if ch == '1' else 0)

    def finish(self) -> bytes:
        if self.bits > 0:
            self.acc <<= (8 - self.bits)
            self.buf.append(self.acc & 0xFF)
            self.acc = 0
            self.bits = 0
        return bytes(self.buf)


class BitReader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.byte_idx = 0
        self.acc = 0
        self.bits = 0

    @property
    def exhausted(self) -> bool: # end-of-stream indicator
        return self.bits == 0 and self.byte_idx >= len(self.data)

    def read_bit(self) -> int:
        """Next bit, or -1 once every byte has been consumed."""
        if self.bits == 0:
            if self.byte_idx >= len(self.data):
                return -1
            self.acc = self.data[self.byte_idx]
            self.byte_idx += 1
            self.bits = 8
        bit = (self.acc >> (self.bits - 1)) & 1
        self.bits -= 1
        return bit
