# filename: huffman_bits.py

from typing import NamedTuple

from huffman_errors import CorruptData


class EncodedPayload(NamedTuple):
    """Packed code bits plus the number of them that are meaningful."""

    data: bytes
    bit_count: int


def bits_to_bytes(bits: str) -> bytes:
    """Pack a '0'/'1' string into bytes, most significant bit first.

    The string is aligned to the end of the buffer: when its length is not a
    multiple of 8, the first byte is left-padded with zero bits.
    """
    padding = -len(bits) % 8
    bits = "0" * padding + bits

    b = bytearray()
    for i in range(0, len(bits), 8):
        b.append(int(bits[i:i + 8], 2))
    return bytes(b)


def bytes_to_bits(data: bytes, bit_count: int) -> str:
    """Unpack ``data`` and keep its last ``bit_count`` bits."""
    available = len(data) * 8
    if bit_count < 0:
        raise CorruptData(f"bit count must not be negative, got {bit_count}")
    if bit_count > available:
        raise CorruptData(f"bit count {bit_count} exceeds the {available} bits in {len(data)} bytes")
    if bit_count == 0:
        return ""
    bits = "".join(f"{x:08b}" for x in data)
    return bits[available - bit_count:]
