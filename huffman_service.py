# filename: huffman_service.py

import logging
from collections import Counter
from types import MappingProxyType

from huffman_bits import EncodedPayload, bits_to_bytes, bytes_to_bits
from huffman_core import HuffmanLogic
from huffman_errors import CorruptData, InvalidInput, UnknownSymbol

logger = logging.getLogger(__name__)


class HuffmanCodec:
    """Huffman code built once from a frequency table.

    Example::

        codec = HuffmanCodec.from_sample("Huffman")
        data, size = codec.encode("Huffman")   # 3 bytes, 18 bits
        codec.decode(data, size)               # 'Huffman'

    The tree and both code tables are fixed at construction, so one codec can
    be shared by any number of callers.
    """

    def __init__(self, frequencies):
        self.logic = HuffmanLogic()
        self._frequencies = dict(frequencies)
        self._tree = self.logic.build_tree(self._frequencies)
        codes, inverse = self.logic.generate_codes(self._tree)
        self._codes = MappingProxyType(codes)
        self._inverse = MappingProxyType(inverse)
        self._max_code_length = max(len(code) for code in codes.values())
        self._joiner = _joiner_for(codes)

    @classmethod
    def from_sample(cls, data):
        """Count the symbols of ``data`` and build a codec for them."""
        if not data:
            raise InvalidInput("cannot build a codec from an empty sample")
        return cls(Counter(data))

    @property
    def tree(self):
        return self._tree

    @property
    def frequencies(self):
        return MappingProxyType(self._frequencies)

    @property
    def code_table(self):
        return self._codes

    @property
    def inverse_code_table(self):
        return self._inverse

    @property
    def alphabet_size(self):
        return len(self._codes)

    def average_code_length(self):
        """Mean code length in bits, weighted by the build frequencies."""
        total = sum(self._frequencies.values())
        bits = sum(freq * len(self._codes[char]) for char, freq in self._frequencies.items())
        return bits / total

    def encoded_bit_length(self, data):
        return sum(len(code) for code in self._lookup(data))

    def encode(self, data):
        """Encode ``data`` to an :class:`EncodedPayload` ``(bytes, bit_count)``."""
        encoded_str = self.encode_as_bitstring(data)
        payload = EncodedPayload(bits_to_bytes(encoded_str), len(encoded_str))
        logger.debug("encoded %d bits into %d bytes", payload.bit_count, len(payload.data))
        return payload

    def encode_as_bitstring(self, data):
        return "".join(self._lookup(data))

    def decode(self, data, bit_count=None):
        """Decode packed bytes, or a '0'/'1' string when ``bit_count`` is omitted.

        For packed input only the last ``bit_count`` bits are read; anything
        before them is padding.
        """
        if bit_count is None:
            if not isinstance(data, str):
                raise TypeError("bit_count is required when decoding bytes")
            return self._decode_bits(data)
        try:
            data = bytes(data)
        except ValueError as e:
            raise CorruptData(f"packed input is not a byte sequence: {e}") from None
        return self._decode_bits(bytes_to_bits(data, bit_count))

    def _lookup(self, data):
        codes = self._codes
        for position, char in enumerate(data):
            try:
                yield codes[char]
            except KeyError:
                raise UnknownSymbol(char, position) from None

    def _decode_bits(self, bits):
        inverse = self._inverse
        limit = self._max_code_length
        result = []
        code = ""
        for position, digit in enumerate(bits):
            if digit != "0" and digit != "1":
                raise CorruptData(f"invalid digit {digit!r} at bit {position}")
            code += digit
            char = inverse.get(code)
            if char is not None or code in inverse:
                result.append(char)
                code = ""
            elif len(code) >= limit:
                raise CorruptData(f"no code matches the bits ending at bit {position}")
        if code:
            raise CorruptData(f"stream ends inside a code ({len(code)} dangling bits)")
        logger.debug("decoded %d bits into %d symbols", len(bits), len(result))
        return self._joiner(result)


def construct(frequencies):
    """Build a :class:`HuffmanCodec` from a symbol -> count mapping."""
    return HuffmanCodec(frequencies)


def _joiner_for(codes):
    if all(isinstance(char, str) and len(char) == 1 for char in codes):
        return "".join
    if all(isinstance(char, int) and not isinstance(char, bool) and 0 <= char <= 255 for char in codes):
        return bytes
    return list
