# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every error raised by the Huffman codec."""


class InvalidInput(HuffmanError, ValueError):
    """Empty or non-positive frequency table, or a malformed tree."""


class UnknownSymbol(HuffmanError, KeyError):
    """A symbol to encode is not part of the codec's alphabet."""

    def __init__(self, symbol, position=None):
        self.symbol = symbol
        self.position = position
        super().__init__(symbol)

    def __str__(self):
        if self.position is None:
            return f"symbol {self.symbol!r} is not in the alphabet"
        return f"symbol {self.symbol!r} at position {self.position} is not in the alphabet"


class CorruptData(HuffmanError, ValueError):
    """Encoded input ends mid-code or does not fit its declared bit count."""
