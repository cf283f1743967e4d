# filename: huffman_core.py

import logging

from huffman_errors import InvalidInput

logger = logging.getLogger(__name__)


class HuffmanNode:
    """Either a leaf carrying one symbol, or an internal node owning two children.

    Use :meth:`leaf` and :meth:`merge` rather than the constructor; they keep
    the "symbol XOR children" shape intact.
    """

    __slots__ = ("char", "freq", "left", "right", "_is_leaf")

    def __init__(self, char, freq, left=None, right=None, is_leaf=None):
        if is_leaf is None:
            is_leaf = left is None and right is None
        if is_leaf and (left is not None or right is not None):
            raise InvalidInput("a leaf node cannot have children")
        if not is_leaf and (left is None or right is None):
            raise InvalidInput("an internal node needs exactly two children")
        self.char = char
        self.freq = freq
        self.left = left
        self.right = right
        self._is_leaf = is_leaf

    @classmethod
    def leaf(cls, char, freq):
        return cls(char, freq, is_leaf=True)

    @classmethod
    def merge(cls, left, right):
        return cls(None, left.freq + right.freq, left, right, is_leaf=False)

    @property
    def is_leaf(self):
        return self._is_leaf

    def __repr__(self):
        if self._is_leaf:
            return f"{self.char}:{self.freq}"
        return f"?:{self.freq}"


def _check_frequencies(frequencies):
    if not frequencies:
        raise InvalidInput("frequency table is empty")
    for char, freq in frequencies.items():
        if isinstance(freq, bool) or not isinstance(freq, int):
            raise InvalidInput(f"frequency of {char!r} must be an integer, got {freq!r}")
        if freq <= 0:
            raise InvalidInput(f"frequency of {char!r} must be positive, got {freq}")


class HuffmanLogic:
    def build_tree(self, frequencies):
        """Build the Huffman tree for ``frequencies`` and return its root.

        The two lightest nodes are merged (first one on the left) and the
        parent goes back in front of the first node at least as heavy as it.
        Equal-frequency leaves keep the mapping's iteration order, so the
        resulting codes are reproducible bit for bit.
        """
        _check_frequencies(frequencies)

        # sorted() is stable: equal frequencies stay in insertion order
        nodes = [HuffmanNode.leaf(char, freq)
                 for char, freq in sorted(frequencies.items(), key=lambda item: item[1])]

        while len(nodes) > 1:
            left = nodes.pop(0)
            right = nodes.pop(0)
            parent = HuffmanNode.merge(left, right)

            for index, node in enumerate(nodes):
                if node.freq >= parent.freq:
                    nodes.insert(index, parent)
                    break
            else:
                nodes.append(parent)

        root = nodes[0]
        logger.debug("built Huffman tree: %d symbols, total weight %d", len(frequencies), root.freq)
        return root

    def generate_codes(self, node):
        """Walk the tree and return ``(codes, inverse_codes)``.

        Left edges emit '0' and right edges '1'. A root that is itself a leaf
        gets the one-bit code "0".
        """
        codes = {}
        inverse = {}
        stack = [(node, "")]
        while stack:
            current, code = stack.pop()
            if not isinstance(current, HuffmanNode):
                raise InvalidInput(f"malformed Huffman tree: unexpected {current!r}")
            if current.is_leaf:
                if current.left is not None or current.right is not None:
                    raise InvalidInput(f"malformed Huffman tree: leaf {current!r} has children")
                code = code or "0"
                codes[current.char] = code
                inverse[code] = current.char
            else:
                if current.left is None or current.right is None:
                    raise InvalidInput(f"malformed Huffman tree: node {current!r} lacks a child")
                # left is popped first
                stack.append((current.right, code + "1"))
                stack.append((current.left, code + "0"))
        return codes, inverse
