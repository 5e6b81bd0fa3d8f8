# filename: huffman_core.py

import heapq
import logging
from collections import Counter
from itertools import count

from huffman_errors import EmptyInputError, MalformedBitstringError, UnknownUnitError

logger = logging.getLogger(__name__)


class HuffmanNode:
    def __init__(self, char, freq, order=0):
        self.char = char
        self.freq = freq
        self.order = order
        self.left = None
        self.right = None
        self.position = None
        self.code = None
        self.parent = None

    def __lt__(self, other):
        # equal frequencies pop in insertion order
        return (self.freq, self.order) < (other.freq, other.order)

    def __repr__(self):
        if self.is_leaf():
            return f"HuffmanNode({self.char!r}, {self.freq}, code={self.code!r})"
        return f"HuffmanNode(freq={self.freq})"

    def is_leaf(self):
        return self.left is None and self.right is None

    def is_root(self):
        return self.parent is None

    def attach(self, left, right):
        self.left = left
        self.right = right
        left.parent = self
        right.parent = self

class HuffmanTree:
    """Everything one encode/decode cycle needs: the root, the coded leaves and the code table."""

    def __init__(self, root, leaves):
        self.root = root
        self.leaves = sorted(leaves, key=lambda leaf: leaf.position)
        self.codes = {leaf.char: leaf.code for leaf in self.leaves}

    def __len__(self):
        return len(self.leaves)


class HuffmanLogic:
    def count_frequencies(self, data):
        # Counter keeps first-appearance order, which becomes the tie-break order
        freqs = Counter(data)
        if not freqs:
            raise EmptyInputError("cannot build a Huffman tree from empty input")
        return [HuffmanNode(char, freq, order) for order, (char, freq) in enumerate(freqs.items())]

    def build_tree(self, leaves):
        if not leaves:
            raise EmptyInputError("cannot build a Huffman tree without leaves")
        priority_queue = list(leaves)
        heapq.heapify(priority_queue)
        order = count(max(leaf.order for leaf in leaves) + 1)

        # Iteratively merge the two lightest fragments
        while len(priority_queue) > 1:
            left = heapq.heappop(priority_queue)
            right = heapq.heappop(priority_queue)
            merged = HuffmanNode(None, left.freq + right.freq, next(order))
            merged.attach(left, right)
            heapq.heappush(priority_queue, merged)

        return priority_queue[0]

    def assign_codes(self, root):
        """
        Give every leaf its integer path position and bit-path code.

        The root sits at position 1, a left child at ``position * 2`` and a right
        child at ``position * 2 + 1``, so the binary form of a position is a
        leading 1 followed by the path bits. A lone root leaf keeps the code "1".
        Returns the leaves in traversal order.
        """
        leaves = []

        def walk(node, position):
            if node.is_leaf():
                node.position = position
                node.code = "1" if node is root else format(position, "b")[1:]
                leaves.append(node)
                return
            walk(node.left, position * 2)
            walk(node.right, position * 2 + 1)

        walk(root, 1)
        return leaves

    def generate_codes(self, root):
        return {leaf.char: leaf.code for leaf in self.assign_codes(root)}

    def build(self, data):
        leaves = self.count_frequencies(data)
        root = self.build_tree(leaves)
        tree = HuffmanTree(root, self.assign_codes(root))
        logger.debug("built tree with %d leaves, root frequency %d", len(tree), root.freq)
        return tree

    def encode(self, data, codes):
        encoded = []
        for char in data:
            code = codes.get(char)
            if code is None:
                raise UnknownUnitError(char)
            encoded.append(code)
        return "".join(encoded)

    def decode(self, bits, root):
        stray = set(bits) - {"0", "1"}
        if stray:
            raise MalformedBitstringError(f"bitstring may only hold '0' and '1', got {sorted(stray)!r}")

        # A lone leaf spends exactly one bit per unit
        if root.is_leaf():
            return root.char * len(bits)

        decoded = []
        node = root
        for bit in bits:
            node = node.left if bit == "0" else node.right
            if node.is_leaf():
                decoded.append(node.char)
                node = root

        if node is not root:
            raise MalformedBitstringError("bitstring ends in the middle of a code")
        return "".join(decoded)
