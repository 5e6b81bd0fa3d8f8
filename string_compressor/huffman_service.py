# // filename: huffman_service.py

import logging

from huffman_core import HuffmanLogic

logger = logging.getLogger(__name__)


def pack_bits(bits):
    """Pack a '0'/'1' string into bytes, most significant bit first."""
    # Zero padding only up to the next byte boundary
    padding = -len(bits) % 8
    bits += "0" * padding

    b = bytearray()
    for i in range(0, len(bits), 8):
        b.append(int(bits[i:i+8], 2))
    return bytes(b)


def format_leaves(leaves):
    return "".join(f"{position} {char} " for position, char in leaves)


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def encode(self, text):
        tree = self.logic.build(text)
        bits = self.logic.encode(text, tree.codes)
        logger.debug("encoded %d units into %d bits", len(text), len(bits))
        return bits, tree

    def decode(self, bits, tree):
        text = self.logic.decode(bits, tree.root)
        logger.debug("decoded %d bits into %d units", len(bits), len(text))
        return text

    def describe_leaves(self, tree):
        return [(leaf.position, leaf.char) for leaf in tree.leaves]
