# filename: huffman_errors.py


class HuffmanError(ValueError):
    """Base class for every failure raised by the codec."""


class EmptyInputError(HuffmanError):
    pass


class UnknownUnitError(HuffmanError):
    def __init__(self, unit):
        super().__init__(f"no code for unit {unit!r}")
        self.unit = unit


class MalformedBitstringError(HuffmanError):
    pass
