from enum import StrEnum, IntEnum


class IsoDefinition(StrEnum):
    HEADER = "ISO"
    BITMAP_ELEMENT = "DE01"
    ELEMENT_PREFIX = "DE"
    SECONDARY_BITMAP_HEX_DIGITS = "89ABCDEF"
    HEX_PATTERN = r"^[0-9A-F]+$"
    BINARY_PATTERN = r"^[01]+$"
    NUMERIC_PATTERN = r"^[0-9]+$"
    ALPHANUMERIC_PATTERN = r"^[A-Za-z0-9\s]+$"
    ELEMENT_NAME_PATTERN = r"^DE(\d{1,3})$"


class MessageLength(IntEnum):
    MTI = 4
    PRIMARY_BITMAP_BINARY = 64
    SECONDARY_BITMAP_BINARY = 128
    PRIMARY_BITMAP_HEX = 16
    SECONDARY_BITMAP_HEX = 32
    PRIMARY_BITMAP_ELEMENTS = 64
    MAX_ELEMENT_NUMBER = 128
    NIBBLE = 4
