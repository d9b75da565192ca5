from re import search
from loguru import logger
from isocodec.lib.enums.IsoDefinition import IsoDefinition, MessageLength
from isocodec.lib.exceptions.exceptions import InvalidFormatError, InvalidLengthError


"""
Low-level helpers to format and convert ISO-8583 message parts

Stateless. Used by Bitmap for HEX/BIN conversion and by DataElement for fixed-length fields padding
"""


class IsoHelper:
    hex_to_binary_table: dict[str, str] = {
        "0": "0000", "1": "0001", "2": "0010", "3": "0011",
        "4": "0100", "5": "0101", "6": "0110", "7": "0111",
        "8": "1000", "9": "1001", "A": "1010", "B": "1011",
        "C": "1100", "D": "1101", "E": "1110", "F": "1111",
    }

    binary_to_hex_table: dict[str, str] = {nibble: digit for digit, nibble in hex_to_binary_table.items()}

    @staticmethod
    def string_to_list(string: str) -> list[str]:
        return list(string)

    @staticmethod
    def list_to_string(array: list[str]) -> str:
        return str().join(array)

    @staticmethod
    def hex_to_binary(hex_string: str) -> str:
        if not hex_string or not search(IsoDefinition.HEX_PATTERN, hex_string):
            raise InvalidFormatError(f"Parameter {hex_string} is an invalid hexadecimal number")

        return str().join(IsoHelper.hex_to_binary_table[digit] for digit in hex_string)

    @staticmethod
    def binary_to_hex(binary_string: str) -> str:
        if not binary_string or not search(IsoDefinition.BINARY_PATTERN, binary_string):
            raise InvalidFormatError(f"Parameter {binary_string} is an invalid binary number")

        if len(binary_string) % MessageLength.NIBBLE:
            raise InvalidLengthError(
                f"Invalid binary string length ({len(binary_string)}). It must be a multiple of {MessageLength.NIBBLE}"
            )

        nibbles = (
            binary_string[position:position + MessageLength.NIBBLE]
            for position in range(int(), len(binary_string), MessageLength.NIBBLE)
        )

        return str().join(IsoHelper.binary_to_hex_table[nibble] for nibble in nibbles)

    @staticmethod
    def zero_pad(value: str, width: int) -> str:
        if not search(IsoDefinition.NUMERIC_PATTERN, value):
            logger.debug(f"Value {value} is not numeric, zero padding skipped")
            return value

        return value.rjust(width, "0")

    @staticmethod
    def space_pad(value: str, width: int, pattern: str = IsoDefinition.ALPHANUMERIC_PATTERN) -> str:
        if not search(pattern, value):
            logger.debug(f"Value {value} does not match {pattern}, space padding skipped")
            return value

        return value.ljust(width, " ")
