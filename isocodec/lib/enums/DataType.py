from re import search
from enum import StrEnum
from isocodec.lib.exceptions.exceptions import InvalidTypeError


"""
ISO-8583 data element types

Every member carries the character class the element value must comply with. The "z" type (track data)
is a passthrough and accepts any value. See https://en.wikipedia.org/wiki/ISO_8583#Data_elements
"""


class DataType(StrEnum):
    A = "a"  # Alpha, including blanks
    N = "n"  # Numeric values only
    S = "s"  # Special characters only
    AN = "an"  # Alphanumeric
    AS = "as"  # Alpha and special characters only
    NS = "ns"  # Numeric and special characters only
    ANS = "ans"  # Alphabetic, numeric and special characters
    B = "b"  # Binary data, HEX-encoded
    Z = "z"  # Tracks 2 and 3 code set

    @classmethod
    def from_tag(cls, tag: str) -> "DataType":
        try:
            return cls(tag)

        except ValueError:
            raise InvalidTypeError(
                f"The data type {tag} is invalid. Valid data types are: {', '.join(cls)}. "
                f"Please visit https://en.wikipedia.org/wiki/ISO_8583#Data_elements to learn more about data types"
            ) from None

    @property
    def pattern(self) -> str | None:
        match self:
            case DataType.A:
                return r"^[A-Za-z\s]+$"

            case DataType.N:
                return r"^[0-9\.]+$"

            case DataType.S:
                return r"[^A-Za-z0-9\s]+$"

            case DataType.AN:
                return r"^[A-Za-z0-9\s\.]+$"

            case DataType.AS | DataType.ANS:
                return r"^[A-Za-z0-9\s\W]+$"

            case DataType.NS:
                return r"^[0-9\W]+$"

            case DataType.B:
                return r"^[0-9A-F]+$"

            case DataType.Z:
                return None

            case _:
                raise InvalidTypeError(f"No validation rule for data type {self}")

    @property
    def is_space_padded(self) -> bool:
        return self in (DataType.AN, DataType.ANS)

    @property
    def is_zero_padded(self) -> bool:
        return self is DataType.N

    @property
    def is_padded(self) -> bool:
        return self.is_space_padded or self.is_zero_padded

    def is_compliant(self, value: str) -> bool:
        if (pattern := self.pattern) is None:
            return True

        return search(pattern, value) is not None
