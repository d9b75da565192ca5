from re import search
from typing import Iterable
from isocodec.lib.core.IsoHelper import IsoHelper
from isocodec.lib.data_models.ElementId import ElementId
from isocodec.lib.data_models.IsoScheme import IsoScheme
from isocodec.lib.enums.IsoDefinition import IsoDefinition, MessageLength
from isocodec.lib.exceptions.exceptions import (
    InvalidFormatError,
    InvalidLengthError,
    ReservedNameError,
    UnknownElementError,
)


"""
The bitmap determines which data elements are present in the ISO-8583 message

The bitmap can be parsed from a BIN or a HEX string or built from a list of data element names. Slot 0 of the bitmap
is the secondary bitmap flag, it is set when any of DE65 - DE128 is present and cannot be set directly
"""


class Bitmap:
    _raw_value: str
    _is_binary: bool
    _has_secondary_bitmap: bool
    _binary_bitmap: list[str]

    @property
    def raw_value(self) -> str:
        return self._raw_value

    @property
    def is_binary(self) -> bool:
        return self._is_binary

    @property
    def has_secondary_bitmap(self) -> bool:
        return self._has_secondary_bitmap

    @property
    def binary_bitmap(self) -> list[str]:
        return list(self._binary_bitmap)

    def __init__(self, raw_value: str, is_binary: bool, has_secondary_bitmap: bool, binary_bitmap: list[str]):
        self._raw_value = raw_value
        self._is_binary = is_binary
        self._has_secondary_bitmap = has_secondary_bitmap
        self._binary_bitmap = binary_bitmap

    @classmethod
    def from_binary(cls, binary_string: str) -> "Bitmap":
        if not binary_string or not search(IsoDefinition.BINARY_PATTERN, binary_string):
            raise InvalidFormatError(f"Parameter {binary_string} is an invalid binary number")

        has_secondary_bitmap = binary_string.startswith("1")

        if has_secondary_bitmap and len(binary_string) != MessageLength.SECONDARY_BITMAP_BINARY:
            raise InvalidLengthError(
                f"Invalid bitmap. Bitmap length must be {MessageLength.SECONDARY_BITMAP_BINARY} if the first bit is 1"
            )

        if not has_secondary_bitmap and len(binary_string) != MessageLength.PRIMARY_BITMAP_BINARY:
            raise InvalidLengthError(
                f"Invalid bitmap. Bitmap length must be {MessageLength.PRIMARY_BITMAP_BINARY} if the first bit is 0"
            )

        return cls(
            raw_value=binary_string,
            is_binary=True,
            has_secondary_bitmap=has_secondary_bitmap,
            binary_bitmap=IsoHelper.string_to_list(binary_string),
        )

    @classmethod
    def from_hex(cls, hex_string: str) -> "Bitmap":
        if not hex_string or not search(IsoDefinition.HEX_PATTERN, hex_string):
            raise InvalidFormatError(f"Parameter {hex_string} is an invalid hexadecimal number")

        has_secondary_bitmap = hex_string[int()] in IsoDefinition.SECONDARY_BITMAP_HEX_DIGITS

        if has_secondary_bitmap and len(hex_string) != MessageLength.SECONDARY_BITMAP_HEX:
            raise InvalidLengthError(
                f"Invalid bitmap. Hexadecimal bitmap length must be {MessageLength.SECONDARY_BITMAP_HEX} "
                f"if the first bit is 1"
            )

        if not has_secondary_bitmap and len(hex_string) != MessageLength.PRIMARY_BITMAP_HEX:
            raise InvalidLengthError(
                f"Invalid bitmap. Hexadecimal bitmap length must be {MessageLength.PRIMARY_BITMAP_HEX} "
                f"if the first bit is 0"
            )

        return cls(
            raw_value=hex_string,
            is_binary=False,
            has_secondary_bitmap=has_secondary_bitmap,
            binary_bitmap=IsoHelper.string_to_list(IsoHelper.hex_to_binary(hex_string)),
        )

    @classmethod
    def from_elements(cls, elements: Iterable[ElementId | str], scheme: IsoScheme) -> "Bitmap":
        bitmap_template: list[str] = ["0"] * MessageLength.PRIMARY_BITMAP_BINARY
        element_ids: list[ElementId] = list()

        for element in elements:
            element_id: ElementId = ElementId.of(element)

            if element_id.is_reserved:
                raise ReservedNameError(
                    f"You cannot add {IsoDefinition.BITMAP_ELEMENT} explicitly, its value is automatically inferred"
                )

            if element_id not in scheme:
                raise UnknownElementError(
                    f"Cannot add {element} because it is not a valid data element defined in the scheme"
                )

            element_ids.append(element_id)

        has_secondary_bitmap = any(element_id.is_secondary for element_id in element_ids)

        if has_secondary_bitmap:
            bitmap_template = ["0"] * MessageLength.SECONDARY_BITMAP_BINARY
            bitmap_template[int()] = "1"

        for element_id in element_ids:
            bitmap_template[element_id.slot] = "1"

        return cls(
            raw_value=IsoHelper.list_to_string(bitmap_template),
            is_binary=True,
            has_secondary_bitmap=has_secondary_bitmap,
            binary_bitmap=bitmap_template,
        )

    def as_binary(self) -> str:
        if self.is_binary:
            return self.raw_value

        return IsoHelper.hex_to_binary(self.raw_value)

    def as_hex(self) -> str:
        if not self.is_binary:
            return self.raw_value

        return IsoHelper.binary_to_hex(self.raw_value)

    def declared_element_ids(self) -> list[ElementId]:
        # Slot 0 comes first when set. It is the secondary bitmap flag, not a data field
        return [ElementId.from_slot(slot) for slot, bit in enumerate(self._binary_bitmap) if bit == "1"]

    def declared_elements(self) -> list[str]:
        return [element_id.name for element_id in self.declared_element_ids()]

    def is_declared(self, element: ElementId | str) -> bool:
        element_id: ElementId = ElementId.of(element)

        if element_id.slot >= len(self._binary_bitmap):
            return False

        return self._binary_bitmap[element_id.slot] == "1"

    def __len__(self) -> int:
        return len(self._binary_bitmap)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented

        return self.as_binary() == other.as_binary()

    def __hash__(self) -> int:
        return hash(self.as_binary())

    def __repr__(self) -> str:
        return f"Bitmap({self.as_hex()})"
