from typing import Iterable
from loguru import logger
from isocodec.lib.core.Bitmap import Bitmap
from isocodec.lib.core.DataElement import DataElement
from isocodec.lib.core.SchemeLoader import SchemeLoader
from isocodec.lib.data_models.ElementId import ElementId
from isocodec.lib.data_models.IsoScheme import IsoScheme, ElementScheme
from isocodec.lib.data_models.MessageDump import MessageDump
from isocodec.lib.enums.IsoDefinition import IsoDefinition, MessageLength
from isocodec.lib.exceptions.exceptions import (
    HeaderPresentError,
    IncompleteMessageError,
    InvalidArgumentError,
    InvalidBitmapError,
    InvalidFormatError,
    InvalidLengthError,
    InvalidMTIError,
    NoBitmapError,
    NotDeclaredError,
    ReservedNameError,
    SecondaryBitmapMissingError,
    UnknownElementError,
)


"""
The ISO-8583 message

Owns the MTI, the bitmap and the data elements. The message is built step by step: set the MTI, assign the bitmap,
then add the data elements declared in the bitmap. Once all three are present build_message() assembles the wire
string. The from_string() constructor goes the other way, parsing the wire string in one pass

The scheme and the valid MTI list are bound on construction. When they are not passed the bundled defaults are used,
see SchemeLoader

Wire format: MTI(4) | Bitmap(16 or 32 HEX) | DE | DE | ... The data elements follow in the bitmap order. Optional
"ISO" header can precede the message
"""


class IsoMessage:
    _mti: str | None = None
    _bitmap: Bitmap | None = None
    _data_elements: dict[ElementId, DataElement]
    _data_elements_scheme: IsoScheme
    _valid_mtis: tuple[str, ...]
    _uses_custom_configuration: bool = False
    _skip_missing_elements: bool = True

    @property
    def mti(self) -> str | None:
        return self._mti

    @property
    def bitmap(self) -> Bitmap | None:
        return self._bitmap

    @bitmap.setter
    def bitmap(self, bitmap: Bitmap | None):
        if bitmap is not None and not isinstance(bitmap, Bitmap):
            raise InvalidArgumentError(f"Bitmap expected, got {type(bitmap).__name__}")

        self._bitmap = bitmap

    @property
    def has_secondary_bitmap(self) -> bool:
        return self._bitmap is not None and self._bitmap.has_secondary_bitmap

    @property
    def data_elements(self) -> dict[ElementId, DataElement]:
        return dict(self._data_elements)

    @property
    def data_elements_scheme(self) -> IsoScheme:
        return self._data_elements_scheme

    @property
    def valid_mtis(self) -> tuple[str, ...]:
        return self._valid_mtis

    @property
    def uses_custom_configuration(self) -> bool:
        return self._uses_custom_configuration

    @property
    def skip_missing_elements(self) -> bool:
        return self._skip_missing_elements

    @skip_missing_elements.setter
    def skip_missing_elements(self, skip_missing_elements: bool):
        self._skip_missing_elements = skip_missing_elements

    def __init__(
            self,
            scheme: IsoScheme | None = None,
            valid_mtis: Iterable[str] | None = None,
            skip_missing_elements: bool = True
    ):
        if scheme is None:
            scheme = SchemeLoader.default_scheme()

        if valid_mtis is None:
            valid_mtis = SchemeLoader.default_mti_list()

        self._data_elements_scheme = scheme
        self._valid_mtis = tuple(valid_mtis)
        self._data_elements = dict()
        self.skip_missing_elements = skip_missing_elements

    @classmethod
    def from_string(
            cls,
            iso_message: str,
            scheme: IsoScheme | None = None,
            valid_mtis: Iterable[str] | None = None,
            skip_missing_elements: bool = True
    ) -> "IsoMessage":

        if not iso_message:
            raise InvalidArgumentError("The ISO message cannot be empty")

        if iso_message.startswith(IsoDefinition.HEADER):
            raise HeaderPresentError(
                f"The {IsoDefinition.HEADER} header is present. Use from_string_with_header() to parse the message"
            )

        message: IsoMessage = cls(scheme=scheme, valid_mtis=valid_mtis, skip_missing_elements=skip_missing_elements)
        message.set_mti(iso_message[:MessageLength.MTI])

        bitmap_length: int = MessageLength.PRIMARY_BITMAP_HEX
        bitmap_first_digit: str = iso_message[MessageLength.MTI:MessageLength.MTI + 1]

        if bitmap_first_digit and bitmap_first_digit in IsoDefinition.SECONDARY_BITMAP_HEX_DIGITS:
            bitmap_length = MessageLength.SECONDARY_BITMAP_HEX

        bitmap_end: int = MessageLength.MTI + bitmap_length

        try:
            message.bitmap = Bitmap.from_hex(iso_message[MessageLength.MTI:bitmap_end])

        except (InvalidFormatError, InvalidLengthError) as bitmap_error:
            raise InvalidBitmapError(f"Cannot parse the message bitmap: {bitmap_error}") from bitmap_error

        element_ids: list[ElementId] = message.bitmap.declared_element_ids()
        values = message.extract_data_element_values(iso_message[bitmap_end:], element_ids)

        for element_id, value in values.items():
            if not value:
                logger.warning(f"{element_id} has no value, the data element is skipped")
                continue

            message.add_data_element(element_id, value)

        logger.debug(f"Parsed message {message.mti} with data elements {', '.join(message.data_element_names())}")

        return message

    @classmethod
    def from_string_with_header(
            cls,
            iso_message: str,
            scheme: IsoScheme | None = None,
            valid_mtis: Iterable[str] | None = None,
            skip_missing_elements: bool = True
    ) -> "IsoMessage":

        if not iso_message or not iso_message.startswith(IsoDefinition.HEADER):
            raise InvalidArgumentError(f"The {IsoDefinition.HEADER} header is not present. Use from_string() instead")

        return cls.from_string(
            iso_message.removeprefix(IsoDefinition.HEADER),
            scheme=scheme,
            valid_mtis=valid_mtis,
            skip_missing_elements=skip_missing_elements,
        )

    @classmethod
    def from_dump(
            cls,
            dump: MessageDump,
            scheme: IsoScheme | None = None,
            valid_mtis: Iterable[str] | None = None,
            skip_missing_elements: bool = True
    ) -> "IsoMessage":

        message: IsoMessage = cls(scheme=scheme, valid_mtis=valid_mtis, skip_missing_elements=skip_missing_elements)

        if not message.set_mti(dump.mti):
            raise InvalidMTIError(f"The MTI {dump.mti} is not valid")

        message.bitmap = Bitmap.from_elements(dump.fields.keys(), message.data_elements_scheme)

        for name, value in dump.fields.items():
            message.add_data_element(name, value)

        return message

    def to_dump(self) -> MessageDump:
        if self.mti is None:
            raise IncompleteMessageError("The MTI is missing")

        fields = {element_id.name: element.clean_value() for element_id, element in sorted(self._data_elements.items())}

        return MessageDump(mti=self.mti, fields=fields)

    def use_custom_configuration(self, scheme: IsoScheme | None, valid_mtis: Iterable[str] | None) -> None:
        if scheme is None:
            raise InvalidArgumentError("The custom scheme cannot be None")

        if valid_mtis is None:
            raise InvalidArgumentError("The custom MTI list cannot be None")

        self._data_elements_scheme = scheme
        self._valid_mtis = tuple(valid_mtis)
        self._data_elements = dict()
        self._uses_custom_configuration = True

    def is_mti_valid(self, mti: str) -> bool:
        return mti in self._valid_mtis

    def set_mti(self, mti: str) -> bool:
        if not self.is_mti_valid(mti):
            logger.warning(f"InvalidMTI: the MTI {mti} is not valid. Set one of the MTIs from the valid MTI list")
            return False

        self._mti = mti

        return True

    def add_data_element(self, name: ElementId | str, value: str) -> None:
        if self.bitmap is None:
            raise NoBitmapError("Cannot add data elements without setting the bitmap before")

        if not name or not value:
            raise InvalidArgumentError("Cannot add data elements with an empty name or value")

        element_id: ElementId = ElementId.of(name)

        if element_id.is_reserved:
            raise ReservedNameError(f"{element_id} is reserved for the bitmap and cannot be added as a data element")

        if element_id.is_secondary and not self.bitmap.has_secondary_bitmap:
            raise SecondaryBitmapMissingError(f"Cannot add {element_id} because a secondary bitmap is not declared")

        if not self.bitmap.is_declared(element_id):
            raise NotDeclaredError(f"Cannot add {element_id} because it is not declared in the bitmap")

        if not (element_scheme := self.data_elements_scheme.get_element(element_id)):
            raise UnknownElementError(f"Cannot add {element_id} because it is not defined in the scheme")

        self._data_elements[element_id] = DataElement(
            name=element_id,
            value=value,
            data_type=element_scheme.data_type,
            length=element_scheme.length,
            scheme=self.data_elements_scheme,
        )

    def get_data_element(self, name: ElementId | str) -> DataElement | None:
        return self._data_elements.get(ElementId.of(name))

    def get_value(self, name: ElementId | str) -> str | None:
        if not (data_element := self.get_data_element(name)):
            return None

        return data_element.clean_value()

    def data_element_names(self) -> list[str]:
        return [element_id.name for element_id in sorted(self._data_elements)]

    def extract_data_element_values(
            self,
            iso_message_values: str,
            element_ids: list[ElementId]
    ) -> dict[ElementId, str]:

        values: dict[ElementId, str] = dict()
        position: int = int()

        for element_id in element_ids:
            if element_id.is_reserved:
                continue

            if not (element_scheme := self.data_elements_scheme.get_element(element_id)):
                raise UnknownElementError(f"Cannot parse {element_id} because it is not defined in the scheme")

            value, position = self.slice_value(iso_message_values, position, element_id, element_scheme)
            values[element_id] = value

        if position < len(iso_message_values):
            logger.warning(f"Unexpected {len(iso_message_values) - position} characters after the last data element")

        return values

    @staticmethod
    def slice_value(data: str, position: int, element_id: ElementId, element_scheme: ElementScheme) -> tuple[str, int]:
        length = element_scheme.length
        value_length: int = length.max_length

        if length.is_variable:
            length_prefix: str = data[position:position + length.prefix_digits]

            if len(length_prefix) != length.prefix_digits or not length_prefix.isdigit():
                raise InvalidFormatError(f"{element_id}: invalid length prefix {length_prefix!r}")

            position += length.prefix_digits
            value_length = int(length_prefix)

        value: str = data[position:position + value_length]

        if len(value) != value_length:
            raise InvalidLengthError(
                f"{element_id}: expected {value_length} characters, only {len(value)} left in the message"
            )

        return value, position + value_length

    def build_message(self, skip_missing: bool | None = None) -> str:
        if skip_missing is None:
            skip_missing = self.skip_missing_elements

        if self.bitmap is None or not self._data_elements or self.mti is None:
            raise IncompleteMessageError("The bitmap, data elements, or MTI are missing")

        values: list[str] = list()

        for element_id in self.bitmap.declared_element_ids():
            if element_id.is_reserved:
                continue

            if not (data_element := self._data_elements.get(element_id)):
                if not skip_missing:
                    raise IncompleteMessageError(f"{element_id} is declared in the bitmap, but has no value")

                logger.debug(f"{element_id} is declared in the bitmap, but has no value. Skipped")
                continue

            values.append(data_element.value)

        return str().join([self.mti, self.bitmap.as_hex(), *values])

    def build_message_with_header(self, skip_missing: bool | None = None) -> str:
        return f"{IsoDefinition.HEADER}{self.build_message(skip_missing=skip_missing)}"

    def __repr__(self) -> str:
        return f"IsoMessage({self.mti}, {self.bitmap!r}, {', '.join(self.data_element_names())})"
