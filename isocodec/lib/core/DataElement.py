from decimal import Decimal, InvalidOperation
from loguru import logger
from isocodec.lib.core.IsoHelper import IsoHelper
from isocodec.lib.data_models.ElementId import ElementId
from isocodec.lib.data_models.IsoScheme import IsoScheme, ElementScheme
from isocodec.lib.data_models.LengthSpec import LengthSpec
from isocodec.lib.enums.DataType import DataType
from isocodec.lib.exceptions.exceptions import (
    InvalidArgumentError,
    InvalidLengthError,
    ReservedNameError,
    UnknownElementError,
    ValueNotCompliantError,
    ValueTooLongError,
)


class DataElement:
    """
    One data element of the ISO-8583 message

    Keeps the element value in the wire format: fixed length values are padded up to the field width, variable length
    values are prefixed by the value length. Use clean_value() to get the value back without the framing
    """

    _element_id: ElementId
    _data_type: DataType
    _length: LengthSpec
    _value: str

    @property
    def element_id(self) -> ElementId:
        return self._element_id

    @property
    def name(self) -> str:
        return self._element_id.name

    @property
    def data_type(self) -> DataType:
        return self._data_type

    @property
    def length(self) -> LengthSpec:
        return self._length

    @property
    def value(self) -> str:
        return self._value

    def __init__(
            self,
            name: ElementId | str,
            value: str,
            data_type: DataType | str,
            scheme: IsoScheme,
            length: LengthSpec | str | None = None
    ):
        if scheme is None:
            raise InvalidArgumentError("The data elements scheme is required to build a data element")

        if not name:
            raise InvalidArgumentError("The data element name cannot be empty")

        if value is None:
            raise InvalidArgumentError(f"The {name} value cannot be None")

        element_id: ElementId = ElementId.of(name)

        if element_id.is_reserved:
            raise ReservedNameError(f"{element_id} is reserved for the bitmap and cannot be added as a data element")

        data_type: DataType = DataType.from_tag(data_type)

        if not (element_scheme := scheme.get_element(element_id)):
            raise UnknownElementError(
                f"Cannot add {element_id} because it is not a valid data element defined in the scheme"
            )

        if not data_type.is_compliant(value):
            raise ValueNotCompliantError(f"The value {value} is not compliant with data type {data_type}")

        self._element_id = element_id
        self._data_type = data_type
        self._length = self.resolve_length(length, element_scheme)
        self._value = self.format_value(value)

    @staticmethod
    def resolve_length(length: LengthSpec | str | None, element_scheme: ElementScheme) -> LengthSpec:
        if length is None:
            return element_scheme.length

        if isinstance(length, LengthSpec):
            return length

        return LengthSpec.from_string(length)

    def format_value(self, value: str) -> str:
        if self.length.is_variable:
            return self.adjust_value_for_variable_length(value)

        return self.adjust_value_for_fixed_length(value)

    def adjust_value_for_variable_length(self, value: str) -> str:
        if len(value) > self.length.max_length:
            raise ValueTooLongError(
                f"{self.name}: the value length {len(value)} is greater than the maximum length "
                f"{self.length.max_length}"
            )

        return f"{len(value):0{self.length.prefix_digits}d}{value}"

    def adjust_value_for_fixed_length(self, value: str) -> str:
        width: int = self.length.max_length

        if self.data_type.is_space_padded:
            value = IsoHelper.space_pad(value, width, pattern=self.data_type.pattern)

        if self.data_type.is_zero_padded:
            value = IsoHelper.zero_pad(value, width)

        if self.data_type.is_padded and len(value) > width:
            # Over-width values of the padded types are kept unchanged
            logger.warning(f"{self.name}: the value length {len(value)} is greater than the field length {width}")
            return value

        if len(value) != width:
            raise InvalidLengthError(
                f"{self.name}: the value length {len(value)} does not match the field length {width}"
            )

        return value

    def clean_value(self) -> str:
        if self.length.is_variable:
            return self.value[self.length.prefix_digits:]

        if self.data_type.is_space_padded:
            return self.value.rstrip()

        if self.data_type.is_zero_padded:
            return self.normalize_number(self.value)

        return self.value

    @staticmethod
    def normalize_number(value: str) -> str:
        try:
            return f"{Decimal(value):f}"

        except InvalidOperation:
            logger.warning(f"Cannot normalize numeric value {value}, the value returned as is")
            return value

    def __repr__(self) -> str:
        return f"DataElement({self.name}, {self.data_type}, {self.length}, {self.value!r})"
