from re import search
from pydantic import BaseModel, ConfigDict, Field
from isocodec.lib.enums.IsoDefinition import IsoDefinition, MessageLength
from isocodec.lib.exceptions.exceptions import UnknownElementError


class ElementId(BaseModel):
    """
    Validated data element identifier

    DE03 and DE105 are the canonical names. DE3 and DE003 are accepted on input and mean the same element.
    The slot is the position of the element flag in the bitmap, slot 0 belongs to DE01, the bitmap itself
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, le=MessageLength.MAX_ELEMENT_NUMBER)

    @classmethod
    def from_name(cls, name: str) -> "ElementId":
        if not (match := search(IsoDefinition.ELEMENT_NAME_PATTERN, name or str())):
            raise UnknownElementError(f"Cannot resolve {name}, the data element name must look like DE03 or DE105")

        number = int(match.group(1))

        if not 1 <= number <= MessageLength.MAX_ELEMENT_NUMBER:
            raise UnknownElementError(
                f"Cannot resolve {name}, data elements are numbered from 1 to {MessageLength.MAX_ELEMENT_NUMBER}"
            )

        return cls(number=number)

    @classmethod
    def from_slot(cls, slot: int) -> "ElementId":
        return cls(number=slot + 1)

    @classmethod
    def of(cls, element: "ElementId | str") -> "ElementId":
        if isinstance(element, ElementId):
            return element

        return cls.from_name(element)

    @property
    def name(self) -> str:
        return f"{IsoDefinition.ELEMENT_PREFIX}{self.number:02d}"

    @property
    def slot(self) -> int:
        return self.number - 1

    @property
    def is_reserved(self) -> bool:
        return self.name == IsoDefinition.BITMAP_ELEMENT

    @property
    def is_secondary(self) -> bool:
        return self.number > MessageLength.PRIMARY_BITMAP_ELEMENTS

    def __lt__(self, other: "ElementId") -> bool:
        return self.number < other.number

    def __str__(self) -> str:
        return self.name
