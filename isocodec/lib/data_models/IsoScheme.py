from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator
from isocodec.lib.data_models.ElementId import ElementId
from isocodec.lib.data_models.LengthSpec import LengthSpec
from isocodec.lib.enums.DataType import DataType
from isocodec.lib.exceptions.exceptions import ReservedNameError


class ElementScheme(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    data_type: DataType = Field(alias="Type")
    length: LengthSpec = Field(alias="Length")
    description: str | None = Field(default=None, alias="Description")

    @field_validator("length", mode="before")
    @classmethod
    def stringify_length(cls, length):
        if isinstance(length, int) and not isinstance(length, bool):
            return str(length)

        return length


class IsoScheme(RootModel[dict[str, ElementScheme]]):
    """
    The data elements scheme. Maps element names to their type and length

    Keys are normalized to the canonical element names, e.g. DE3 turns into DE03. The DE01 is the bitmap and cannot
    be declared by the scheme
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root", mode="after")
    @classmethod
    def normalize_element_names(cls, elements: dict[str, ElementScheme]) -> dict[str, ElementScheme]:
        normalized: dict[str, ElementScheme] = dict()

        for name, element in elements.items():
            element_id: ElementId = ElementId.from_name(name)

            if element_id.is_reserved:
                raise ReservedNameError(f"{name} is reserved for the bitmap and cannot be declared in the scheme")

            normalized[element_id.name] = element

        return normalized

    def get_element(self, element: ElementId | str) -> ElementScheme | None:
        try:
            element_id: ElementId = ElementId.of(element)

        except ValueError:
            return None

        return self.root.get(element_id.name)

    def element_ids(self) -> list[ElementId]:
        return sorted(ElementId.from_name(name) for name in self.root)

    def element_names(self) -> list[str]:
        return [element_id.name for element_id in self.element_ids()]

    def __contains__(self, element: ElementId | str) -> bool:
        return self.get_element(element) is not None

    def __len__(self) -> int:
        return len(self.root)
