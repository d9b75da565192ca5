from re import search
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator
from isocodec.lib.exceptions.exceptions import InvalidLengthError


"""
Data element length specification

The fixed length field has no length prefix, so prefix_digits is 0 and max_length is the field width. The variable
length field is prefixed by prefix_digits decimal digits, carrying the body length, which is up to max_length

The schema files use the short string form, which is also accepted by the model:

    "6"       fixed, 6 characters
    ".9"      LVAR, 1 prefix digit, up to 9 characters
    "..25"    LLVAR, 2 prefix digits, up to 25 characters
    "...999"  LLLVAR, 3 prefix digits, up to 999 characters

The number of dots is the number of prefix digits and must be equal to the number of digits after the dots
"""


class LengthSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    prefix_digits: int = Field(default=0, ge=0, le=9)
    max_length: int = Field(gt=0)

    @model_validator(mode="before")
    @classmethod
    def parse_short_form(cls, data: Any) -> Any:
        if isinstance(data, int) and not isinstance(data, bool):
            return {"max_length": data}

        if isinstance(data, str):
            return cls.parse_string(data)

        return data

    @model_validator(mode="after")
    def check_prefix_capacity(self):
        if self.is_variable and self.max_length >= pow(10, self.prefix_digits):
            raise InvalidLengthError(
                f"Maximum length {self.max_length} cannot be expressed by {self.prefix_digits} length prefix digits"
            )

        return self

    @staticmethod
    def parse_string(length: str) -> dict[str, int]:
        if search(r"^\d+$", length):
            return {"max_length": int(length)}

        if (match := search(r"^(\.+)(\d+)$", length)) and len(match.group(1)) == len(match.group(2)):
            return {"prefix_digits": len(match.group(1)), "max_length": int(match.group(2))}

        raise InvalidLengthError(
            f"Unknown length specification {length}. Use digits for fixed length like 6, or dots and digits "
            f"for variable length like ..25, where the number of dots equals the number of digits"
        )

    @classmethod
    def from_string(cls, length: str) -> "LengthSpec":
        return cls(**cls.parse_string(length))

    @property
    def is_variable(self) -> bool:
        return self.prefix_digits > int()

    @property
    def is_fixed(self) -> bool:
        return not self.is_variable

    def __str__(self) -> str:
        if self.is_fixed:
            return str(self.max_length)

        return "." * self.prefix_digits + str(self.max_length).zfill(self.prefix_digits)
