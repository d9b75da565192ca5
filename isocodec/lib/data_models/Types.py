from typing import TypeAlias


ElementName: TypeAlias = str
ElementValue: TypeAlias = str
TypeFields: TypeAlias = dict[ElementName, ElementValue]
