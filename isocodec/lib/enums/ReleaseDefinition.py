from enum import StrEnum


class ReleaseDefinition(StrEnum):
    VERSION = "v0.1.0"
    RELEASE = "Oct 2026"
