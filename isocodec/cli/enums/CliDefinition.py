from enum import StrEnum


class CliDefinition(StrEnum):
    PARSE = "--parse"
    BUILD = "--build"
    HEADER = "--header"
    SCHEME = "--scheme"
    MTI_FILE = "--mti-file"
    STRICT = "--strict"
    JSON = "--json"
    VERSION = "--version"
    ABOUT = "--about"
