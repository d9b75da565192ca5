from enum import IntEnum


class ExitCodes(IntEnum):
    SUCCESS = 0
    CODEC_ERROR = 1
    ARGUMENTS_ERROR = 2
