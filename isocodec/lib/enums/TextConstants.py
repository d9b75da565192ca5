from enum import StrEnum
from isocodec.lib.enums.ReleaseDefinition import ReleaseDefinition


class TextConstants(StrEnum):
    SYSTEM_NAME = "ISOCODEC"

    HELLO_MESSAGE = f"""
  +-------------------------------------+
  |  I S O C O D E C   ISO-8583 codec   |
  +-------------------------------------+

  Message builder and parser {ReleaseDefinition.VERSION}"""

    CLI_DESCRIPTION = f"{SYSTEM_NAME} {ReleaseDefinition.VERSION}. Builds and parses ISO-8583 messages"
