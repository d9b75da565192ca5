from enum import StrEnum
from os.path import dirname, join, normpath


PACKAGE_DATA_DIR = normpath(join(dirname(__file__), "..", "..", "data"))


class TermFilesPath(StrEnum):
    CONFIG = join(PACKAGE_DATA_DIR, "config.json")
    ISO_CONFIG = join(PACKAGE_DATA_DIR, "isoconfig.json")
    ISO_MTI = join(PACKAGE_DATA_DIR, "isoMTI.json")
    CUSTOM_ISO_CONFIG = join(PACKAGE_DATA_DIR, "customisoconfig.json")
    CUSTOM_ISO_MTI = join(PACKAGE_DATA_DIR, "customisoMTI.json")
