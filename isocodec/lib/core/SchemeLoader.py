from functools import cache
from loguru import logger
from isocodec.lib.data_models.IsoScheme import IsoScheme
from isocodec.lib.data_models.MtiList import MtiList
from isocodec.lib.enums.TermFilesPath import TermFilesPath


"""
Reads the data elements scheme and the valid MTI list from JSON files

The default files are bundled with the package, see isocodec/data. The loaded default scheme is cached and shared,
the codec never changes it
"""


class SchemeLoader:

    @staticmethod
    def load_scheme(path: str) -> IsoScheme:
        logger.debug(f"Loading data elements scheme from {path}")

        with open(path) as json_file:
            return IsoScheme.model_validate_json(json_file.read())

    @staticmethod
    def load_mti_list(path: str) -> list[str]:
        logger.debug(f"Loading valid MTI list from {path}")

        with open(path) as json_file:
            return MtiList.model_validate_json(json_file.read()).root

    @staticmethod
    @cache
    def default_scheme() -> IsoScheme:
        return SchemeLoader.load_scheme(TermFilesPath.ISO_CONFIG)

    @staticmethod
    @cache
    def default_mti_list() -> tuple[str, ...]:
        return tuple(SchemeLoader.load_mti_list(TermFilesPath.ISO_MTI))

    @staticmethod
    def custom_scheme() -> IsoScheme:
        return SchemeLoader.load_scheme(TermFilesPath.CUSTOM_ISO_CONFIG)

    @staticmethod
    def custom_mti_list() -> list[str]:
        return SchemeLoader.load_mti_list(TermFilesPath.CUSTOM_ISO_MTI)
