from loguru import logger
from isocodec.lib.core.IsoMessage import IsoMessage
from isocodec.lib.data_models.Config import Config
from isocodec.lib.data_models.ElementId import ElementId
from isocodec.lib.enums.ReleaseDefinition import ReleaseDefinition
from isocodec.lib.enums.TextConstants import TextConstants


class LogPrinter:
    default_level = logger.info
    _config: Config

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, config):
        self._config = config

    def __init__(self, config: Config):
        self.config = config

    @staticmethod
    def print_multi_row(data: str, level=default_level):
        for string in data.splitlines():
            level(string)

        level(str())

    def print_config(self, config: Config | None = None, path=None, level=logger.debug):
        if config is None:
            config = self.config

        config_data = f"## Configuration parameters ##\n\n"

        if path is not None:
            config_data = f"{config_data}Path: {path}\n\n"

        config_data = f"{config_data}{config.model_dump_json(indent=4)}\n\n"
        config_data = f"{config_data}## End of configuration parameters ##"

        self.print_multi_row(config_data, level=level)

    @staticmethod
    def print_about(level=default_level):
        elements = [
            TextConstants.HELLO_MESSAGE,
            f"Version {ReleaseDefinition.VERSION}",
            f"Released in {ReleaseDefinition.RELEASE}",
        ]

        LogPrinter.print_multi_row("\n\n  ".join(elements), level=level)

    @staticmethod
    def print_version(level=default_level):
        level(f"{TextConstants.SYSTEM_NAME} {ReleaseDefinition.VERSION} | {ReleaseDefinition.RELEASE}")

    def print_message(self, message: IsoMessage, level=default_level):
        level(str())
        level(f"[MSG_TYPE][{message.mti}]")

        if message.bitmap is not None:
            level(f"[BITMAP  ][{message.bitmap.as_hex()}]")

        level(f"[ELEMENTS][{', '.join(message.data_element_names())}]")

        desc_length = self.get_max_desc_length(message)

        for element_id, data_element in sorted(message.data_elements.items()):
            field_data: str = data_element.clean_value()
            message_row: str = f"[{element_id.name}][{str(len(field_data)).zfill(3)}][{field_data}]"

            if self.config.debug.print_description:
                message_row = f"[%-{desc_length}s]%s" % (self.get_field_description(message, element_id), message_row)

            level(message_row)

        level(str())

    def get_max_desc_length(self, message: IsoMessage) -> int:
        desc_length = int()

        for element_id in message.data_elements:
            if len(description := self.get_field_description(message, element_id)) > desc_length:
                desc_length = len(description)

        return desc_length

    @staticmethod
    def get_field_description(message: IsoMessage, element_id: ElementId) -> str:
        if not (element_scheme := message.data_elements_scheme.get_element(element_id)):
            return str()

        description: str = f"{element_scheme.data_type} {element_scheme.length}"

        if element_scheme.description:
            description = f"{element_scheme.description}, {description}"

        return description
