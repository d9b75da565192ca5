import sys
from loguru import logger
from isocodec.lib.data_models.Config import Config
from isocodec.lib.constants import LogDefinition


class Logger:
    rotation = f"{LogDefinition.LOG_MAX_SIZE_MEGABYTES} MB"
    format = LogDefinition.LOGFILE_DATE_FORMAT
    display_format = LogDefinition.DISPLAY_DATE_FORMAT
    compression = LogDefinition.COMPRESSION
    _config: Config

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, config):
        self._config = config

    def __init__(self, config: Config):
        self.config = config
        self.setup()

    def setup(self):
        self.remove()
        self.add_stdout_handler()

        if self.config.debug.log_file:
            self.add_file_handler(self.config.debug.log_file)

    @staticmethod
    def remove():
        logger.remove()

    def add_file_handler(self, filename: str) -> int:
        return logger.add(
            filename,
            format=self.format,
            level=self.config.debug.level,
            rotation=self.rotation,
            compression=self.compression,
            backtrace=False,
            diagnose=False,
        )

    def add_stdout_handler(self) -> int:
        return logger.add(
            sys.stdout,
            format=self.display_format,
            level=self.config.debug.level,
            backtrace=False,
            diagnose=False,
        )
