#
# isocodec starting script
#
# Reads the configuration, sets the logger up and runs the command line interface. Used as the "isocodec" console
# script entry point and by the _isocodec.py script in the working directory
#
# The codec itself has no need in the launcher, see isocodec.lib.core.IsoMessage when using it as a library
#

from sys import exit, argv
from loguru import logger
from pydantic import ValidationError
from isocodec.lib.data_models.Config import Config
from isocodec.lib.core.CustomConfigFile import CustomConfigFile
from isocodec.lib.core.Logger import Logger
from isocodec.lib.core.LogPrinter import LogPrinter
from isocodec.cli.core.IsoCli import IsoCli
from isocodec.cli.enums.ExitCodes import ExitCodes


def read_config(args: list[str] | None = None) -> Config:
    custom_config: CustomConfigFile = CustomConfigFile(add_help=False)  # Config file can be set in the command line

    config_file = custom_config.get_config_filename(args)  # Get the config file name

    with open(config_file) as json_file:  # Read the config
        return Config.model_validate_json(json_file.read())


def main(args: list[str] | None = None) -> int:
    if args is None:
        args = argv[1:]

    try:
        config: Config = read_config(args)

    except (OSError, ValidationError) as config_error:
        logger.error(f"Cannot read the configuration: {config_error}")
        return ExitCodes.ARGUMENTS_ERROR

    Logger(config)
    LogPrinter(config).print_config()

    cli: IsoCli = IsoCli(config)

    return cli.run_application(args)


def run():
    exit(main())
