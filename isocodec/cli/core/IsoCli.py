from uuid import uuid4
from argparse import ArgumentParser, Namespace
from loguru import logger
from pydantic import ValidationError
from isocodec.cli.enums.CliDefinition import CliDefinition
from isocodec.cli.enums.ExitCodes import ExitCodes
from isocodec.cli.enums.LogMarks import LogMarks
from isocodec.lib.core.IsoMessage import IsoMessage
from isocodec.lib.core.LogPrinter import LogPrinter
from isocodec.lib.core.SchemeLoader import SchemeLoader
from isocodec.lib.data_models.Config import Config
from isocodec.lib.data_models.IsoScheme import IsoScheme
from isocodec.lib.data_models.MessageDump import MessageDump
from isocodec.lib.enums.TermFilesPath import TermFilesPath
from isocodec.lib.enums.TextConstants import TextConstants
from isocodec.lib.exceptions.exceptions import IsoCodecError


"""
Command line interface

Builds the ISO-8583 message from a JSON dump or parses the wire string, printing the result to the log. Does not
set the logger up, this is done by the launcher

Examples:
    isocodec --parse 0200B2200000001000000000000000800000...
    isocodec --parse ISO0200B220... --header
    isocodec --build message.json --scheme custom_scheme.json --mti-file custom_mti.json
"""


class IsoCli:
    _config: Config

    @property
    def config(self):
        return self._config

    @config.setter
    def config(self, config):
        self._config = config

    def __init__(self, config: Config):
        self.config = config
        self.log_printer: LogPrinter = LogPrinter(config)
        self.parser: ArgumentParser = self.create_parser()

    @staticmethod
    def create_parser() -> ArgumentParser:
        parser = ArgumentParser(prog="isocodec", description=TextConstants.CLI_DESCRIPTION)
        action = parser.add_mutually_exclusive_group(required=True)

        action.add_argument(CliDefinition.PARSE, metavar="MESSAGE", help="Parse the ISO-8583 message string")
        action.add_argument(CliDefinition.BUILD, metavar="FILE", help="Build the message from a JSON file")
        action.add_argument(CliDefinition.VERSION, action="store_true", help="Print the version and exit")
        action.add_argument(CliDefinition.ABOUT, action="store_true", help="Print the application info and exit")

        parser.add_argument(CliDefinition.HEADER, action="store_true", help="The message has the ISO header")
        parser.add_argument(CliDefinition.SCHEME, metavar="FILE", help="Custom data elements scheme file")
        parser.add_argument(CliDefinition.MTI_FILE, metavar="FILE", help="Custom valid MTI list file")
        parser.add_argument(CliDefinition.STRICT, action="store_true", help="Fail on declared but missing elements")
        parser.add_argument(CliDefinition.JSON, action="store_true", help="Print the parsed message as JSON")
        parser.add_argument("--config-file", default=TermFilesPath.CONFIG, help="Set configuration file path")

        return parser

    def run_application(self, args: list[str] | None = None) -> int:
        try:
            arguments: Namespace = self.parser.parse_args(args)

        except SystemExit as parsing_exit:
            return ExitCodes.SUCCESS if parsing_exit.code == ExitCodes.SUCCESS else ExitCodes.ARGUMENTS_ERROR

        if arguments.version:
            self.log_printer.print_version()
            return ExitCodes.SUCCESS

        if arguments.about:
            self.log_printer.print_about()
            return ExitCodes.SUCCESS

        job_id = uuid4()

        logger.info(LogMarks.BEGIN % job_id)

        try:
            if arguments.parse is not None:
                self.parse(arguments)

            if arguments.build is not None:
                self.build(arguments)

        except (IsoCodecError, ValidationError) as codec_error:
            logger.error(codec_error)
            return ExitCodes.CODEC_ERROR

        except OSError as file_error:
            logger.error(f"Cannot read file: {file_error}")
            return ExitCodes.CODEC_ERROR

        finally:
            logger.info(LogMarks.FINISH % job_id)

        return ExitCodes.SUCCESS

    def parse(self, arguments: Namespace) -> IsoMessage:
        parse_message = IsoMessage.from_string

        if arguments.header or self.config.message.use_header:
            parse_message = IsoMessage.from_string_with_header

        message: IsoMessage = parse_message(
            arguments.parse,
            scheme=self.get_scheme(arguments),
            valid_mtis=self.get_mti_list(arguments),
            skip_missing_elements=self.get_skip_missing(arguments),
        )

        if arguments.json:
            self.log_printer.print_multi_row(message.to_dump().model_dump_json(indent=4))
            return message

        self.log_printer.print_message(message)

        return message

    def build(self, arguments: Namespace) -> str:
        with open(arguments.build) as json_file:
            dump: MessageDump = MessageDump.model_validate_json(json_file.read())

        message: IsoMessage = IsoMessage.from_dump(
            dump,
            scheme=self.get_scheme(arguments),
            valid_mtis=self.get_mti_list(arguments),
            skip_missing_elements=self.get_skip_missing(arguments),
        )

        if arguments.header or self.config.message.use_header:
            iso_message = message.build_message_with_header()
        else:
            iso_message = message.build_message()

        self.log_printer.print_message(message)

        logger.info(f"[MESSAGE ][{iso_message}]")

        return iso_message

    def get_scheme(self, arguments: Namespace) -> IsoScheme | None:
        if not (scheme_file := arguments.scheme or self.config.specification.scheme_file):
            return None

        return SchemeLoader.load_scheme(scheme_file)

    def get_mti_list(self, arguments: Namespace) -> list[str] | None:
        if not (mti_file := arguments.mti_file or self.config.specification.mti_file):
            return None

        return SchemeLoader.load_mti_list(mti_file)

    def get_skip_missing(self, arguments: Namespace) -> bool:
        if arguments.strict:
            return False

        return self.config.message.skip_missing_elements
