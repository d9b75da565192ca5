"""
Unit tests for the command line interface and the launcher.
"""

import json
import pytest
from loguru import logger
from isocodec import launcher
from isocodec.cli.core.IsoCli import IsoCli
from isocodec.cli.enums.ExitCodes import ExitCodes
from isocodec.lib.data_models.Config import Config
from isocodec.lib.enums.TermFilesPath import TermFilesPath
from tests.conftest import BUILT_MESSAGE, DEFAULT_SCHEME_MESSAGE, MESSAGE_VALUES


CUSTOM_FILES = [
    "--scheme", TermFilesPath.CUSTOM_ISO_CONFIG,
    "--mti-file", TermFilesPath.CUSTOM_ISO_MTI,
]


@pytest.fixture
def cli() -> IsoCli:
    return IsoCli(Config())


@pytest.fixture
def dump_file(tmp_path) -> str:
    dump_file = tmp_path / "message.json"
    dump_file.write_text(json.dumps({"mti": "0200", "fields": MESSAGE_VALUES}))

    return str(dump_file)


class TestParseCommand:

    def test_parse(self, cli, caplog):
        assert cli.run_application(["--parse", DEFAULT_SCHEME_MESSAGE]) == ExitCodes.SUCCESS
        assert "[MSG_TYPE][0200]" in caplog.text
        assert "[DE44][014][Value for DE44]" in caplog.text
        assert "[DE105][027][This is the value for DE105]" in caplog.text

    def test_parse_with_custom_scheme(self, cli, caplog):
        assert cli.run_application(["--parse", BUILT_MESSAGE, *CUSTOM_FILES]) == ExitCodes.SUCCESS
        assert "[DE03][003][123]" in caplog.text

    def test_parse_to_json(self, cli, caplog):
        assert cli.run_application(["--parse", DEFAULT_SCHEME_MESSAGE, "--json"]) == ExitCodes.SUCCESS
        assert '"mti": "0200"' in caplog.text
        assert '"DE105": "This is the value for DE105"' in caplog.text

    def test_header_requires_flag(self, cli, caplog):
        assert cli.run_application(["--parse", f"ISO{DEFAULT_SCHEME_MESSAGE}"]) == ExitCodes.CODEC_ERROR
        assert "header is present" in caplog.text

        assert cli.run_application(["--parse", f"ISO{DEFAULT_SCHEME_MESSAGE}", "--header"]) == ExitCodes.SUCCESS

    def test_header_from_config(self, caplog):
        config = Config.model_validate({"message": {"use_header": True}})

        assert IsoCli(config).run_application(["--parse", f"ISO{DEFAULT_SCHEME_MESSAGE}"]) == ExitCodes.SUCCESS

    def test_descriptions_printed(self, caplog):
        config = Config.model_validate({"debug": {"print_description": True}})

        assert IsoCli(config).run_application(["--parse", DEFAULT_SCHEME_MESSAGE]) == ExitCodes.SUCCESS
        assert "Processing code, n 6" in caplog.text

    def test_bad_message(self, cli, caplog):
        assert cli.run_application(["--parse", "0200ZZ"]) == ExitCodes.CODEC_ERROR
        assert "Cannot parse the message bitmap" in caplog.text

    def test_job_marks_logged(self, cli, caplog):
        cli.run_application(["--parse", "0200ZZ"])

        assert "## Begin command line job ID" in caplog.text
        assert "## Finish command line job ID" in caplog.text


class TestBuildCommand:

    def test_build(self, cli, dump_file, caplog):
        assert cli.run_application(["--build", dump_file, *CUSTOM_FILES]) == ExitCodes.SUCCESS
        assert f"[MESSAGE ][{BUILT_MESSAGE}]" in caplog.text

    def test_build_returns_wire_string(self, cli, dump_file):
        arguments = cli.parser.parse_args(["--build", dump_file, "--header"])

        assert cli.build(arguments) == f"ISO{DEFAULT_SCHEME_MESSAGE}"

    def test_build_invalid_mti(self, cli, tmp_path, caplog):
        dump_file = tmp_path / "message.json"
        dump_file.write_text(json.dumps({"mti": "9999", "fields": MESSAGE_VALUES}))

        assert cli.run_application(["--build", str(dump_file)]) == ExitCodes.CODEC_ERROR
        assert "The MTI 9999 is not valid" in caplog.text

    def test_build_invalid_json(self, cli, tmp_path):
        dump_file = tmp_path / "message.json"
        dump_file.write_text(json.dumps({"mti": "02000", "fields": {}}))

        assert cli.run_application(["--build", str(dump_file)]) == ExitCodes.CODEC_ERROR

    def test_build_missing_file(self, cli, tmp_path, caplog):
        assert cli.run_application(["--build", str(tmp_path / "missing.json")]) == ExitCodes.CODEC_ERROR
        assert "Cannot read file" in caplog.text


class TestArguments:

    @pytest.mark.parametrize("args", [[], ["--parse", "0200", "--build", "message.json"], ["--unknown"]])
    def test_bad_arguments(self, cli, args):
        assert cli.run_application(args) == ExitCodes.ARGUMENTS_ERROR

    def test_help(self, cli):
        assert cli.run_application(["--help"]) == ExitCodes.SUCCESS

    def test_version(self, cli, caplog):
        assert cli.run_application(["--version"]) == ExitCodes.SUCCESS
        assert "ISOCODEC v0.1.0" in caplog.text

    def test_strict_overrides_config(self, cli):
        assert not cli.get_skip_missing(cli.parser.parse_args(["--parse", "0200", "--strict"]))
        assert cli.get_skip_missing(cli.parser.parse_args(["--parse", "0200"]))


class TestLauncher:

    @pytest.fixture(autouse=True)
    def reset_logger(self):
        yield
        logger.remove()

    def test_read_default_config(self):
        config = launcher.read_config([])

        assert config.debug.level == "INFO"
        assert config.message.skip_missing_elements

    def test_read_custom_config(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"debug": {"level": "DEBUG"}}))

        assert launcher.read_config(["--config-file", str(config_file)]).debug.level == "DEBUG"

    def test_main_version(self, capsys):
        assert launcher.main(["--version"]) == ExitCodes.SUCCESS
        assert "ISOCODEC v0.1.0" in capsys.readouterr().out

    def test_main_bad_config(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"debug": {"level": "LOUD"}}))

        assert launcher.main(["--config-file", str(config_file), "--version"]) == ExitCodes.ARGUMENTS_ERROR
