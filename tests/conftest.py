"""
Pytest configuration and fixtures for the codec tests.
"""

import pytest
from loguru import logger
from isocodec.lib.core.SchemeLoader import SchemeLoader
from isocodec.lib.data_models.IsoScheme import IsoScheme


BUILT_MESSAGE = (
    "0200B22000000010000000000000008000000001230000000001230000000123000123"
    "Value for DE44This is the value for DE105"
)

DEFAULT_SCHEME_MESSAGE = (
    "0200B2200000001000000000000000800000000123000000000123000000012300012314"
    "Value for DE44027This is the value for DE105"
)

MESSAGE_ELEMENTS = ["DE03", "DE04", "DE07", "DE11", "DE44", "DE105"]

MESSAGE_VALUES = {
    "DE03": "123",
    "DE04": "123",
    "DE07": "123",
    "DE11": "123",
    "DE44": "Value for DE44",
    "DE105": "This is the value for DE105",
}


@pytest.fixture
def caplog(caplog):
    """Route loguru records to the pytest caplog handler."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def fixed_scheme() -> IsoScheme:
    """All the scenario elements are fixed length, DE44 and DE105 fit their values exactly."""
    return IsoScheme.model_validate({
        "DE02": {"Type": "n", "Length": "..19"},
        "DE03": {"Type": "n", "Length": "6"},
        "DE04": {"Type": "n", "Length": "12"},
        "DE07": {"Type": "n", "Length": "10"},
        "DE11": {"Type": "n", "Length": "6"},
        "DE39": {"Type": "an", "Length": "2"},
        "DE41": {"Type": "ans", "Length": "8"},
        "DE44": {"Type": "an", "Length": "14"},
        "DE52": {"Type": "b", "Length": "16"},
        "DE64": {"Type": "b", "Length": "16"},
        "DE105": {"Type": "ans", "Length": "27"},
    })


@pytest.fixture
def default_scheme() -> IsoScheme:
    return SchemeLoader.default_scheme()


@pytest.fixture
def valid_mtis() -> list[str]:
    return ["0100", "0110", "0200", "0210", "0400", "0410", "0800", "0810"]
