"""
Logging tests - verbosity gating through the bound ProgramState
"""

import pytest
from loguru import logger

from sgrtemplate.lib.compiler import template_compile
from sgrtemplate.lib.log import LOG, state_connectToLogger, state_disconnectFromLogger
from sgrtemplate.models import ProgramState


@pytest.fixture
def records():
    """Capture loguru records emitted during a test"""
    captured = []
    handler_id = logger.add(lambda message: captured.append(message.record), level="TRACE")
    yield captured
    logger.remove(handler_id)


@pytest.fixture
def bind_state():
    tokens = []

    def bind(verbosity):
        tokens.append(state_connectToLogger(ProgramState(verbosity=verbosity)))

    yield bind
    for token in reversed(tokens):
        state_disconnectFromLogger(token)


class TestLog:
    """Test LOG gating"""

    def test_no_state_no_output(self, records):
        LOG("silent", level=1)
        assert records == []

    def test_level_within_verbosity(self, records, bind_state):
        bind_state(2)
        LOG("shown", level=1)
        LOG("also shown", level=2)
        LOG("hidden", level=3)

        assert [r["message"] for r in records] == ["shown", "also shown"]
        assert [r["level"].name for r in records] == ["INFO", "DEBUG"]

    def test_braces_are_not_formatted(self, records, bind_state):
        """Template text in messages is logged as-is"""
        bind_state(1)
        LOG("{name} {+Bold}", level=1)

        assert records[0]["message"] == "{name} {+Bold}"

    def test_compiler_trace(self, records, bind_state):
        """The compiler logs its groups at debug verbosity"""
        bind_state(3)
        template_compile("{+Bold}x")

        assert any("Group at 0" in r["message"] for r in records)
        assert all(r["level"].name == "TRACE" for r in records)
