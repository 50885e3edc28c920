from datetime import date

import pytest

from muh2log.events import CollectingSink
from muh2log.logging_config import error_aggregator
from muh2log.logs import logger, reload_event_templates
from muh2log.parser import LineClassifier, NormalizedLine

LOG_DATE = date(2010, 3, 17)


@pytest.fixture(autouse=True)
def _reset_module_state(monkeypatch):
    """Keep env-driven log formatting and module-level state from leaking between tests."""
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("MUH2LOG_CONF_FILE", raising=False)
    monkeypatch.delenv("MUH2LOG_ENCODING", raising=False)
    monkeypatch.delenv("MUH2LOG_FALLBACK_ENCODING", raising=False)
    yield
    error_aggregator.reset()
    reload_event_templates()
    logger.enable_debug_format(False)


@pytest.fixture
def log_date():
    return LOG_DATE


@pytest.fixture
def classifier():
    return LineClassifier()


@pytest.fixture
def sink():
    return CollectingSink()


@pytest.fixture
def make_line():
    def _make(text, line_number=1, log_date=LOG_DATE):
        return NormalizedLine.of(text, log_date, line_number)

    return _make
