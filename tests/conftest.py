import pytest
import structlog

from boldline.models import Marking


@pytest.fixture(autouse=True)
def reset_structlog():
    """The CLI binds structlog to the current stderr; don't leak that into other tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def html_no_dedupe():
    """HTML-style wrapper that keeps each bolded character separate."""
    return Marking.custom(False, "<b>", "</b>")
