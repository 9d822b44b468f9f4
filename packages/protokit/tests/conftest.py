import pytest

from protokit.conf import get_settings
from protokit.core import get_current_context, push_context


@pytest.fixture
def ctx():
    """Child of the active dispatch context; registrations made here vanish after the test."""
    with push_context(get_current_context().child("test")) as context:
        yield context


@pytest.fixture
def settings():
    """Process settings; local writes made in the test are undone afterwards."""
    with get_settings().overriding() as current:
        yield current
