import pytest
from css_selector_builder import CssSelectorBuilder, SelectorBuilder

@pytest.fixture
def builder():
    """Return an instance of the CssSelectorBuilder facade."""
    return CssSelectorBuilder()

@pytest.fixture
def selector():
    """Return an empty SelectorBuilder."""
    return SelectorBuilder()
