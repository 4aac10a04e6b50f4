import pytest

from typeregistry import TypeRegistry
from typeregistry.conf import clear_settings_cache


@pytest.fixture
def registry() -> TypeRegistry:
    return TypeRegistry()


@pytest.fixture(autouse=True)
def _fresh_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()
