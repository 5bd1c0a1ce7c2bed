"""Root conftest: shared test configuration.

Invariants:
    - Settings cache cleared around every test: env changes never leak between tests
    - Each test that asks for `registry` gets a fresh isolated TypeRegistry
"""

import os

import pytest

# Keep the host environment from changing library defaults under test
for _var in ("SYMENUM_EAGER_POOL", "SYMENUM_TYPE_NAME_PREFIX", "SYMENUM_LOG_LEVEL", "SYMENUM_LOG_FORMAT"):
    os.environ.pop(_var, None)

from symenum.config import get_settings  # noqa: E402
from symenum.core.registry import registry_context  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry():
    with registry_context() as reg:
        yield reg
