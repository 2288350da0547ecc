# tests/conftest.py
# Ensure the project root (the folder that contains 'worksheet' and 'tests') is on sys.path
# so that `from worksheet...` imports work during pytest collection without an install.

import sys
import pathlib

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)

if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

# Sanity check: make sure 'worksheet' is importable and looks like a package
try:
    import worksheet  # noqa: F401
except Exception as e:
    has_pkg = (ROOT / "worksheet" / "__init__.py").is_file()
    raise RuntimeError(
        f"Failed to import 'worksheet' from {ROOT_STR}. "
        f"worksheet/__init__.py exists: {has_pkg}"
    ) from e


class Recorder:
    """Collects emitted values in order; usable anywhere an `emit` callable is."""
    def __init__(self):
        self.items = []

    def __call__(self, value):
        self.items.append(value)


@pytest.fixture
def recorder():
    return Recorder()
