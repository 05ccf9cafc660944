"""Global pytest configuration for VAXREG.

Items collected under `tests/<folder>/` get the folder's marker unless they
already carry it, so `pytest -m contract` and friends work without
decorating every module.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.centers",
    "tests.fixtures.logs",
]

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "contract": "contract",
    TESTS_ROOT / "integration": "integration",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default folder mark to each collected item."""
    for item in items:
        parents = item.path.resolve().parents
        for folder, marker_name in FOLDER_MARKERS.items():
            if folder in parents and item.get_closest_marker(marker_name) is None:
                item.add_marker(getattr(pytest.mark, marker_name))
