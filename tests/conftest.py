"""Shared test fixtures for mksa."""

import pytest
import yaml

from mksa.constants import ConstantCatalogue, default_catalogue


@pytest.fixture
def catalogue() -> ConstantCatalogue:
    """The packaged constant catalogue."""
    return default_catalogue()


@pytest.fixture
def small_catalogue_file(tmp_path):
    """A three-entry catalogue written to a temporary YAML file."""
    path = tmp_path / "constants.yaml"
    path.write_text(yaml.dump({
        "constants": {
            "furlong": {"value": 201.168, "dimension": [1, 0, 0, 0], "description": "Furlong"},
            "fortnight": {"value": 1209600.0, "dimension": [0, 0, 1, 0], "description": "Fortnight"},
            "stone": {"value": 6.35029318, "dimension": [0, 1, 0, 0]},
        }
    }))
    return path
