"""Shared pytest fixtures."""

import copy
import json

import pytest

SAMPLE_CONFIG = {
    "themeType": [0, 0, 0],
    "themeName": [0, 0, 100],
    "background": {
        "primary": [0, 0, 0],
        "secondary": [0, 0, 50],
    },
    "language": {
        "type": [240, 100, 50],
        "operator": [300, 100, 50],
        "value": [120, 100, 50],
        "function": [60, 100, 50],
        "parameter": [0, 0, 75],
        "comment": [0, 100, 50],
        "constant": [30, 50, 50],
        "entity": [200, 40, 60],
        "invalid": [180, 100, 50],
        "keyword": [280, 60, 70],
        "storage": [20, 80, 40],
        "string": [90, 30, 55],
        "support": [0, 0, 25],
        "variable": [210, 10, 85],
    },
}


@pytest.fixture
def config_data():
    """A complete raw configuration mapping."""
    return copy.deepcopy(SAMPLE_CONFIG)


@pytest.fixture
def config_file(tmp_path, config_data):
    """Write the sample configuration to disk and return its path."""
    path = tmp_path / "palette.json"
    path.write_text(json.dumps(config_data), encoding="utf-8")
    return path
