"""
Root pytest configuration for webpack-config.
"""

import pytest

from webpack_config.logging import bootstrap_logging

bootstrap_logging()


@pytest.fixture
def options_file(tmp_path):
    """Write YAML text to a temporary options file and return its path."""
    def _write(text, name="webpack.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
