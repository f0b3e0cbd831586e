"""
Options file loading utilities.

Options files are YAML mappings holding the same keys ``compose_config``
accepts. Two tags cover values plain YAML cannot express::

    rules:
      - test: !regex '\\.svg$'
        use: [svg-loader]
    plugins:
      - !js new MiniCssExtractPlugin()
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .exceptions import InvalidOptionsError, OptionsFileNotFoundError
from .render import JSExpression

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS_FILE = "webpack.yaml"
OPTIONS_FILE_ENV_VAR = "WEBPACK_OPTIONS_FILE"


class OptionsLoader(yaml.SafeLoader):
    """SafeLoader that understands the ``!regex`` and ``!js`` tags."""


def _construct_regex(loader: OptionsLoader, node: yaml.Node) -> "re.Pattern":
    source = loader.construct_scalar(node)
    try:
        return re.compile(source)
    except re.error as e:
        raise yaml.constructor.ConstructorError(
            None, None, f"invalid !regex '{source}': {e}", node.start_mark
        )


def _construct_js(loader: OptionsLoader, node: yaml.Node) -> JSExpression:
    return JSExpression(loader.construct_scalar(node))


OptionsLoader.add_constructor("!regex", _construct_regex)
OptionsLoader.add_constructor("!js", _construct_js)


def default_options_path() -> Path:
    """Options file to use when none is given: $WEBPACK_OPTIONS_FILE or ./webpack.yaml."""
    return Path(os.environ.get(OPTIONS_FILE_ENV_VAR) or DEFAULT_OPTIONS_FILE)


def parse_options(text: str, source: str = None) -> Dict[str, Any]:
    """
    Parse options from YAML text.

    Args:
        text: YAML document
        source: Where the text came from, used in error messages

    Returns:
        Options mapping (empty for an empty document)

    Raises:
        InvalidOptionsError: If the text is not valid YAML or not a mapping
    """
    try:
        options = yaml.load(text, Loader=OptionsLoader)
    except yaml.YAMLError as e:
        raise InvalidOptionsError(f"Invalid YAML: {e}", options_file=source)

    if options is None:
        return {}
    if not isinstance(options, dict):
        raise InvalidOptionsError(
            f"Options must be a mapping, got {type(options).__name__}",
            options_file=source,
        )
    return options


def load_options(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Load compose options from a YAML file.

    Args:
        path: Options file (default: $WEBPACK_OPTIONS_FILE or ./webpack.yaml)

    Returns:
        Options mapping ready for ``compose_config``

    Raises:
        OptionsFileNotFoundError: If the file doesn't exist
        InvalidOptionsError: If the file is invalid
    """
    options_path = Path(path) if path is not None else default_options_path()
    logger.debug(f"Loading webpack options from {options_path}")

    if not options_path.exists():
        raise OptionsFileNotFoundError(
            f"Missing options file at {options_path}",
            options_file=str(options_path),
        )

    try:
        with open(options_path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise InvalidOptionsError(f"Options file is not valid UTF-8: {e}", options_file=str(options_path))
    except OSError as e:
        raise InvalidOptionsError(f"Cannot read options file: {e}", options_file=str(options_path))

    return parse_options(text, source=str(options_path))
