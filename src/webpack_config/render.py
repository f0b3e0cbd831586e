"""Render a composed config as a CommonJS module webpack can load.

Example::

    source = render_module(compose_config(entry="./src/index.js"),
                           requires={"path": "path"})
    Path("webpack.config.js").write_text(source)
"""

import json
import re
from pathlib import PurePath
from typing import Any, List, Mapping, Optional

from .exceptions import RenderError

INDENT = "  "

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Unescaped "/" inside a pattern (not preceded by an odd number of backslashes)
_UNESCAPED_SLASH = re.compile(r"(?<!\\)((?:\\\\)*)/")

_REGEX_FLAGS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
)

# Flags with a JavaScript equivalent; str patterns always carry re.UNICODE
_RENDERABLE_FLAGS = re.IGNORECASE | re.MULTILINE | re.DOTALL | re.UNICODE


class JSExpression:
    """Raw JavaScript inserted into the rendered module as-is.

    Use it for values Python cannot express, such as plugin instances::

        plugins=[JSExpression("new MiniCssExtractPlugin()")]
    """

    def __init__(self, source: str):
        self.source = source

    def __eq__(self, other):
        return isinstance(other, JSExpression) and other.source == self.source

    def __hash__(self):
        return hash(self.source)

    def __repr__(self):
        return f"JSExpression({self.source!r})"


def regex_literal(pattern: "re.Pattern", path: str = None) -> str:
    """JavaScript regex literal for a compiled Python pattern."""
    source = pattern.pattern
    if isinstance(source, bytes):
        raise RenderError("Byte patterns cannot be rendered as JavaScript regexes", path=path)
    unsupported = pattern.flags & ~_RENDERABLE_FLAGS
    if unsupported:
        raise RenderError(
            f"Regex flags {re.RegexFlag(unsupported)!r} have no JavaScript equivalent: {source!r}",
            path=path,
        )
    source = source.replace("(?P<", "(?<")
    source = _UNESCAPED_SLASH.sub(lambda m: f"{m.group(1)}\\/", source)
    flags = "".join(flag for bit, flag in _REGEX_FLAGS if pattern.flags & bit)
    return f"/{source or '(?:)'}/{flags}"


def _key(key: Any, path: str) -> str:
    if not isinstance(key, str):
        raise RenderError(f"Object keys must be strings, got {type(key).__name__}", path=path)
    return key if _IDENTIFIER.match(key) else json.dumps(key)


def _render(value: Any, depth: int, path: str) -> str:
    if isinstance(value, JSExpression):
        return value.source
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, PurePath):
        return json.dumps(str(value))
    if isinstance(value, re.Pattern):
        return regex_literal(value, path=path or None)

    pad = INDENT * (depth + 1)
    end = INDENT * depth
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        items = [
            f"{pad}{_key(key, path)}: {_render(item, depth + 1, f'{path}.{key}')},"
            for key, item in value.items()
        ]
        return "{\n" + "\n".join(items) + f"\n{end}}}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        items = [
            f"{pad}{_render(item, depth + 1, f'{path}[{index}]')},"
            for index, item in enumerate(value)
        ]
        return "[\n" + "\n".join(items) + f"\n{end}]"

    raise RenderError(f"Unsupported value of type {type(value).__name__}", path=path or None)


def render_value(value: Any) -> str:
    """Render a single value as a JavaScript expression."""
    return _render(value, 0, "")


def render_module(config: Mapping[str, Any], requires: Optional[Mapping[str, str]] = None) -> str:
    """
    Render a webpack config as the source of a ``webpack.config.js`` module.

    Args:
        config: Composed webpack config
        requires: Local name -> module id, emitted as ``const name = require('id');``

    Returns:
        JavaScript source ending with a newline

    Raises:
        RenderError: If any value has no JavaScript representation
    """
    if requires is not None and not isinstance(requires, Mapping):
        raise RenderError(
            f"requires must map local names to module ids, got {type(requires).__name__}",
            path="requires",
        )

    lines: List[str] = []
    for name, module_id in (requires or {}).items():
        if not isinstance(name, str) or not _IDENTIFIER.match(name):
            raise RenderError(f"'{name}' is not a valid JavaScript identifier", path="requires")
        if not isinstance(module_id, str):
            raise RenderError(
                f"Module id for '{name}' must be a string, got {type(module_id).__name__}",
                path=f"requires.{name}",
            )
        lines.append(f"const {name} = require({json.dumps(module_id)});")
    if lines:
        lines.append("")
    lines.append(f"module.exports = {render_value(config)};")
    return "\n".join(lines) + "\n"
