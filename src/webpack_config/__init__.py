"""
webpack-config: build webpack configuration with sensible defaults.

Key components:
- rules: JS/JSX, TypeScript and CSS/SASS rule builders
- compose: Top level config assembly
- render: Output as a webpack.config.js module
- loading: YAML options files
- tasks: invoke command line (``webpack-config``)
"""

__version__ = "0.1.0"

from .chain import replace_where
from .compose import compose_config
from .defaults import (
    DEFAULT_BABEL_PLUGINS,
    DEFAULT_BABEL_PRESETS,
    DEFAULT_CSS_LOADER_OPTIONS,
    DEFAULT_CSS_USE,
    DEFAULT_JS_EXCLUDE,
    DEFAULT_JS_USE,
    DEFAULT_SASS_LOADER_OPTIONS,
    DEFAULT_TS_EXCLUDE,
    DEFAULT_TS_USE,
    TS_RESOLVE_EXTENSIONS,
)
from .exceptions import (
    ConfigException,
    InvalidOptionsError,
    MissingLoaderError,
    OptionsFileNotFoundError,
    RenderError,
)
from .loading import load_options
from .models import ComposeOptions, CSSRuleOptions, JSRuleOptions, TSRuleOptions
from .render import JSExpression, render_module
from .rules import DEFAULT_RULES, build_css_rule, build_js_rule, build_ts_rule

__all__ = [
    # Version
    "__version__",
    # Builders
    "build_js_rule",
    "build_ts_rule",
    "build_css_rule",
    "compose_config",
    "replace_where",
    # Defaults
    "DEFAULT_RULES",
    "DEFAULT_BABEL_PLUGINS",
    "DEFAULT_BABEL_PRESETS",
    "DEFAULT_JS_EXCLUDE",
    "DEFAULT_JS_USE",
    "DEFAULT_CSS_USE",
    "DEFAULT_CSS_LOADER_OPTIONS",
    "DEFAULT_SASS_LOADER_OPTIONS",
    "DEFAULT_TS_EXCLUDE",
    "DEFAULT_TS_USE",
    "TS_RESOLVE_EXTENSIONS",
    # Options
    "ComposeOptions",
    "JSRuleOptions",
    "TSRuleOptions",
    "CSSRuleOptions",
    "load_options",
    # Rendering
    "JSExpression",
    "render_module",
    # Errors
    "ConfigException",
    "MissingLoaderError",
    "InvalidOptionsError",
    "OptionsFileNotFoundError",
    "RenderError",
]
