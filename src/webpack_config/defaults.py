"""Default templates for generated webpack rules.

These are the shared starting points every builder copies from. They are
never handed out directly: builders deep-copy them before use so callers can
mutate their results freely.
"""

import re
from typing import Any, Dict, List, Pattern


# =============================================================================
# LOADER NAMES
# =============================================================================

BABEL_LOADER = "babel-loader"
TS_LOADER = "ts-loader"
STYLE_LOADER = "style-loader"
CSS_LOADER = "css-loader"
SASS_LOADER = "sass-loader"


# =============================================================================
# RULE TESTS
# =============================================================================

JS_TEST: Pattern = re.compile(r"\.jsx?$")
TS_TEST: Pattern = re.compile(r"\.tsx?$")
CSS_TEST: Pattern = re.compile(r"\.s?css$")

# Filenames used to find the JS/CSS rule in a rule list
JS_SAMPLE_FILENAME = "index.js"
CSS_SAMPLE_FILENAME = "styles.css"


# =============================================================================
# JAVASCRIPT
# =============================================================================

DEFAULT_JS_EXCLUDE: List[Pattern] = [re.compile(r"\.json$"), re.compile(r"node_modules")]

DEFAULT_BABEL_PRESETS: List[str] = ["@babel/preset-env", "@babel/preset-react"]

DEFAULT_BABEL_PLUGINS: List[str] = ["@babel/plugin-proposal-class-properties"]

DEFAULT_JS_USE: List[Dict[str, Any]] = [
    {
        "loader": BABEL_LOADER,
        "options": {
            "presets": DEFAULT_BABEL_PRESETS,
            "plugins": DEFAULT_BABEL_PLUGINS,
        },
    },
]


# =============================================================================
# TYPESCRIPT
# =============================================================================

DEFAULT_TS_EXCLUDE: List[Pattern] = [re.compile(r"node_modules")]

DEFAULT_TS_USE: List[Dict[str, Any]] = [{"loader": TS_LOADER}]

TS_RESOLVE_EXTENSIONS: List[str] = [".ts", ".tsx", ".js", ".json"]


# =============================================================================
# CSS / SASS
# =============================================================================

DEFAULT_CSS_LOADER_OPTIONS: Dict[str, Any] = {"modules": True}

# sass-loader gets the same defaults as css-loader
DEFAULT_SASS_LOADER_OPTIONS: Dict[str, Any] = {"modules": True}

DEFAULT_CSS_USE: List[Dict[str, Any]] = [
    {"loader": STYLE_LOADER},
    {"loader": CSS_LOADER, "options": DEFAULT_CSS_LOADER_OPTIONS},
    {"loader": SASS_LOADER, "options": DEFAULT_SASS_LOADER_OPTIONS},
]


# =============================================================================
# TOP LEVEL
# =============================================================================

DEFAULT_MODE = "development"
DEFAULT_TARGET = "web"
