"""Rule builders for JavaScript, TypeScript and CSS/SASS files.

Each builder takes an optional options record (or mapping, or keyword
arguments) and returns a webpack rule dict::

    {"test": <pattern>, "exclude": [<pattern>, ...], "use": [<loader>, ...]}

Defaults come from ``webpack_config.defaults`` and are deep-copied, so the
returned rule is always safe to modify.
"""

import copy
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .chain import index_where, is_loader, loader_options, replace_where, with_options
from .defaults import (
    BABEL_LOADER,
    CSS_LOADER,
    CSS_TEST,
    DEFAULT_CSS_USE,
    DEFAULT_JS_EXCLUDE,
    DEFAULT_JS_USE,
    DEFAULT_TS_EXCLUDE,
    DEFAULT_TS_USE,
    JS_TEST,
    SASS_LOADER,
    TS_TEST,
)
from .exceptions import MissingLoaderError
from .models import CSSRuleOptions, JSRuleOptions, TSRuleOptions, coerce_options

logger = logging.getLogger(__name__)


def _copy_or_default(value: Optional[List[Any]], default: List[Any]) -> List[Any]:
    return copy.deepcopy(value if value is not None else default)


def _merge_loader_options(chain: List[Any],
                          name: str,
                          merge: Callable[[Dict[str, Any]], Dict[str, Any]],
                          message: str,
                          option_names: List[str]) -> List[Any]:
    """Replace the options of the first ``name`` loader in ``chain`` with ``merge(existing)``."""
    if index_where(chain, is_loader(name)) is None:
        raise MissingLoaderError(message, loader_name=name, option_names=option_names)

    logger.debug(f"Merging {', '.join(option_names)} into {name} options")
    return replace_where(
        chain,
        is_loader(name),
        lambda entry: with_options(entry, merge(loader_options(entry))),
    )


def build_js_rule(options: Union[JSRuleOptions, Mapping[str, Any], None] = None,
                  **overrides: Any) -> Dict[str, Any]:
    """
    Build the rule that transpiles ``.js``/``.jsx`` files with Babel.

    ``babel_presets`` and ``babel_plugins`` replace the matching babel-loader
    option; every other babel-loader option and every other chain entry is
    kept as given.

    Args:
        options: ``JSRuleOptions`` or an equivalent mapping
        **overrides: Individual option fields, applied over ``options``

    Returns:
        Webpack rule dict with ``test``, ``exclude`` and ``use``

    Raises:
        MissingLoaderError: If Babel options are given and ``use`` has no babel-loader
    """
    opts = coerce_options(JSRuleOptions, options, overrides)
    exclude = _copy_or_default(opts.exclude, DEFAULT_JS_EXCLUDE)
    use = _copy_or_default(opts.use, DEFAULT_JS_USE)

    if opts.babel_presets is None and opts.babel_plugins is None:
        return {"test": JS_TEST, "exclude": exclude, "use": use}

    def merge(existing: Dict[str, Any]) -> Dict[str, Any]:
        if opts.babel_presets is not None:
            existing["presets"] = copy.deepcopy(opts.babel_presets)
        if opts.babel_plugins is not None:
            existing["plugins"] = copy.deepcopy(opts.babel_plugins)
        return existing

    option_names = [
        name for name, value in (("babel_presets", opts.babel_presets),
                                 ("babel_plugins", opts.babel_plugins))
        if value is not None
    ]
    use = _merge_loader_options(
        use,
        BABEL_LOADER,
        merge,
        "Babel options provided but no Babel loader found",
        option_names,
    )
    return {"test": JS_TEST, "exclude": exclude, "use": use}


def build_ts_rule(options: Union[TSRuleOptions, Mapping[str, Any], None] = None,
                  **overrides: Any) -> Dict[str, Any]:
    """Build the rule that compiles ``.ts``/``.tsx`` files with ts-loader."""
    opts = coerce_options(TSRuleOptions, options, overrides)
    return {
        "test": TS_TEST,
        "exclude": _copy_or_default(opts.exclude, DEFAULT_TS_EXCLUDE),
        "use": _copy_or_default(opts.use, DEFAULT_TS_USE),
    }


def build_css_rule(options: Union[CSSRuleOptions, Mapping[str, Any], None] = None,
                   **overrides: Any) -> Dict[str, Any]:
    """
    Build the rule that processes ``.css``/``.scss`` files.

    ``css_loader_options`` and ``sass_loader_options`` are merged one level
    deep over the existing options of their loader: given keys win, other
    existing keys survive.

    Args:
        options: ``CSSRuleOptions`` or an equivalent mapping
        **overrides: Individual option fields, applied over ``options``

    Returns:
        Webpack rule dict with ``test`` and ``use`` (and ``exclude`` if given)

    Raises:
        MissingLoaderError: If loader options are given for a loader missing from ``use``
    """
    opts = coerce_options(CSSRuleOptions, options, overrides)
    use = _copy_or_default(opts.use, DEFAULT_CSS_USE)

    if opts.css_loader_options is not None:
        css_options = copy.deepcopy(opts.css_loader_options)
        use = _merge_loader_options(
            use,
            CSS_LOADER,
            lambda existing: {**existing, **css_options},
            "CSS loader options provided but no CSS loader found",
            ["css_loader_options"],
        )

    if opts.sass_loader_options is not None:
        sass_options = copy.deepcopy(opts.sass_loader_options)
        use = _merge_loader_options(
            use,
            SASS_LOADER,
            lambda existing: {**existing, **sass_options},
            "SASS loader options provided but no SASS loader found",
            ["sass_loader_options"],
        )

    rule: Dict[str, Any] = {"test": CSS_TEST}
    if opts.exclude is not None:
        rule["exclude"] = copy.deepcopy(opts.exclude)
    rule["use"] = use
    return rule


DEFAULT_RULES: List[Dict[str, Any]] = [build_js_rule(), build_css_rule()]
