"""Top level webpack config assembly."""

import copy
import logging
from typing import Any, Dict, List, Mapping, Union

from .chain import index_where, replace_where, rule_accepts
from .defaults import (
    CSS_SAMPLE_FILENAME,
    DEFAULT_MODE,
    DEFAULT_TARGET,
    JS_SAMPLE_FILENAME,
    TS_RESOLVE_EXTENSIONS,
)
from .models import PASS_THROUGH_FIELDS, ComposeOptions, coerce_options
from .rules import build_css_rule, build_js_rule, build_ts_rule

logger = logging.getLogger(__name__)


def _substitute_rule(rules: List[Any], filename: str, replacement: Dict[str, Any]) -> List[Any]:
    """Swap the first rule accepting ``filename`` for ``replacement``.

    Appends ``replacement`` when no rule accepts the file.
    """
    if index_where(rules, lambda rule: rule_accepts(rule, filename)) is None:
        logger.debug(f"No rule accepts {filename}; appending substitute rule")
        return rules + [replacement]

    logger.debug(f"Substituting the rule that accepts {filename}")
    return replace_where(rules, lambda rule: rule_accepts(rule, filename), lambda _: replacement)


def compose_config(options: Union[ComposeOptions, Mapping[str, Any], None] = None,
                   **overrides: Any) -> Dict[str, Any]:
    """
    Assemble a complete webpack config.

    Args:
        options: ``ComposeOptions`` or an equivalent mapping
        **overrides: Individual option fields, applied over ``options``

    Returns:
        Webpack config dict. ``mode`` and ``target`` are always present;
        the other bundler options appear only if supplied. Rules live
        under ``module.rules``.
    """
    opts = coerce_options(ComposeOptions, options, overrides)
    supplied = opts.model_fields_set

    if opts.rules is not None:
        rules = copy.deepcopy(opts.rules)
    else:
        rules = [build_js_rule(), build_css_rule()]

    if opts.js is not None:
        rules = _substitute_rule(rules, JS_SAMPLE_FILENAME, copy.deepcopy(opts.js))
    if opts.css is not None:
        rules = _substitute_rule(rules, CSS_SAMPLE_FILENAME, copy.deepcopy(opts.css))

    resolve_supplied = "resolve" in supplied
    resolve = copy.deepcopy(opts.resolve)
    if opts.ts is True or isinstance(opts.ts, dict):
        ts_rule = build_ts_rule() if opts.ts is True else copy.deepcopy(opts.ts)
        rules = rules + [ts_rule]
        if not resolve_supplied:
            resolve = {"extensions": list(TS_RESOLVE_EXTENSIONS)}
            resolve_supplied = True
        else:
            logger.debug("Keeping caller supplied resolve alongside the TypeScript rule")

    config: Dict[str, Any] = {
        "mode": opts.mode if opts.mode is not None else DEFAULT_MODE,
        "target": opts.target if opts.target is not None else DEFAULT_TARGET,
    }

    for name in PASS_THROUGH_FIELDS:
        key = ComposeOptions.model_fields[name].alias or name
        if name == "resolve":
            if resolve_supplied:
                config[key] = resolve
        elif name in supplied:
            config[key] = copy.deepcopy(getattr(opts, name))

    extra = copy.deepcopy(opts.model_extra or {})
    module = extra.pop("module", None)
    config.update(extra)

    module = dict(module) if isinstance(module, Mapping) else {}
    module["rules"] = rules
    config["module"] = module
    return config
