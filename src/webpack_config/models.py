"""
Pydantic models for builder and composer options.

Every field is optional. ``None`` means "use the default"; the documented
default is applied by the builder, never stored on the model, so the
templates in ``defaults`` stay untouched.
"""
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .exceptions import InvalidOptionsError

# A chain entry is either {"loader": ..., "options": {...}} or a bare loader name
ChainEntry = Union[str, Dict[str, Any]]

OptionsT = TypeVar("OptionsT", bound=BaseModel)


class RuleOptions(BaseModel):
    """Shared settings for rule option records."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class JSRuleOptions(RuleOptions):
    """Options for ``build_js_rule``.

    exclude: patterns skipped by the rule (default: ``.json`` files and node_modules)
    use: loader chain (default: babel-loader with the default presets/plugins)
    babel_presets: replaces the babel-loader ``presets`` option
    babel_plugins: replaces the babel-loader ``plugins`` option
    """
    exclude: Optional[List[Any]] = None
    use: Optional[List[ChainEntry]] = None
    babel_presets: Optional[List[Any]] = None
    babel_plugins: Optional[List[Any]] = None


class TSRuleOptions(RuleOptions):
    """Options for ``build_ts_rule`` (default: ts-loader, node_modules excluded)."""
    exclude: Optional[List[Any]] = None
    use: Optional[List[ChainEntry]] = None


class CSSRuleOptions(RuleOptions):
    """Options for ``build_css_rule``.

    use: loader chain (default: style-loader, css-loader, sass-loader)
    css_loader_options: merged over the css-loader options
    sass_loader_options: merged over the sass-loader options
    exclude: optional patterns skipped by the rule
    """
    use: Optional[List[ChainEntry]] = None
    css_loader_options: Optional[Dict[str, Any]] = None
    sass_loader_options: Optional[Dict[str, Any]] = None
    exclude: Optional[List[Any]] = None


class ComposeOptions(BaseModel):
    """Options for ``compose_config``.

    Unknown keys are allowed and copied into the result unchanged.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    mode: Optional[str] = None
    target: Optional[Any] = None

    entry: Optional[Any] = None
    output: Optional[Any] = None
    devtool: Optional[Any] = None
    resolve: Optional[Any] = None
    plugins: Optional[Any] = None
    externals: Optional[Any] = None
    dev_server: Optional[Any] = None
    node: Optional[Any] = None
    serve: Optional[Any] = None
    stats: Optional[Any] = None
    watch: Optional[Any] = None
    watch_options: Optional[Any] = None
    performance: Optional[Any] = None
    experiments: Optional[Any] = None
    optimization: Optional[Any] = None

    rules: Optional[List[Any]] = None
    js: Optional[Dict[str, Any]] = None
    css: Optional[Dict[str, Any]] = None
    ts: Union[bool, Dict[str, Any], None] = None


# Carried into the composed config verbatim when supplied
PASS_THROUGH_FIELDS = (
    "entry",
    "output",
    "devtool",
    "resolve",
    "plugins",
    "externals",
    "dev_server",
    "node",
    "serve",
    "stats",
    "watch",
    "watch_options",
    "performance",
    "experiments",
    "optimization",
)


def _normalize_keys(model_cls: Type[BaseModel], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Rewrite snake_case field names to their camelCase alias."""
    normalized = {}
    for key, value in data.items():
        field = model_cls.model_fields.get(key)
        if field is not None and field.alias:
            key = field.alias
        normalized[key] = value
    return normalized


def _supplied_values(options: BaseModel) -> Dict[str, Any]:
    """Values the caller actually set on a model, keyed by alias."""
    values = {}
    for name in options.model_fields_set:
        alias = type(options).model_fields[name].alias or name
        values[alias] = getattr(options, name)
    if options.model_extra:
        values.update(options.model_extra)
    return values


def coerce_options(model_cls: Type[OptionsT],
                   options: Union[OptionsT, Mapping[str, Any], None] = None,
                   overrides: Optional[Mapping[str, Any]] = None) -> OptionsT:
    """
    Build an options model from a model instance, a mapping, keyword overrides, or nothing.

    Args:
        model_cls: The options model to build
        options: Existing model or mapping (snake_case or camelCase keys)
        overrides: Keyword arguments layered over ``options``

    Returns:
        Validated ``model_cls`` instance

    Raises:
        InvalidOptionsError: If the combined values fail validation
    """
    if isinstance(options, model_cls) and not overrides:
        return options

    data: Dict[str, Any] = {}
    if isinstance(options, BaseModel):
        data.update(_supplied_values(options))
    elif isinstance(options, Mapping):
        data.update(_normalize_keys(model_cls, options))
    elif options is not None:
        raise InvalidOptionsError(
            f"{model_cls.__name__} expects a mapping, got {type(options).__name__}"
        )
    if overrides:
        data.update(_normalize_keys(model_cls, overrides))

    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors()
        ]
        raise InvalidOptionsError(
            f"{model_cls.__name__} failed validation ({len(errors)} error(s))",
            errors=errors,
        ) from e
