"""
Tests for top level config assembly.
"""

import re

import pytest

from webpack_config import (
    DEFAULT_RULES,
    ComposeOptions,
    InvalidOptionsError,
    build_css_rule,
    build_js_rule,
    build_ts_rule,
    compose_config,
)

NEW_RULES = [{"test": re.compile(r"\.js$"), "use": [{"loader": "other-loader"}]}]


class TestDefaults:
    """Test the config produced without options."""

    @pytest.mark.parametrize("key,value", [
        ("mode", "development"),
        ("target", "web"),
    ])
    def test_scalar_defaults(self, key, value):
        assert compose_config()[key] == value

    @pytest.mark.parametrize("key", ["entry", "output", "devtool", "resolve", "plugins"])
    def test_pass_through_keys_absent_by_default(self, key):
        assert key not in compose_config()

    def test_rules_include_js_and_css(self):
        rules = compose_config()["module"]["rules"]
        assert rules == [build_js_rule(), build_css_rule()]
        assert rules == DEFAULT_RULES

    def test_defaults_hold_without_rule_options(self):
        config = compose_config(entry="./src/index.js", devtool="source-map")
        assert config["module"]["rules"] == [build_js_rule(), build_css_rule()]
        assert config["mode"] == "development"
        assert config["target"] == "web"


class TestRules:
    """Test rule list replacement and substitution."""

    def test_user_can_add_to_rules(self):
        rules = compose_config(rules=DEFAULT_RULES + NEW_RULES)["module"]["rules"]
        assert len(rules) == 3
        assert rules[-1] == NEW_RULES[0]

    def test_user_can_overwrite_rules(self):
        assert compose_config(rules=NEW_RULES)["module"]["rules"] == NEW_RULES

    def test_js_substitutes_js_rule(self):
        js = build_js_rule(babel_presets=["@babel/preset-env"])
        rules = compose_config(js=js)["module"]["rules"]
        assert rules == [js, build_css_rule()]

    def test_css_substitutes_css_rule(self):
        css = build_css_rule(css_loader_options={"modules": False})
        rules = compose_config(css=css)["module"]["rules"]
        assert rules == [build_js_rule(), css]

    def test_js_and_css_together(self):
        js = {"test": re.compile(r"\.m?js$"), "use": ["swc-loader"]}
        css = {"test": re.compile(r"\.css$"), "use": ["style-loader", "css-loader"]}
        assert compose_config(js=js, css=css)["module"]["rules"] == [js, css]

    def test_substitution_applies_to_caller_rules(self):
        other = {"test": re.compile(r"\.svg$"), "use": ["svg-loader"]}
        js = {"test": re.compile(r"\.js$"), "use": ["swc-loader"]}
        rules = compose_config(rules=[other] + NEW_RULES, js=js)["module"]["rules"]
        assert rules == [other, js]

    def test_list_test_condition_is_substituted(self):
        rules = [{"test": [re.compile(r"\.mjs$"), re.compile(r"\.js$")], "use": ["babel-loader"]}]
        js = {"test": re.compile(r"\.js$"), "use": ["swc-loader"]}
        assert compose_config(rules=rules, js=js)["module"]["rules"] == [js]

    def test_substitute_appended_when_nothing_matches(self):
        other = {"test": re.compile(r"\.svg$"), "use": ["svg-loader"]}
        css = {"test": re.compile(r"\.css$"), "use": ["css-loader"]}
        rules = compose_config(rules=[other], css=css)["module"]["rules"]
        assert rules == [other, css]


class TestTypeScript:
    """Test the ts option."""

    def test_ts_true_appends_default_rule(self):
        config = compose_config(ts=True)
        rules = config["module"]["rules"]
        assert len(rules) == 3
        assert rules[-1] == build_ts_rule()
        assert config["resolve"]["extensions"] == [".ts", ".tsx", ".js", ".json"]

    def test_ts_rule_appended_verbatim(self):
        ts = {"test": re.compile(r"\.ts$"), "use": ["esbuild-loader"]}
        rules = compose_config(ts=ts)["module"]["rules"]
        assert rules[-1] == ts

    def test_ts_appended_after_substitution(self):
        js = {"test": re.compile(r"\.js$"), "use": ["swc-loader"]}
        rules = compose_config(js=js, ts=True)["module"]["rules"]
        assert rules == [js, build_css_rule(), build_ts_rule()]

    def test_caller_resolve_wins(self):
        resolve = {"alias": {"@": "./src"}}
        config = compose_config(ts=True, resolve=resolve)
        assert config["resolve"] == resolve

    def test_empty_ts_rule_still_appended(self):
        config = compose_config(ts={})
        assert config["module"]["rules"][-1] == {}
        assert len(config["module"]["rules"]) == 3
        assert config["resolve"]["extensions"] == [".ts", ".tsx", ".js", ".json"]

    def test_ts_false_adds_nothing(self):
        config = compose_config(ts=False)
        assert len(config["module"]["rules"]) == 2
        assert "resolve" not in config


class TestPassThrough:
    """Test bundler options copied into the result."""

    def test_known_keys_copied(self):
        config = compose_config(
            entry="./src/index.js",
            output={"filename": "bundle.js"},
            mode="production",
            target="node",
            devServer={"port": 3000},
            watch_options={"poll": 1000},
        )
        assert config["entry"] == "./src/index.js"
        assert config["output"] == {"filename": "bundle.js"}
        assert config["mode"] == "production"
        assert config["target"] == "node"
        assert config["devServer"] == {"port": 3000}
        assert config["watchOptions"] == {"poll": 1000}

    def test_falsy_values_kept(self):
        config = compose_config(devtool=False, watch=False)
        assert config["devtool"] is False
        assert config["watch"] is False

    def test_unknown_keys_pass_through(self):
        config = compose_config({"context": "/app", "cache": {"type": "filesystem"}})
        assert config["context"] == "/app"
        assert config["cache"] == {"type": "filesystem"}

    def test_module_mapping_keeps_other_keys(self):
        config = compose_config({"module": {"noParse": "jquery", "rules": []}})
        assert config["module"]["noParse"] == "jquery"
        assert config["module"]["rules"] == [build_js_rule(), build_css_rule()]

    def test_options_model(self):
        config = compose_config(ComposeOptions(entry="./main.js", ts=True))
        assert config["entry"] == "./main.js"
        assert config["module"]["rules"][-1] == build_ts_rule()

    def test_input_not_mutated(self):
        options = {"rules": [{"test": re.compile(r"\.js$"), "use": ["a"]}], "output": {"path": "dist"}}
        config = compose_config(options)
        config["module"]["rules"][0]["use"].append("b")
        config["output"]["path"] = "build"
        assert options == {"rules": [{"test": re.compile(r"\.js$"), "use": ["a"]}], "output": {"path": "dist"}}


class TestValidation:
    """Test option validation errors."""

    def test_rules_must_be_a_list(self):
        with pytest.raises(InvalidOptionsError) as excinfo:
            compose_config(rules="not-a-list")
        assert any(error.startswith("rules") for error in excinfo.value.errors)

    def test_options_must_be_a_mapping(self):
        with pytest.raises(InvalidOptionsError):
            compose_config(["entry"])
