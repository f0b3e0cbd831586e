"""
webpack-config command line tasks.

Loads an options file, composes the webpack config and renders it as a
``webpack.config.js`` module.

Usage:
    webpack-config render --options webpack.yaml --output webpack.config.js
    webpack-config show --options webpack.yaml
"""

import logging
import sys
from pathlib import Path

from invoke import Collection, Program, task

from . import __version__
from .compose import compose_config
from .exceptions import ConfigException
from .loading import load_options
from .logging import bootstrap_logging
from .render import render_module

logger = logging.getLogger(__name__)

# Requires emitted at the top of every rendered module
REQUIRES_KEY = "requires"


def _build_source(options_path):
    """Load options from ``options_path`` and return the rendered module source."""
    options = load_options(options_path)
    requires = options.pop(REQUIRES_KEY, None)
    config = compose_config(options)
    logger.debug(f"Composed config with {len(config['module']['rules'])} rule(s)")
    return render_module(config, requires=requires)


@task(help={
    'options': "YAML options file (default: $WEBPACK_OPTIONS_FILE or webpack.yaml)",
    'output': "Module to write (default: webpack.config.js)",
    'debug': "Enable debug logging",
})
def render(ctx, options=None, output="webpack.config.js", debug=False):
    """
    Compose the webpack config and write it as a JavaScript module.

    Outputs:
        file: the rendered module at --output
        stderr: Diagnostic information
    """
    bootstrap_logging(__name__, debug=debug)
    try:
        source = _build_source(options)
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(source, encoding="utf-8")
        print(f"✅ Wrote {output_path}", file=sys.stderr)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)


@task(help={
    'options': "YAML options file (default: $WEBPACK_OPTIONS_FILE or webpack.yaml)",
    'debug': "Enable debug logging",
})
def show(ctx, options=None, debug=False):
    """
    Print the composed webpack config without writing anything.

    Outputs:
        stdout: the rendered module
        stderr: Diagnostic information
    """
    bootstrap_logging(__name__, debug=debug)
    try:
        source = _build_source(options)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        sys.exit(1)

    print(f"🔍 Rendered config from {options or 'default options file'}", file=sys.stderr)
    sys.stdout.write(source)


namespace = Collection(render, show)

program = Program(namespace=namespace, version=__version__, name="webpack-config")
