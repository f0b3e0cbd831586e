"""
Exception classes with built-in guidance for webpack config generation.
"""
import sys


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, error_type: str = None, loader_name: str = None,
                 options_file: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.loader_name = loader_name
        self.options_file = options_file
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your webpack options and try again
"""


class MissingLoaderError(ConfigException):
    """Raised when loader options are given but the loader is not in the chain."""
    def __init__(self, message: str, loader_name: str, option_names: list = None):
        self.option_names = option_names or []
        super().__init__(message, error_type="missing_loader", loader_name=loader_name)

    def _generate_guidance(self):
        options = ', '.join(self.option_names) if self.option_names else 'loader options'
        return f"""
❌ {self}
💡 {options} only apply to '{self.loader_name}'. Resolve this in one of the following ways:
   1. Add {{"loader": "{self.loader_name}"}} to the `use` chain you pass in
   2. Or drop {options} and set the loader options directly in your `use` chain
"""


class InvalidOptionsError(ConfigException):
    """Raised when builder options or an options file cannot be validated."""
    def __init__(self, message: str, options_file: str = None, errors: list = None):
        self.errors = errors or []
        super().__init__(message, error_type="invalid_options", options_file=options_file)

    def _generate_guidance(self):
        details = '\n'.join(f"   • {error}" for error in self.errors)
        source = f" in {self.options_file}" if self.options_file else ""
        return f"""
❌ Invalid webpack options{source}: {self}
{details}
💡 Fix the listed fields and run again
"""


class OptionsFileNotFoundError(ConfigException):
    """Raised when the options file to load does not exist."""
    def __init__(self, message: str, options_file: str):
        super().__init__(message, error_type="options_file_not_found", options_file=options_file)

    def _generate_guidance(self):
        command = self._get_current_command()
        return f"""
❌ Options file not found: {self.options_file}
💡 Resolve this in one of the following ways:
   1. Create {self.options_file} with your webpack options
   2. Or point at another file: {command} --options=<path>
   3. Or set WEBPACK_OPTIONS_FILE environment variable: export WEBPACK_OPTIONS_FILE=<path>
"""


class RenderError(ConfigException):
    """Raised when a config value has no JavaScript representation."""
    def __init__(self, message: str, path: str = None):
        self.path = path
        super().__init__(message, error_type="render")

    def _generate_guidance(self):
        location = self.path or '<root>'
        return f"""
❌ Cannot render webpack config: {self}
💡 The value at {location} must be a dict, list, string, number, bool, None,
   compiled regex or JSExpression. Wrap raw JavaScript in JSExpression("...").
"""
