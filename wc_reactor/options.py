"""
Build options for wc-reactor.

Validates user options before a build and loads them from JSON
configuration files. Keys are accepted in snake_case or in camelCase
(``webComponent``, ``reactComponents``, ``bundleName``).
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .codegen.core.naming import to_snake_key

# option name -> expected type name
OPTION_TYPES = {
    "web_component": "String",
    "react_components": "Array",
    "verbose": "Boolean",
    "logger": "Object",
    "dest": "String",
    "bundle": "Boolean",
    "bundle_name": "String",
}

LOGGER_METHODS = ("info", "warning", "error")


class OptionsError(Exception):
    """Exception raised for invalid build options or configuration files."""

    pass


def _type_name(value: Any) -> str:
    """Name of the option type ``value`` belongs to."""
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, str):
        return "String"
    if isinstance(value, (list, tuple)):
        return "Array"
    if isinstance(value, (int, float)):
        return "Number"
    return "Object"


@dataclass
class BuildOptions:
    """Options of a wrapper build."""

    # Path to the analysis of the web component(s) to wrap. It can describe
    # a single element or a bundle of elements.
    web_component: Optional[str] = None

    # Names of the web components to wrap, e.g. ['raml-request-panel',
    # 'paper-input']. All analyzed components are wrapped when not set.
    react_components: Optional[List[str]] = None

    # Destination directory of the build; the driver defaults to ./build
    dest: Optional[str] = None

    # Put every React component into a single module
    bundle: bool = False

    # File name of the bundle module, defaults to WebComponents.js
    bundle_name: Optional[str] = None

    # Any object with info(), warning() and error(); a logging.Logger works
    logger: Any = None

    # Print verbose messages
    verbose: bool = False

    validation_errors: List[str] = field(default_factory=list)
    validation_warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.validation_errors

    @classmethod
    def from_dict(cls, opts: Optional[Mapping[str, Any]] = None) -> "BuildOptions":
        """
        Create options from a raw mapping, recording validation results.

        Invalid options do not raise; check ``is_valid`` and
        ``validation_errors``. Only a usable logger is kept from them so the
        errors can be reported through it.

        Args:
            opts: Raw options

        Returns:
            BuildOptions with validation errors and warnings filled in
        """
        user_opts = {to_snake_key(key): value for key, value in (opts or {}).items()}

        errors: List[str] = []
        warnings: List[str] = []
        _validate_options_list(user_opts, errors)
        _validate_required(user_opts, errors)
        _validate_logger(user_opts, warnings)

        known = {key: value for key, value in user_opts.items() if key in OPTION_TYPES}
        if not errors:
            if known.get("react_components") is not None:
                known["react_components"] = list(known["react_components"])
            return cls(**known, validation_errors=errors, validation_warnings=warnings)
        return cls(
            logger=known.get("logger"),
            validation_errors=errors,
            validation_warnings=warnings,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the options as a mapping, without the logger."""
        return {
            name: getattr(self, name)
            for name in OPTION_TYPES
            if name != "logger" and getattr(self, name) is not None
        }


def _validate_options_list(user_opts: Dict[str, Any], errors: List[str]) -> None:
    unknown = [key for key in user_opts if key not in OPTION_TYPES]
    if unknown:
        message = "Unknown option"
        if len(unknown) > 1:
            message += "s"
        errors.append(f"{message}: {', '.join(unknown)}")

    for key, value in user_opts.items():
        expected = OPTION_TYPES.get(key)
        if expected is None or value is None:
            continue
        actual = _type_name(value)
        if actual != expected:
            errors.append(
                f"Type mismatch. Property {key} expected to be a {expected} "
                f"but {actual} was given"
            )


def _validate_required(user_opts: Dict[str, Any], errors: List[str]) -> None:
    if not user_opts.get("web_component"):
        errors.append('"web_component" property is required')


def _validate_logger(user_opts: Dict[str, Any], warnings: List[str]) -> None:
    logger = user_opts.get("logger")
    if logger is None:
        return

    missing = [name for name in LOGGER_METHODS if not callable(getattr(logger, name, None))]
    if missing:
        warnings.append(
            f"Used logger is missing required functions: {', '.join(missing)}"
        )
        del user_opts["logger"]


def _load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load options from a JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise OptionsError(f"Configuration file not found: {path}")

    if not path.suffix.lower() == ".json":
        raise OptionsError(f"Configuration file must be JSON: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise OptionsError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
    except OSError as e:
        raise OptionsError(f"Failed to load configuration file {path}: {str(e)}") from e

    if not isinstance(config, dict):
        raise OptionsError(f"Configuration file must contain a JSON object: {path}")

    return config


def load_options(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> BuildOptions:
    """
    Load build options from a configuration file and overrides.

    Args:
        config_file: Path to JSON configuration file
        overrides: Options taking precedence over the file; ``None`` values
            are ignored

    Returns:
        Validated build options

    Raises:
        OptionsError: If the configuration file can't be used
    """
    base = {}
    if config_file:
        base.update(
            {to_snake_key(key): value for key, value in _load_config_file(config_file).items()}
        )
    if overrides:
        base.update(
            {to_snake_key(key): value for key, value in overrides.items() if value is not None}
        )
    return BuildOptions.from_dict(base)
