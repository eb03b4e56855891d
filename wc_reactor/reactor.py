"""Build driver: analyze web components and write their React wrappers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from .analyzer import AnalysisResult, ComponentsAnalyzer
from .codegen import (
    GenerationResult,
    GeneratorConfig,
    ReactGenerator,
    generate_from_analysis,
    write_artifacts,
)
from .logging_config import get_logger, remove_file_handlers, setup_logging
from .options import BuildOptions, OptionsError

logger = get_logger(__name__)

DEBUG_FILE_NAME = "wc-reactor.log"
DEFAULT_DEST = "./build"


class Reactor:
    """Analyzes Polymer element(s) and generates React component(s) from them."""

    def __init__(self, opts: BuildOptions | Mapping[str, Any] | None = None) -> None:
        """Validate options and prepare logging.

        Args:
            opts: Build options, validated or as a raw mapping.

        Raises:
            OptionsError: If the options did not pass validation. Every
                validation error is logged first.
        """
        if not isinstance(opts, BuildOptions):
            opts = BuildOptions.from_dict(opts)
        self.opts = opts
        self.debug_file = Path.cwd() / DEBUG_FILE_NAME
        self._owns_logger = not opts.logger
        self.logger = self._setup_logger()

        if not self.opts.is_valid:
            self._print_validation_errors()
            self._print_validation_warnings()
            raise OptionsError("Options did not pass validation.")
        self._print_validation_warnings()

        self.dest = Path(self.opts.dest or DEFAULT_DEST)
        self.analysis: AnalysisResult | None = None

    def _setup_logger(self) -> Any:
        """Use the logger from options, or configure the package logger.

        The package logger writes to the console and to a debug file in the
        working directory, at DEBUG level when verbose and ERROR otherwise.
        """
        if self.opts.logger:
            return self.opts.logger
        level = logging.DEBUG if self.opts.verbose else logging.ERROR
        return setup_logging(level=level, log_file=self.debug_file)

    def _print_validation_errors(self) -> None:
        for error in self.opts.validation_errors:
            self.logger.error(error)

    def _print_validation_warnings(self) -> None:
        for warning in self.opts.validation_warnings:
            self.logger.warning(warning)

    def build(self) -> GenerationResult:
        """Build the React components.

        The first failure stops the build. It is logged and returned in the
        result instead of being raised; use ``result.raise_if_failed()`` to
        get the exception.

        Returns:
            Result with the written artifacts, or the failure.
        """
        try:
            self._analyze()
            result = self._generate_components()
        except Exception as e:
            self.logger.error("Build failed: %s", e)
            logger.debug("Build failure details", exc_info=True)
            return GenerationResult.error(f"Build failed: {e}", exception=e)

        self._clear_debug_file()
        return result

    def _analyze(self) -> None:
        """Load the analysis of the web component file."""
        analyzer = ComponentsAnalyzer(self.opts.web_component, self.logger)
        self.analysis = analyzer.analyze()

    def _generate_components(self) -> GenerationResult:
        """Generate the wrappers and write them to the destination."""
        generator = ReactGenerator(
            GeneratorConfig(bundle=bool(self.opts.bundle), bundle_name=self.opts.bundle_name)
        )
        result = generate_from_analysis(
            self.analysis, self.opts.react_components, generator=generator
        )
        self.logger.info(
            "Building React wrappers for %d web components",
            result.metadata["component_count"],
        )
        for warning in result.warnings:
            self.logger.warning(warning)

        written = write_artifacts(result.artifacts, self.dest, self.logger)
        result.warnings = list(self.opts.validation_warnings) + result.warnings
        result.metadata["dest"] = str(self.dest)
        result.metadata["written"] = [str(path) for path in written]
        return result

    def _clear_debug_file(self) -> None:
        """Remove the debug file. Only done after a successful build."""
        if not self._owns_logger:
            return
        for path in remove_file_handlers(self.logger):
            path.unlink(missing_ok=True)


def build(options: BuildOptions | Mapping[str, Any] | None = None) -> GenerationResult:
    """Validate options and run a build.

    Raises:
        OptionsError: If the options did not pass validation.
    """
    return Reactor(options).build()
