"""
Base generator interface for wrapper code generation.

Defines the contract the target generators implement, the error types
raised while resolving components, and the result container returned to
callers.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Sequence
from pathlib import Path
from .config import GeneratorConfig
from .schema import ComponentMetadata
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class EmptySelectionError(GeneratorError):
    """No components were resolved for the build."""

    pass


class NotFoundError(GeneratorError):
    """A requested component is not known to the metadata provider."""

    pass


class AmbiguousError(GeneratorError):
    """The metadata provider returned more than one record for a component."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for wrapper code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        self._template_engine = create_template_engine(template_dir)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target component model (e.g., 'react')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.js')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Returns:
            Path to template directory or None for in-memory templates
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate_single_component(self, component: ComponentMetadata) -> str:
        """
        Generate the wrapper class declaration for one component.

        Args:
            component: Normalized component metadata

        Returns:
            Class declaration source
        """
        pass

    @abstractmethod
    def class_name(self, name: str) -> str:
        """Return the wrapper class identifier for a component name."""
        pass

    @abstractmethod
    def render_file_header(self) -> str:
        """Return the import header shared by every generated module."""
        pass

    @abstractmethod
    def render_index_file(self, class_name: str) -> str:
        """Return the re-export module for one wrapper class."""
        pass

    @abstractmethod
    def render_helpers(self) -> str:
        """Return the helper declarations shipped with every build."""
        pass

    def validate_components(
        self, components: Sequence[ComponentMetadata]
    ) -> List[str]:
        """
        Check components for issues worth reporting.

        Args:
            components: Components about to be generated

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        seen = set()

        for component in components:
            if component.name in seen:
                warnings.append(
                    f"Component '{component.name}' was selected more than once"
                )
            seen.add(component.name)

            if not (component.events or component.properties or component.methods):
                warnings.append(
                    f"Component '{component.name}' exposes no events, properties or methods"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Re-indent template output with the configured indent unit.

        Templates are written with four spaces per level; each full group of
        leading spaces becomes one ``config.indent``. Remaining spaces are
        kept.

        Args:
            code: Rendered template output

        Returns:
            Re-indented code
        """
        indent = self.config.indent
        if indent == "    ":
            return code

        lines = []
        for line in code.split("\n"):
            stripped = line.lstrip(" ")
            width = len(line) - len(stripped)
            levels, rest = divmod(width, 4)
            lines.append(indent * levels + " " * rest + stripped)

        return "\n".join(lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context and re-indent the result.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.format_code(
            self.template_engine.render_template(template_name, context)
        )

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for build results and metadata."""

    def __init__(
        self,
        artifacts: List[Any] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            artifacts: Generated output artifacts
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.artifacts = artifacts or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[BaseException] = None

    @classmethod
    def error(
        cls, message: str, exception: BaseException = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def raise_if_failed(self) -> "GenerationResult":
        """Re-raise the failure of an unsuccessful build."""
        if self.success:
            return self
        if self.exception is not None:
            raise self.exception
        raise GeneratorError(self.error_message or "Generation failed")

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return f"GenerationResult(success=True, artifacts={len(self.artifacts)})"
        return f"GenerationResult(success=False, error={self.error_message!r})"
