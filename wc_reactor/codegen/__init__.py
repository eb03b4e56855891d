"""
wc-reactor Code Generation Module

Generates React wrappers for web components from Polymer analysis data.
"""

from typing import Optional, Sequence

from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    EmptySelectionError,
    NotFoundError,
    AmbiguousError,
)
from .core.schema import (
    ComponentMetadata,
    EventDescriptor,
    PropertyDescriptor,
    MethodDescriptor,
    Privacy,
    MemberKind,
    convert_analysis_record,
)
from .core.config import GeneratorConfig
from .core.naming import CaseMap
from .core.selection import (
    MetadataProvider,
    list_components,
    get_component_analysis,
    collect_components,
)
from .core.templates import TemplateError
from .languages.react import ReactGenerator
from .assembler import OutputArtifact, OutputAssembler, write_artifacts


def generate_from_analysis(
    provider: MetadataProvider,
    component_names: Optional[Sequence[str]] = None,
    config: Optional[GeneratorConfig] = None,
    generator: Optional[CodeGenerator] = None,
) -> GenerationResult:
    """
    Generate wrapper artifacts from analysis data.

    Nothing is written to disk; pass ``result.artifacts`` to
    ``write_artifacts`` for that.

    Args:
        provider: Metadata provider holding the analysis
        component_names: Components to generate (all when empty)
        config: Generator configuration
        generator: Generator to use instead of a new ``ReactGenerator``

    Returns:
        GenerationResult with artifacts, warnings and metadata

    Raises:
        GeneratorError: If components can't be selected or resolved
    """
    generator = generator or ReactGenerator(config)

    names = list_components(provider, component_names)
    components = collect_components(provider, names)
    warnings = generator.validate_components(components)
    artifacts = OutputAssembler(generator).assemble(components)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "bundle": generator.config.bundle,
        "components": [component.name for component in components],
        "component_count": len(components),
    }
    return GenerationResult(artifacts, warnings, metadata)


__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "EmptySelectionError",
    "NotFoundError",
    "AmbiguousError",
    "ComponentMetadata",
    "EventDescriptor",
    "PropertyDescriptor",
    "MethodDescriptor",
    "Privacy",
    "MemberKind",
    "convert_analysis_record",
    "GeneratorConfig",
    "CaseMap",
    "MetadataProvider",
    "list_components",
    "get_component_analysis",
    "collect_components",
    "TemplateError",
    "ReactGenerator",
    "OutputArtifact",
    "OutputAssembler",
    "write_artifacts",
    "generate_from_analysis",
]
