"""
Core code generation components.

Provides the data model, naming, selection and template utilities shared by
all wrapper generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    EmptySelectionError,
    NotFoundError,
    AmbiguousError,
    GenerationResult,
)
from .schema import (
    ComponentMetadata,
    EventDescriptor,
    PropertyDescriptor,
    MethodDescriptor,
    ParameterDescriptor,
    Privacy,
    MemberKind,
    POLYMER_PROPERTIES,
    POLYMER_METHODS,
    convert_analysis_record,
)
from .naming import CaseMap
from .config import GeneratorConfig
from .selection import (
    MetadataProvider,
    list_components,
    get_component_analysis,
    collect_components,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "EmptySelectionError",
    "NotFoundError",
    "AmbiguousError",
    "GenerationResult",
    # Component model
    "ComponentMetadata",
    "EventDescriptor",
    "PropertyDescriptor",
    "MethodDescriptor",
    "ParameterDescriptor",
    "Privacy",
    "MemberKind",
    "POLYMER_PROPERTIES",
    "POLYMER_METHODS",
    "convert_analysis_record",
    # Naming
    "CaseMap",
    # Configuration
    "GeneratorConfig",
    # Selection
    "MetadataProvider",
    "list_components",
    "get_component_analysis",
    "collect_components",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
