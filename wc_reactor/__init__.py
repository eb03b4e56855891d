"""
wc-reactor: React wrappers for Polymer web components.

Reads the analysis of web components and generates React class components
that wrap them.
"""

from .analyzer import AnalysisResult, ComponentsAnalyzer
from .codegen import GenerationResult, GeneratorConfig, ReactGenerator
from .options import BuildOptions, OptionsError, load_options
from .reactor import Reactor, build

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "ComponentsAnalyzer",
    "BuildOptions",
    "OptionsError",
    "load_options",
    "GenerationResult",
    "GeneratorConfig",
    "ReactGenerator",
    "Reactor",
    "build",
]
