"""
Configuration for wrapper code generation.

Holds the settings that change what the emitter and the assembler produce.
User-facing build options are validated in ``wc_reactor.options`` and
converted into a ``GeneratorConfig`` by the build driver.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_BUNDLE_STEM = "WebComponents"
HELPERS_STEM = "WebComponentsImports"


@dataclass
class GeneratorConfig:
    """Configuration for code generators."""

    # Output layout: one bundle module instead of a module per component
    bundle: bool = False
    bundle_name: Optional[str] = None

    # Code style settings
    indent: str = "\t"

    def get_bundle_name(self, file_extension: str) -> str:
        """Return the bundle file name, falling back to the default one."""
        return self.bundle_name or f"{DEFAULT_BUNDLE_STEM}{file_extension}"
