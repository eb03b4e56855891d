"""
Output assembly for generated wrappers.

Lays rendered classes out as build artifacts, either one module (plus an
index) per component or a single bundle module, and writes them to disk.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..logging_config import get_logger
from .core.config import HELPERS_STEM
from .core.generator import CodeGenerator
from .core.schema import ComponentMetadata

logger = get_logger(__name__)


@dataclass(frozen=True)
class OutputArtifact:
    """A generated file, relative to the build destination."""

    path: Path
    content: str
    kind: str  # component, index, helpers or bundle


class OutputAssembler:
    """Combines rendered classes into artifacts for the configured layout."""

    def __init__(self, generator: CodeGenerator):
        """
        Initialize assembler.

        Args:
            generator: Generator rendering classes and module declarations;
                its config selects the layout
        """
        self.generator = generator

    @property
    def bundle(self) -> bool:
        return self.generator.config.bundle

    def render_classes(self, components: Sequence[ComponentMetadata]) -> dict:
        """
        Render every component, keyed by class name.

        A component selected twice is rendered once and keeps its first
        position.
        """
        classes = {}
        for component in components:
            class_name = self.generator.class_name(component.name)
            if class_name in classes:
                logger.debug("Skipping duplicate component %s", component.name)
                continue
            classes[class_name] = self.generator.generate_single_component(component)
        return classes

    def assemble(self, components: Sequence[ComponentMetadata]) -> List[OutputArtifact]:
        """
        Build the artifacts for all components.

        Args:
            components: Normalized components, in generation order

        Returns:
            Artifacts in write order; helper declarations always come last
        """
        classes = self.render_classes(components)
        if self.bundle:
            return [self._assemble_bundle(classes)]
        return self._assemble_components(classes)

    def _assemble_components(self, classes: dict) -> List[OutputArtifact]:
        ext = self.generator.file_extension
        header = self.generator.render_file_header()
        artifacts = []

        for class_name, content in classes.items():
            artifacts.append(
                OutputArtifact(
                    path=Path(class_name) / f"{class_name}{ext}",
                    content=header + content,
                    kind="component",
                )
            )
            artifacts.append(
                OutputArtifact(
                    path=Path(class_name) / f"index{ext}",
                    content=self.generator.render_index_file(class_name),
                    kind="index",
                )
            )

        artifacts.append(
            OutputArtifact(
                path=Path(f"{HELPERS_STEM}{ext}"),
                content=self.generator.render_helpers(),
                kind="helpers",
            )
        )
        return artifacts

    def _assemble_bundle(self, classes: dict) -> OutputArtifact:
        name = self.generator.config.get_bundle_name(self.generator.file_extension)
        content = self.generator.render_file_header()
        for class_content in classes.values():
            content += class_content
            content += "\n\n"
        content += self.generator.render_helpers()
        return OutputArtifact(path=Path(name), content=content, kind="bundle")


def write_artifacts(
    artifacts: Sequence[OutputArtifact],
    dest: Union[str, Path],
    log: Optional[logging.Logger] = None,
) -> List[Path]:
    """
    Write artifacts under ``dest`` in the given order.

    Args:
        artifacts: Artifacts from ``OutputAssembler.assemble``
        dest: Build destination directory
        log: Logger for progress messages (module logger by default)

    Returns:
        Paths of the written files
    """
    log = log or logger
    dest = Path(dest)
    written = []

    for artifact in artifacts:
        target = dest / artifact.path
        if artifact.kind == "helpers":
            log.info("Creating helper module...")
        elif artifact.kind == "bundle":
            log.info("Creating React bundle file... %s", target)
        elif artifact.kind == "component":
            log.info("Creating React files for %s...", artifact.path.parent)

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(artifact.content, encoding="utf-8")
        written.append(target)
        logger.debug("Wrote %s", target)

    log.info("React components ready")
    return written
