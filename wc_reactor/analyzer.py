"""Access to Polymer analysis documents.

``polymer analyze`` describes the elements of a component bundle as JSON:
top-level ``elements`` and ``mixins`` plus ``namespaces`` that nest more of
them. ``AnalysisResult`` exposes that document as a metadata provider.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

from .codegen.core.selection import ELEMENT_KIND, MetadataProvider
from .logging_config import get_logger
from .utils import AnalysisLoadError, load_json_from_file

logger = get_logger(__name__)

MIXIN_KIND = "mixin"

# feature kind -> (document key, identifier field)
FEATURE_KINDS = {
    ELEMENT_KIND: ("elements", "tagName"),
    MIXIN_KIND: ("mixins", "name"),
}


class AnalysisResult(MetadataProvider):
    """Polymer analysis document queried by feature kind and identifier."""

    def __init__(self, document: dict[str, Any]) -> None:
        if not isinstance(document, dict):
            raise AnalysisLoadError("Analysis document must be a JSON object")
        self.document = document

    @classmethod
    def from_file(cls, path: str | Path) -> AnalysisResult:
        """Load an analysis document from a JSON file."""
        return cls(load_json_from_file(path))

    def _iter_features(self, key: str) -> Iterator[dict[str, Any]]:
        """Yield features stored under ``key``: top level first, then namespaces."""
        scopes = [self.document]
        while scopes:
            scope = scopes.pop(0)
            yield from scope.get(key) or []
            scopes[0:0] = scope.get("namespaces") or []

    def get_features(
        self, kind: str = ELEMENT_KIND, id: str | None = None
    ) -> list[dict[str, Any]]:
        """Return the features of ``kind``, optionally only those named ``id``.

        Raises:
            ValueError: If the kind is not supported.
        """
        if kind not in FEATURE_KINDS:
            raise ValueError(f"Unsupported feature kind: {kind}")

        key, id_field = FEATURE_KINDS[kind]
        features = list(self._iter_features(key))
        if id is not None:
            features = [feature for feature in features if feature.get(id_field) == id]
        return features


class ComponentsAnalyzer:
    """Loads the analysis of a web component file."""

    def __init__(self, file: str | Path, logger: Any = None) -> None:
        self.file = Path(file)
        self.logger = logger or get_logger(__name__)

    def analyze(self) -> AnalysisResult:
        """Read the analysis document.

        Returns:
            The analysis as a metadata provider.

        Raises:
            AnalysisLoadError: If the document can't be loaded.
        """
        self.logger.info("Analyzing Polymer components")
        return AnalysisResult.from_file(self.file)
