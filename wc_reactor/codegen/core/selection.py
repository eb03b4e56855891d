"""
Component selection and lookup.

Decides which components a build generates wrappers for and fetches the
analysis record behind each selected name.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ...logging_config import get_logger
from .generator import AmbiguousError, EmptySelectionError, NotFoundError
from .schema import ComponentMetadata, convert_analysis_record

logger = get_logger(__name__)

ELEMENT_KIND = "element"


class MetadataProvider(ABC):
    """Source of component introspection records."""

    @abstractmethod
    def get_features(
        self, kind: str = ELEMENT_KIND, id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Query features of a kind, optionally filtered by identifier.

        Args:
            kind: Feature kind, ``"element"`` for web components
            id: Identifier (tag name) to filter on

        Returns:
            Matching records in provider order
        """
        pass


def list_components(
    provider: MetadataProvider, component_names: Optional[Sequence[str]] = None
) -> List[str]:
    """
    Create the list of component names to generate wrappers for.

    An explicit, non-empty list is used as given, order and duplicates
    included. Otherwise every element the provider knows about is selected.

    Args:
        provider: Metadata provider
        component_names: Names requested by the user

    Returns:
        List of component names to process

    Raises:
        EmptySelectionError: If no component was resolved
    """
    if component_names:
        names = list(component_names)
        logger.debug("Using %d explicitly selected components", len(names))
    else:
        names = [
            record["tagName"]
            for record in provider.get_features(kind=ELEMENT_KIND)
            if record.get("tagName")
        ]
        logger.debug("Discovered %d components", len(names))

    if not names:
        raise EmptySelectionError("Unknown list of components to reactify.")
    return names


def get_component_analysis(provider: MetadataProvider, name: str) -> Dict[str, Any]:
    """
    Find the analysis record of a single component.

    Args:
        provider: Metadata provider
        name: Web component name

    Returns:
        The element's analysis record

    Raises:
        NotFoundError: If the provider has no such element
        AmbiguousError: If the provider returned more than one record
    """
    matches = provider.get_features(kind=ELEMENT_KIND, id=name)
    if not matches:
        raise NotFoundError(f"Component {name} couldn't be found.")
    if len(matches) > 1:
        raise AmbiguousError(f"More than one analysis returned for {name}")
    return matches[0]


def collect_components(
    provider: MetadataProvider, names: Sequence[str]
) -> List[ComponentMetadata]:
    """Normalize the analysis of every selected component, in order."""
    components = []
    for name in names:
        record = get_component_analysis(provider, name)
        components.append(convert_analysis_record(record, name))
    return components
