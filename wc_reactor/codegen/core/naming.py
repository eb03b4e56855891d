"""
Naming utilities for wrapper code generation.

Converts web component identifiers (dash-case tag and event names) into
the camelCase and PascalCase identifiers used by the generated React code,
and back.
"""

import re
from typing import Dict, Tuple, Union

DASH_TO_CAMEL_RE = re.compile(r"-[a-z]")
CAMEL_TO_DASH_RE = re.compile(r"([A-Z])")

CacheKey = Union[Tuple[str, str], Tuple[str, str, bool]]


class CaseMap:
    """Replaces dashes with camel case and back.

    Every conversion is memoized. Cache keys carry the operation and the
    ``upper_first`` flag, so ``dash_to_camel("a-b")`` and
    ``dash_to_camel("a-b", upper_first=True)`` never share an entry.
    Entries are written once and never invalidated.
    """

    def __init__(self):
        """Initialize an empty conversion cache."""
        self._case_map: Dict[CacheKey, str] = {}

    def dash_to_camel(self, dash: str, upper_first: bool = False) -> str:
        """
        Replace dashes with a camel case word.

        For example ``raml-request-panel`` becomes ``ramlRequestPanel``, or
        ``RamlRequestPanel`` when ``upper_first`` is set. Only a dash
        followed by a lowercase letter is folded; any other character is
        left as it is.

        Args:
            dash: Word to translate
            upper_first: Upper-case the first letter of the result

        Returns:
            Camel cased word
        """
        cache_key = ("dash_to_camel", dash, bool(upper_first))
        if cache_key in self._case_map:
            return self._case_map[cache_key]

        if "-" not in dash:
            result = dash
        else:
            result = DASH_TO_CAMEL_RE.sub(lambda m: m.group(0)[1].upper(), dash)

        if upper_first and result:
            result = result[0].upper() + result[1:]

        self._case_map[cache_key] = result
        return result

    def camel_to_dash(self, camel: str) -> str:
        """
        Replace camel case with dashes.

        A dash is inserted before every upper-case letter and the whole word
        is lower-cased, so ``camelCCase`` becomes ``camel-c-case``.

        Args:
            camel: Word to translate

        Returns:
            Dash cased word
        """
        cache_key = ("camel_to_dash", camel)
        if cache_key in self._case_map:
            return self._case_map[cache_key]

        result = CAMEL_TO_DASH_RE.sub(r"-\1", camel).lower()
        self._case_map[cache_key] = result
        return result

    def __len__(self) -> int:
        return len(self._case_map)


# Shared converter for callers that do not own one
_default_case_map = None


def get_case_map() -> CaseMap:
    """Get the shared case map instance."""
    global _default_case_map
    if _default_case_map is None:
        _default_case_map = CaseMap()
    return _default_case_map


def to_snake_key(name: str) -> str:
    """Convert a camelCase option key (``bundleName``) to ``bundle_name``."""
    return get_case_map().camel_to_dash(name).replace("-", "_")
