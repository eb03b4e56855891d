"""
Core component representation for code generation.

Converts raw Polymer analysis records into a normalized, immutable format
the generators can work with consistently. Privacy, member kind and
reserved-name membership are decided here, once, so the emitter only reads
flags.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from enum import Enum


# Properties and methods every Polymer element inherits from its base class.
# They are never proxied into the wrapper.
POLYMER_PROPERTIES = frozenset({"$", "rootPath", "importPath", "root"})

POLYMER_METHODS = frozenset(
    {
        "attributeChangedCallback",
        "setProperties",
        "linkPaths",
        "unlinkPaths",
        "notifySplices",
        "get",
        "set",
        "push",
        "pop",
        "splice",
        "shift",
        "unshift",
        "notifyPath",
        "connectedCallback",
        "disconnectedCallback",
        "updateStyles",
        "resolveUrl",
    }
)

FUNCTION_TYPE = "Function"


class Privacy(Enum):
    """Visibility of a component member."""

    PUBLIC = "public"
    NON_PUBLIC = "non-public"

    @classmethod
    def from_value(cls, value: Any) -> "Privacy":
        """Only the literal ``"public"`` is public."""
        return cls.PUBLIC if value == "public" else cls.NON_PUBLIC


class MemberKind(Enum):
    """What a property or method declaration stands for."""

    FUNCTION = "function"
    ACCESSOR = "accessor"  # non-function member declared as a property
    OTHER = "other"


@dataclass(frozen=True)
class EventDescriptor:
    """An event fired by the component, by its dash-case name."""

    name: str


@dataclass(frozen=True)
class ParameterDescriptor:
    """A declared method parameter."""

    name: str


@dataclass(frozen=True)
class PropertyDescriptor:
    """A declared component property."""

    name: str
    type: Optional[str] = None
    privacy: Privacy = Privacy.NON_PUBLIC
    read_only: bool = False
    kind: MemberKind = MemberKind.OTHER
    reserved: bool = False

    @property
    def is_bindable(self) -> bool:
        """Whether a React prop is copied onto the element for this property."""
        return (
            self.privacy is Privacy.PUBLIC
            and self.kind is not MemberKind.FUNCTION
            and not self.read_only
            and not self.reserved
        )

    @property
    def is_function(self) -> bool:
        return self.kind is MemberKind.FUNCTION


@dataclass(frozen=True)
class MethodDescriptor:
    """A declared component method."""

    name: str
    type: Optional[str] = FUNCTION_TYPE
    privacy: Privacy = Privacy.NON_PUBLIC
    kind: MemberKind = MemberKind.FUNCTION
    params: Tuple[ParameterDescriptor, ...] = ()
    reserved: bool = False

    @property
    def is_exposed(self) -> bool:
        """Whether the wrapper forwards this member to the element."""
        return self.privacy is Privacy.PUBLIC and not self.reserved


@dataclass(frozen=True)
class ComponentMetadata:
    """Normalized public surface of one web component.

    ``events``, ``properties`` and ``methods`` keep the order in which the
    metadata provider reported them. Generated code follows that order.
    """

    name: str
    events: Tuple[EventDescriptor, ...] = ()
    properties: Tuple[PropertyDescriptor, ...] = ()
    methods: Tuple[MethodDescriptor, ...] = ()

    def get_property(self, name: str) -> Optional[PropertyDescriptor]:
        """Get property by name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def get_method(self, name: str) -> Optional[MethodDescriptor]:
        """Get method by name."""
        for method in self.methods:
            if method.name == name:
                return method
        return None

    @property
    def bindable_properties(self) -> List[PropertyDescriptor]:
        """Properties synchronized from React props, in declaration order."""
        return [prop for prop in self.properties if prop.is_bindable]


RawMembers = Union[Mapping[str, Mapping[str, Any]], Iterable[Mapping[str, Any]], None]


def _iter_members(members: RawMembers) -> List[Mapping[str, Any]]:
    """Return raw member records in order, from a list or a name-keyed mapping."""
    if not members:
        return []
    if isinstance(members, Mapping):
        records = []
        for key, value in members.items():
            if "name" not in value:
                value = {**value, "name": key}
            records.append(value)
        return records
    return list(members)


def _unique_by_name(records: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Drop nameless records; a later duplicate replaces the earlier one in place."""
    by_name: Dict[str, Mapping[str, Any]] = {}
    for record in records:
        name = record.get("name")
        if name:
            by_name[name] = record
    return list(by_name.values())


def _is_read_only(record: Mapping[str, Any]) -> bool:
    if record.get("readOnly"):
        return True
    polymer = (record.get("metadata") or {}).get("polymer") or {}
    return bool(polymer.get("readOnly"))


def _member_kind(record: Mapping[str, Any], member_type: Optional[str]) -> MemberKind:
    if member_type == FUNCTION_TYPE:
        return MemberKind.FUNCTION
    if record.get("accessor") or record.get("astNodeType") == "Property":
        return MemberKind.ACCESSOR
    return MemberKind.OTHER


def convert_event(record: Mapping[str, Any]) -> EventDescriptor:
    """Convert a raw event record."""
    return EventDescriptor(name=record["name"])


def convert_property(record: Mapping[str, Any]) -> PropertyDescriptor:
    """Convert a raw property record."""
    prop_type = record.get("type")
    return PropertyDescriptor(
        name=record["name"],
        type=prop_type,
        privacy=Privacy.from_value(record.get("privacy")),
        read_only=_is_read_only(record),
        kind=MemberKind.FUNCTION if prop_type == FUNCTION_TYPE else MemberKind.OTHER,
        reserved=record["name"] in POLYMER_PROPERTIES,
    )


def convert_method(record: Mapping[str, Any]) -> MethodDescriptor:
    """Convert a raw method record.

    Analysis documents only list callables under ``methods``, so a missing
    type means ``Function``.
    """
    method_type = record.get("type", FUNCTION_TYPE)
    params = tuple(
        ParameterDescriptor(name=param["name"])
        for param in record.get("params") or ()
    )
    return MethodDescriptor(
        name=record["name"],
        type=method_type,
        privacy=Privacy.from_value(record.get("privacy")),
        kind=_member_kind(record, method_type),
        params=params,
        reserved=record["name"] in POLYMER_METHODS,
    )


def convert_analysis_record(record: Mapping[str, Any], name: str) -> ComponentMetadata:
    """
    Convert a Polymer element analysis record to ComponentMetadata.

    Args:
        record: Raw element record from the metadata provider
        name: Component (tag) name to stamp on the result

    Returns:
        ComponentMetadata: Normalized component description

    Raises:
        ValueError: If the component name is empty
    """
    if not name:
        raise ValueError("Component name must not be empty")

    events = tuple(convert_event(event) for event in _iter_members(record.get("events")))
    properties = tuple(
        convert_property(prop)
        for prop in _unique_by_name(_iter_members(record.get("properties")))
    )
    methods = tuple(
        convert_method(method)
        for method in _unique_by_name(_iter_members(record.get("methods")))
    )

    return ComponentMetadata(
        name=name, events=events, properties=properties, methods=methods
    )
