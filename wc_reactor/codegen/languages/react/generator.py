"""
React wrapper generator implementation.

Generates React class components that wrap Polymer web components: props
are copied onto the element, element events are forwarded to ``on*``
callbacks and the element's public API is exposed on the wrapper.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import CaseMap
from ...core.schema import ComponentMetadata, MemberKind


class ReactGenerator(CodeGenerator):
    """Code generator for React class components wrapping web components."""

    def __init__(
        self, config: Optional[GeneratorConfig] = None, case_map: CaseMap = None
    ):
        """
        Initialize React generator.

        Args:
            config: Generator configuration
            case_map: Case converter to share its cache with other generators
        """
        super().__init__(config)
        self.case_map = case_map or CaseMap()

    @property
    def language_name(self) -> str:
        """Return the target component model."""
        return "react"

    @property
    def file_extension(self) -> str:
        """Return JavaScript file extension."""
        return ".js"

    def get_template_directory(self) -> Path:
        """Return the React templates directory."""
        return Path(__file__).parent / "templates"

    def generate_single_component(self, component: ComponentMetadata) -> str:
        """Generate the complete React class declaration for a component."""
        parts = [
            self.render_class_header(component.name),
            self.render_constructor(component),
            self.render_mount_callback(component),
            self.render_unmount_callback(component),
            self.render_update_callback(component),
            self.render_event_handlers(component),
            self.render_api(component),
            self.render_render_method(component.name),
            "}",
        ]
        return "".join(parts)

    # Naming

    def class_name(self, name: str) -> str:
        """React class name for a web component name (``paper-input`` -> ``PaperInput``)."""
        return self.case_map.dash_to_camel(name, True)

    def local_event_name(self, name: str) -> str:
        """Name of the bound handler method for an element event."""
        return "_" + self.case_map.dash_to_camel(name, False) + "Event"

    def prop_event_name(self, name: str) -> str:
        """Name of the React callback prop for an element event."""
        return "on" + self.case_map.dash_to_camel(name, True)

    # Class sections

    def render_class_header(self, name: str) -> str:
        """Render the class declaration line.

        Bundles export every class by name; a module per component exports
        its class as the default.
        """
        return self.render_template(
            "class_header.js.j2",
            {
                "class_name": self.class_name(name),
                "export_default": not self.config.bundle,
            },
        )

    def render_constructor(self, component: ComponentMetadata) -> str:
        """Render the constructor binding every event handler to the instance."""
        return self.render_template(
            "constructor.js.j2", {"events": self._events_context(component)}
        )

    def render_mount_callback(self, component: ComponentMetadata) -> str:
        """Render ``componentDidMount()``: listeners and initial property values."""
        return self.render_template(
            "mount_callback.js.j2",
            {
                "events": self._events_context(component),
                "properties": component.bindable_properties,
            },
        )

    def render_unmount_callback(self, component: ComponentMetadata) -> str:
        """Render ``componentWillUnmount()`` removing the listeners added on mount."""
        return self.render_template(
            "unmount_callback.js.j2", {"events": self._events_context(component)}
        )

    def render_update_callback(self, component: ComponentMetadata) -> str:
        """Render ``componentDidUpdate()`` pushing changed props to the element."""
        return self.render_template(
            "update_callback.js.j2", {"properties": component.bindable_properties}
        )

    def render_event_handlers(self, component: ComponentMetadata) -> str:
        """Render one handler per event, calling ``on<Event>(detail, event)``."""
        return self.render_template(
            "event_handlers.js.j2", {"events": self._events_context(component)}
        )

    def render_api(self, component: ComponentMetadata) -> str:
        """Render getters and forwarding methods for the element's public API."""
        return self.render_template(
            "api.js.j2", {"members": self._api_context(component)}
        )

    def render_render_method(self, name: str) -> str:
        """Render ``render()`` placing the element and keeping a reference to it."""
        return self.render_template("render.js.j2", {"tag_name": name})

    # Module level declarations

    def render_file_header(self) -> str:
        """Return the React import opening every generated module."""
        return self.render_template("file_header.js.j2", {})

    def render_index_file(self, class_name: str) -> str:
        """
        Generate the content of a component's ``index.js``.

        Args:
            class_name: React component name

        Returns:
            Module re-exporting the component as default
        """
        return self.render_template("index.js.j2", {"class_name": class_name})

    def render_helpers(self) -> str:
        """Return the polyfill and import helpers. The text never changes."""
        return self.render_template("helpers.js.j2", {})

    # Template contexts

    def _events_context(self, component: ComponentMetadata) -> List[Dict[str, str]]:
        return [
            {
                "name": event.name,
                "handler": self.local_event_name(event.name),
                "callback": self.prop_event_name(event.name),
            }
            for event in component.events
        ]

    def _api_context(self, component: ComponentMetadata) -> List[Dict[str, Any]]:
        members = []

        for prop in component.properties:
            if prop.is_function and not prop.reserved:
                members.append({"name": prop.name, "getter": True})

        for method in component.methods:
            if not method.is_exposed:
                continue
            if method.kind is MemberKind.FUNCTION:
                members.append(
                    {"name": method.name, "getter": False, "params": method.params}
                )
            elif method.kind is MemberKind.ACCESSOR:
                members.append({"name": method.name, "getter": True})

        return members


def create_react_generator(bundle: bool = False, **kwargs) -> ReactGenerator:
    """Create a React generator for the given output layout."""
    return ReactGenerator(GeneratorConfig(bundle=bundle, **kwargs))
