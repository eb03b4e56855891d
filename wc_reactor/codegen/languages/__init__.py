"""
Target component model generators.

This module contains generators for the component models a web component
can be wrapped into.
"""

from .react import ReactGenerator, create_react_generator

__all__ = [
    "ReactGenerator",
    "create_react_generator",
]
