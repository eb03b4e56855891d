"""
React wrapper generator module.

Generates React class components around Polymer web components.
"""

from .generator import ReactGenerator, create_react_generator

__all__ = [
    "ReactGenerator",
    "create_react_generator",
]
