"""
The node type of a markup document tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Element:
    """
    A markup element, like `<div class="note"><br/></div>`.

    Not built by any parser in this package yet.
    """

    name: str
    attributes: list[tuple[str, str]] = field(default_factory=list)
    """Name and value pairs, in source order."""
    children: list[Element] = field(default_factory=list)
