"""Turn node trees into HTML strings."""

from __future__ import annotations

import logging
from typing import Optional

from .dom import Document, SerializationError
from .models import RenderOptions
from .nodes import Node

logger = logging.getLogger(__name__)


class Renderer:
    """Render nodes to HTML through a fresh `Document` per run.

    Structural errors raised while building the tree propagate. A tree that
    exhausts the recursion limit while building, or that cannot be
    serialized, renders as an empty string.
    """

    def __init__(self, options: Optional[RenderOptions] = None) -> None:
        self.options = options.model_copy() if options is not None else RenderOptions()

    def format_output(self, enabled: bool = True) -> Renderer:
        """Enable or disable indentation and newlines in the output."""
        self.options.format_output = enabled
        return self

    def run(self, node: Node) -> str:
        document = Document()
        try:
            native = document.adopt(node.to_dom(document))
        except RecursionError:
            logger.warning("%r is nested too deeply to build; rendering an empty string", node)
            return ""
        logger.debug("rendering %r (format_output=%s)", node, self.options.format_output)
        try:
            return document.serialize(
                native,
                pretty=self.options.format_output,
                indent=self.options.indent,
            )
        except SerializationError:
            logger.warning("could not serialize %r; rendering an empty string", node, exc_info=True)
            return ""

    @staticmethod
    def build(node: Node, format_output: bool = False) -> str:
        """Render `node` in one call."""
        return Renderer().format_output(format_output).run(node)


__all__ = ["Renderer"]
