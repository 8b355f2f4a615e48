"""Tree-sitter parser wrapper for Ruby.

tree-sitter never rejects input outright: invalid source produces a tree
with ERROR and MISSING nodes. This module turns such trees into a
ParsingError so callers only ever see well-formed trees.

Usage:
    tree = parse_source(text)
    root = tree.root_node
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

import tree_sitter
import tree_sitter_ruby

from ..exceptions import ParsingError


@lru_cache(maxsize=1)
def ruby_language() -> tree_sitter.Language:
    """Return the Ruby grammar, built once per process."""
    return tree_sitter.Language(tree_sitter_ruby.language())


class RubyParser:
    """Parses Ruby source into tree-sitter trees.

    tree_sitter.Parser objects are not safe to share across threads, so each
    RubyParser owns its own; create one per worker.
    """

    def __init__(self) -> None:
        self._parser = tree_sitter.Parser(ruby_language())

    def parse(self, text: str) -> tree_sitter.Tree:
        """Parse source text.

        Args:
            text: Ruby source code

        Returns:
            Syntax tree without error nodes

        Raises:
            ParsingError: If the source is not valid Ruby
        """
        tree = self._parser.parse(text.encode("utf-8", errors="replace"))
        root = tree.root_node
        if root.has_error:
            raise _describe_error(root)
        return tree


def parse_source(text: str) -> tree_sitter.Tree:
    """Parse Ruby source with a fresh parser. See RubyParser.parse."""
    return RubyParser().parse(text)


def _first_error_node(root: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    """Find the first ERROR or MISSING node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    return None


def _describe_error(root: tree_sitter.Node) -> ParsingError:
    node = _first_error_node(root)
    if node is None:
        return ParsingError("syntax error")

    line = node.start_point[0] + 1
    column = node.start_point[1] + 1

    if node.is_missing:
        reason = f"missing '{node.type}' at line {line}, column {column}"
    else:
        snippet = (node.text or b"").decode("utf-8", errors="replace").strip()
        snippet = snippet.splitlines()[0] if snippet else ""
        if len(snippet) > 40:
            snippet = snippet[:37] + "..."
        if snippet:
            reason = f"unexpected '{snippet}' at line {line}, column {column}"
        else:
            reason = f"syntax error at line {line}, column {column}"
    return ParsingError(reason, line=line, column=column)
