"""Method extraction: finds every method definition in a Ruby syntax tree.

Each definition becomes a MethodUnit carrying its qualified name (the
enclosing class/module names and the bare method identifier joined by
" > "), the definition node to measure, and the line it starts on.

Instance methods (``def foo``) and singleton methods (``def self.foo``) get
the same qualified-name form; only the exclusion key tells them apart.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import tree_sitter

SCOPE_SEPARATOR = " > "

METHOD_TYPES = frozenset({"method", "singleton_method"})
SCOPE_TYPES = frozenset({"class", "module"})
SINGLETON_SCOPE_TYPES = frozenset({"singleton_class"})

# Children of a class/module that belong to the outer scope
_HEADER_FIELDS = frozenset({"name", "superclass"})


@dataclass(frozen=True)
class MethodUnit:
    """One discovered method.

    Attributes:
        name: Bare method identifier, spelled as in the source
        scope: Enclosing class/module names, outermost first
        singleton: True for ``def self.x`` and methods inside ``class << self``
        position: 1-based line of the ``def`` keyword
        node: Definition node measured by the ABC calculator
    """

    name: str
    scope: tuple[str, ...]
    singleton: bool
    position: int
    node: tree_sitter.Node = field(compare=False, repr=False)

    @property
    def qualified_name(self) -> str:
        return SCOPE_SEPARATOR.join(self.scope + (self.name,))

    @property
    def exclusion_key(self) -> str:
        """``Outer::Inner#name`` for instance methods, ``Outer::Inner.name``
        for singleton methods."""
        separator = "." if self.singleton else "#"
        return f"{'::'.join(self.scope)}{separator}{self.name}"


def extract_methods(tree: tree_sitter.Tree) -> list[MethodUnit]:
    """Return every method definition in the tree, in source order.

    Method bodies are not searched for further definitions: a ``def`` nested
    inside another method is measured as part of the outer method.
    """
    methods: list[MethodUnit] = []

    # (node, enclosing scope, inside class << self)
    stack: list[tuple[tree_sitter.Node, tuple[str, ...], bool]] = [
        (tree.root_node, (), False)
    ]
    while stack:
        node, scope, singleton = stack.pop()

        if node.type in METHOD_TYPES:
            methods.append(_method_unit(node, scope, singleton))
            continue

        inner_scope, inner_singleton = scope, singleton
        if node.type in SCOPE_TYPES:
            name_node = node.child_by_field_name("name")
            if name_node is not None:
                inner_scope = scope + (_text(name_node),)
            inner_singleton = False
        elif node.type in SINGLETON_SCOPE_TYPES:
            inner_singleton = True

        children = []
        for index, child in enumerate(node.children):
            if not child.is_named:
                continue
            if node.type in SCOPE_TYPES and node.field_name_for_child(index) in _HEADER_FIELDS:
                children.append((child, scope, singleton))
            else:
                children.append((child, inner_scope, inner_singleton))
        stack.extend(reversed(children))

    return methods


def _method_unit(node: tree_sitter.Node, scope: tuple[str, ...], singleton: bool) -> MethodUnit:
    name_node = node.child_by_field_name("name")
    name = _text(name_node) if name_node is not None else ""
    return MethodUnit(
        name=name,
        scope=scope,
        singleton=singleton or node.type == "singleton_method",
        position=node.start_point[0] + 1,
        node=node,
    )


def _text(node: tree_sitter.Node) -> str:
    return (node.text or b"").decode("utf-8", errors="replace")
