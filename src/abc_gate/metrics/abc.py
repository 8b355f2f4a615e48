"""ABC (Assignment / Branch / Condition) complexity.

Walks a method definition and counts:

    A  assignments: ``x = 1``, ``obj.attr = 1``, ``a, b = pair``, ``x += 1``,
       ``x ||= 1``. Each assignment node counts once.
    B  branches: one for the method's own invocation, plus every call
       (``obj.foo``, ``foo(1)``, ``foo 1``, ``obj&.foo``) and every bare
       identifier that is not a local variable at that point, since Ruby
       resolves those as calls on self.
    C  conditions: if/unless/while/until (and modifier forms), elsif, else,
       when, in, rescue (and rescue modifier), ternaries, and the
       ``&& || and or == != === =~ !~ < <= > >= <=>`` operators.

The score is the Euclidean magnitude sqrt(A² + B² + C²).

Local variables are tracked in source order the way Ruby's parser does:
a name becomes local once it appears as an assignment target, parameter,
block parameter, rescue variable, ``for`` variable or pattern binding.
Blocks and lambdas see the enclosing locals but their own bindings do not
leak out; nested definitions start empty.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import tree_sitter

ASSIGNMENT_TYPES = frozenset({"assignment", "operator_assignment"})

CALL_TYPES = frozenset({"call"})

CONDITION_TYPES = frozenset(
    {
        "if",
        "unless",
        "while",
        "until",
        "if_modifier",
        "unless_modifier",
        "while_modifier",
        "until_modifier",
        "elsif",
        "else",
        "when",
        "in_clause",
        "rescue",
        "rescue_modifier",
        "conditional",
    }
)

CONDITION_OPERATORS = frozenset(
    {"&&", "||", "and", "or", "==", "!=", "===", "=~", "!~", "<", "<=", ">", ">=", "<=>"}
)

# Nodes whose identifier children are all new locals
BINDING_PARENTS = frozenset(
    {
        "method_parameters",
        "lambda_parameters",
        "block_parameters",
        "splat_parameter",
        "hash_splat_parameter",
        "block_parameter",
        "destructured_parameter",
        "left_assignment_list",
        "rest_assignment",
        "destructured_left_assignment",
        "exception_variable",
        "array_pattern",
        "find_pattern",
        "alternative_pattern",
    }
)

# (parent type, field) pairs whose identifier is a new local
BINDING_FIELDS = frozenset(
    {
        ("assignment", "left"),
        ("operator_assignment", "left"),
        ("optional_parameter", "name"),
        ("keyword_parameter", "name"),
        ("for", "pattern"),
        ("in_clause", "pattern"),
        ("as_pattern", "name"),
        ("keyword_pattern", "value"),
    }
)

# (parent type, field) pairs whose identifier names something rather than
# evaluating it
NAME_FIELDS = frozenset(
    {
        ("call", "method"),
        ("method", "name"),
        ("singleton_method", "name"),
        ("singleton_method", "object"),
        ("alias", "name"),
        ("alias", "alias"),
    }
)

# Identifiers under these parents are method names, never calls
NAME_PARENTS = frozenset({"undef"})

CLOSURE_TYPES = frozenset({"block", "do_block", "lambda"})

DEFINITION_TYPES = frozenset({"method", "singleton_method", "class", "module", "singleton_class"})


@dataclass(frozen=True)
class AbcCounts:
    """Assignment, branch and condition tallies for one method."""

    assignments: int = 0
    branches: int = 0
    conditions: int = 0

    @property
    def score(self) -> float:
        return abc_score(self.assignments, self.branches, self.conditions)

    def __str__(self) -> str:
        return f"<{self.assignments}, {self.branches}, {self.conditions}>"


def abc_score(assignments: int, branches: int, conditions: int) -> float:
    """Euclidean magnitude of the ABC vector."""
    return math.sqrt(assignments**2 + branches**2 + conditions**2)


def measure(definition: tree_sitter.Node) -> AbcCounts:
    """Count assignments, branches and conditions in a method definition.

    Args:
        definition: A ``method`` or ``singleton_method`` node

    Returns:
        Frozen counts for the whole definition, parameters included
    """
    assignments = 0
    branches = 1  # the method's own invocation
    conditions = 0

    # (node, parent type, field name in parent, visible locals)
    stack: list[tuple[tree_sitter.Node, str, str | None, set[str]]] = []
    _push_children(stack, definition, set(), skip_fields=("name", "object"))

    while stack:
        node, parent_type, field, local_names = stack.pop()
        kind = node.type

        if kind == "identifier":
            name = _text(node)
            if parent_type in BINDING_PARENTS or (parent_type, field) in BINDING_FIELDS:
                local_names.add(name)
            elif (parent_type, field) in NAME_FIELDS or parent_type in NAME_PARENTS:
                pass
            elif name not in local_names:
                branches += 1
            continue

        if kind in ASSIGNMENT_TYPES:
            assignments += 1
        elif kind in CALL_TYPES:
            # obj.attr = value is an attribute assignment, not a call
            if not (parent_type in ASSIGNMENT_TYPES and field == "left"):
                branches += 1
        elif kind in CONDITION_TYPES:
            conditions += 1
        elif kind == "binary":
            operator = node.child_by_field_name("operator")
            if operator is not None and operator.type in CONDITION_OPERATORS:
                conditions += 1

        if kind in CLOSURE_TYPES:
            child_locals = set(local_names)
        elif kind in DEFINITION_TYPES:
            child_locals = set()
        else:
            child_locals = local_names
        _push_children(stack, node, child_locals)

    return AbcCounts(assignments=assignments, branches=branches, conditions=conditions)


def _push_children(
    stack: list[tuple[tree_sitter.Node, str, str | None, set[str]]],
    node: tree_sitter.Node,
    local_names: set[str],
    skip_fields: tuple[str, ...] = (),
) -> None:
    """Push named children in reverse so they pop in source order."""
    children = []
    for index, child in enumerate(node.children):
        if not child.is_named:
            continue
        field = node.field_name_for_child(index)
        if field in skip_fields:
            continue
        children.append((child, node.type, field, local_names))
    stack.extend(reversed(children))


def _text(node: tree_sitter.Node) -> str:
    return (node.text or b"").decode("utf-8", errors="replace")
