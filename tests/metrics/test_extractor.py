"""Tests for method extraction and qualified names."""

from abc_gate.metrics.extractor import SCOPE_SEPARATOR, MethodUnit, extract_methods


def _names(tree):
    return [m.qualified_name for m in extract_methods(tree)]


class TestQualifiedNames:
    def test_top_level_method(self, parse):
        """A method outside any class is named by its identifier alone."""
        assert _names(parse("def helper\n  1\nend\n")) == ["helper"]

    def test_instance_method(self, parse):
        tree = parse(
            """
            class Harness
              def run
              end
            end
            """
        )
        assert _names(tree) == ["Harness > run"]

    def test_nested_scopes(self, parse):
        """Modules and classes join outermost first."""
        tree = parse(
            """
            module Outer
              class Inner
                def deep
                end
              end
            end
            """
        )
        assert _names(tree) == ["Outer > Inner > deep"]

    def test_scope_popped_after_nested_class(self, parse):
        """A method after a nested class belongs to the outer class only."""
        tree = parse(
            """
            class A
              class B
                def b
                end
              end

              def a
              end
            end

            class C
              def c
              end
            end
            """
        )
        assert _names(tree) == ["A > B > b", "A > a", "C > c"]

    def test_scope_resolution_class_name(self, parse):
        """`class Foo::Bar` keeps its literal name."""
        tree = parse(
            """
            class Foo::Bar
              def baz
              end
            end
            """
        )
        assert _names(tree) == ["Foo::Bar > baz"]

    def test_separator(self):
        assert SCOPE_SEPARATOR == " > "


class TestSingletonMethods:
    def test_self_method_has_plain_name(self, parse):
        """`def self.x` is named like an instance method."""
        tree = parse(
            """
            class Harness
              def self.build(a)
                a
              end
            end
            """
        )
        (method,) = extract_methods(tree)
        assert method.qualified_name == "Harness > build"
        assert method.singleton is True
        assert method.exclusion_key == "Harness.build"

    def test_class_shovel_self(self, parse):
        """Methods in `class << self` stay in the enclosing scope."""
        tree = parse(
            """
            class Harness
              class << self
                def build
                end
              end

              def run
              end
            end
            """
        )
        methods = extract_methods(tree)
        assert [m.qualified_name for m in methods] == ["Harness > build", "Harness > run"]
        assert [m.singleton for m in methods] == [True, False]

    def test_instance_exclusion_key(self, parse):
        tree = parse(
            """
            module Outer
              class Inner
                def run
                end
              end
            end
            """
        )
        (method,) = extract_methods(tree)
        assert method.exclusion_key == "Outer::Inner#run"


class TestMethodIdentifiers:
    def _single(self, parse, header):
        tree = parse(f"class Harness\n  def {header}(a)\n    a\n  end\nend\n")
        (method,) = extract_methods(tree)
        return method

    def test_keyword_name(self, parse):
        assert self._single(parse, "next").qualified_name == "Harness > next"

    def test_constant_name(self, parse):
        assert self._single(parse, "GET").qualified_name == "Harness > GET"

    def test_backtick_name(self, parse):
        assert self._single(parse, "`").qualified_name == "Harness > `"

    def test_predicate_name(self, parse):
        assert self._single(parse, "valid?").name == "valid?"

    def test_operator_name(self, parse):
        assert self._single(parse, "==").name == "=="


class TestTraversal:
    def test_source_order(self, parse):
        tree = parse(
            """
            class Harness
              def b
              end

              def a
              end
            end
            """
        )
        assert [m.name for m in extract_methods(tree)] == ["b", "a"]

    def test_positions_are_line_numbers(self, parse):
        """Position is the 1-based line of `def`."""
        tree = parse(
            """\
            class Harness
              def first
                1
              end

              def second
                2
              end
            end
            """
        )
        assert [m.position for m in extract_methods(tree)] == [2, 6]

    def test_methods_inside_blocks(self, parse):
        """Definitions inside blocks are found in the enclosing scope."""
        tree = parse(
            """
            module Concern
              included do
                def helper
                end
              end
            end
            """
        )
        assert _names(tree) == ["Concern > helper"]

    def test_nested_def_belongs_to_outer_method(self, parse):
        """A def inside a method body is not extracted separately."""
        tree = parse(
            """
            class Harness
              def outer
                def inner
                end
              end
            end
            """
        )
        assert _names(tree) == ["Harness > outer"]

    def test_no_methods(self, parse):
        assert extract_methods(parse("x = 1\n")) == []

    def test_units_compare_by_identity_fields(self, parse):
        """Re-extracting the same source gives equal units."""
        source = "class Harness\n  def run\n  end\nend\n"
        first = extract_methods(parse(source))
        second = extract_methods(parse(source))
        assert first == second
        assert isinstance(first[0], MethodUnit)
