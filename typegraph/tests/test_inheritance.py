import unittest
from contextlib import redirect_stdout
from io import StringIO

from typegraph.core.catalog import build_type_catalog
from typegraph.graph.extractor import AssociationExtractor
from typegraph.graph.heritage import HeritageGraph
from typegraph.graph.inheritance import InheritanceReconciler
from typegraph.tests.fixtures import (
    clazz, interface, file_decl, prop, extends, implements, tid
)


def reconcile(*decls):
    decls = list(decls)
    catalog = build_type_catalog(decls)
    associations = AssociationExtractor(catalog).extract_all(decls)
    flagged = InheritanceReconciler(catalog, associations).reconcile()
    return associations, flagged


class HeritageGraphTests(unittest.TestCase):
    def test_only_catalog_targets_become_edges(self) -> None:
        derived = clazz("Derived", heritage=[
            extends("Derived", "Base"),
            implements("Derived", "Missing"),
        ])
        catalog = build_type_catalog([file_decl(classes=[clazz("Base"), derived])])
        graph = HeritageGraph.from_catalog(catalog)

        self.assertEqual(graph.parents(tid("Derived")), [tid("Base")])
        self.assertEqual(graph.subtypes(tid("Base")), [tid("Derived")])
        self.assertEqual(graph.number_of_clauses(), 1)
        self.assertFalse(graph.has_type(tid("Missing")))
        self.assertTrue(graph.is_acyclic())

    def test_ancestors_are_transitive(self) -> None:
        decl = file_decl(classes=[
            clazz("Base"),
            clazz("Child", heritage=[extends("Child", "Base")]),
            clazz("Grandchild", heritage=[extends("Grandchild", "Child")]),
        ])
        graph = HeritageGraph.from_catalog(build_type_catalog([decl]))

        self.assertEqual(graph.ancestors(tid("Grandchild")), {tid("Child"), tid("Base")})
        self.assertEqual(graph.ancestors("unknown"), set())


class InheritanceReconcilerTests(unittest.TestCase):
    def test_direct_suppression(self) -> None:
        base = clazz("Base", properties=[prop("y", "Y")])
        derived = clazz("Derived", properties=[prop("other", "Y")],
                        heritage=[extends("Derived", "Base")])
        associations, flagged = reconcile(file_decl(classes=[base, derived, clazz("Y")]))

        self.assertEqual(flagged, 1)
        self.assertFalse(associations.get(tid("Base"), tid("Y")).inherited)
        self.assertTrue(associations.get(tid("Derived"), tid("Y")).inherited)

    def test_transitive_suppression(self) -> None:
        decl = file_decl(classes=[
            clazz("Base", properties=[prop("y", "Y")]),
            clazz("Child", heritage=[extends("Child", "Base")]),
            clazz("Grandchild", properties=[prop("y", "Y")],
                  heritage=[extends("Grandchild", "Child")]),
            clazz("Y"),
        ])
        associations, _ = reconcile(decl)

        self.assertTrue(associations.get(tid("Grandchild"), tid("Y")).inherited)
        self.assertFalse(associations.get(tid("Base"), tid("Y")).inherited)
        self.assertIsNone(associations.get(tid("Child"), tid("Y")))

    def test_no_suppression_across_unrelated_types(self) -> None:
        decl = file_decl(classes=[
            clazz("A", properties=[prop("y", "Y")]),
            clazz("B", properties=[prop("y", "Y")]),
            clazz("Y"),
        ])
        associations, flagged = reconcile(decl)

        self.assertEqual(flagged, 0)
        self.assertFalse(any(a.inherited for a in associations))

    def test_interface_chain(self) -> None:
        decl = file_decl(
            classes=[clazz("Impl", properties=[prop("y", "Y")],
                           heritage=[implements("Impl", "Inner")]),
                     clazz("Y")],
            interfaces=[
                interface("Outer", properties=[prop("y", "Y")]),
                interface("Inner", heritage=[extends("Inner", "Outer")]),
            ],
        )
        associations, _ = reconcile(decl)

        self.assertTrue(associations.get(tid("Impl"), tid("Y")).inherited)
        self.assertFalse(associations.get(tid("Outer"), tid("Y")).inherited)

    def test_any_of_several_interfaces(self) -> None:
        decl = file_decl(
            classes=[clazz("Impl", properties=[prop("y", "Y")],
                           heritage=[implements("Impl", "HasY"),
                                     implements("Impl", "Plain")]),
                     clazz("Y")],
            interfaces=[interface("HasY", properties=[prop("y", "Y")]),
                        interface("Plain")],
        )
        associations, _ = reconcile(decl)

        self.assertTrue(associations.get(tid("Impl"), tid("Y")).inherited)

    def test_unresolvable_base_is_skipped(self) -> None:
        derived = clazz("Derived", properties=[prop("y", "Y")],
                        heritage=[extends("Derived", "Component", '"@angular/core".Component')])
        associations, flagged = reconcile(file_decl(classes=[derived, clazz("Y")]))

        self.assertEqual(flagged, 0)
        self.assertFalse(associations.get(tid("Derived"), tid("Y")).inherited)

    def test_cross_file_suppression(self) -> None:
        base = file_decl("src/base.ts", classes=[clazz("Base", properties=[prop("y", "Y")])])
        derived = file_decl("src/derived.ts", classes=[
            clazz("Derived", properties=[prop("y", "Y")],
                  heritage=[extends("Derived", "Base")])
        ])
        associations, _ = reconcile(derived, base, file_decl("src/y.ts", classes=[clazz("Y")]))

        self.assertTrue(associations.get(tid("Derived"), tid("Y")).inherited)

    def test_cyclic_heritage_terminates(self) -> None:
        decl = file_decl(classes=[
            clazz("A", properties=[prop("y", "Y")], heritage=[extends("A", "B")]),
            clazz("B", properties=[prop("y", "Y")], heritage=[extends("B", "A")]),
            clazz("Y"),
        ])

        out = StringIO()
        with redirect_stdout(out):
            associations, flagged = reconcile(decl)

        self.assertEqual(flagged, 2)
        # one line for the A <-> B cycle, although both edges walk it
        self.assertEqual(out.getvalue().count("[WARN] Cyclic heritage"), 1)

    def test_inherited_flag_is_sticky(self) -> None:
        base = clazz("Base", properties=[prop("y", "Y")])
        derived = clazz("Derived", properties=[prop("y", "Y")],
                        heritage=[extends("Derived", "Base")])
        decls = [file_decl(classes=[base, derived, clazz("Y")])]
        catalog = build_type_catalog(decls)
        associations = AssociationExtractor(catalog).extract_all(decls)

        reconciler = InheritanceReconciler(catalog, associations)
        self.assertEqual(reconciler.reconcile(), 1)
        self.assertEqual(reconciler.reconcile(), 0)
        self.assertTrue(associations.get(tid("Derived"), tid("Y")).inherited)


if __name__ == "__main__":
    unittest.main()
