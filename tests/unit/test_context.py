"""
Unit tests for the import registry and generation context.
"""

from classgen.codegen.core.context import GenerationContext, ImportCollector


class TestImportCollector:
    """Test import registration rules."""

    def test_register_deduplicates(self):
        """Registering the same artifact many times yields one import."""
        imports = ImportCollector()
        for _ in range(5):
            imports.register("java.util.List", "com.acme")

        assert imports.render_all() == "import java.util.List;"

    def test_same_package_is_skipped(self):
        """Types from the owning package are never imported."""
        imports = ImportCollector()
        assert imports.register("com.acme.Address", "com.acme") is False
        assert len(imports) == 0

    def test_subpackage_is_imported(self):
        """A nested package is a different package."""
        imports = ImportCollector()
        assert imports.register("com.acme.sub.Address", "com.acme") is True

    def test_unqualified_is_skipped(self):
        """Primitives and unqualified names are ignored."""
        imports = ImportCollector()
        imports.register("int", "com.acme")
        imports.register("Object", "com.acme")
        imports.register("", "com.acme")
        imports.register(None, "com.acme")

        assert imports.render_all() == ""

    def test_generic_is_stripped(self):
        """Only the outer type of a generic is imported."""
        imports = ImportCollector()
        imports.register("a.b.List<a.b.Item>", "com.acme")

        assert list(imports) == ["a.b.List"]

    def test_generic_same_package_is_skipped(self):
        """Package comparison uses the stripped type."""
        imports = ImportCollector()
        imports.register("a.b.List<x.y.Item>", "a.b")

        assert len(imports) == 0

    def test_unqualified_generic_is_skipped(self):
        """A dot inside the generic argument doesn't qualify the outer type."""
        imports = ImportCollector()
        imports.register("List<a.b.Item>", "com.acme")

        assert len(imports) == 0

    def test_insertion_order(self):
        """Imports render in registration order by default."""
        imports = ImportCollector()
        imports.register("java.util.Objects", "")
        imports.register("java.math.BigDecimal", "")

        assert imports.render_all() == (
            "import java.util.Objects;\nimport java.math.BigDecimal;"
        )

    def test_sorted_order(self):
        """Imports can be rendered sorted."""
        imports = ImportCollector()
        imports.register("java.util.Objects", "")
        imports.register("java.math.BigDecimal", "")

        assert imports.render_all(sort=True) == (
            "import java.math.BigDecimal;\nimport java.util.Objects;"
        )


class TestGenerationContext:
    """Test the per-call context."""

    def test_add_import_uses_context_package(self):
        """add_import compares against the context package."""
        context = GenerationContext(package="com.acme")
        assert context.add_import("com.acme.Address") is False
        assert context.add_import("java.time.LocalDate") is True
        assert "java.time.LocalDate" in context.imports

    def test_contexts_do_not_share_imports(self):
        """Each context owns a fresh registry."""
        first = GenerationContext(package="com.acme")
        second = GenerationContext(package="com.acme")
        first.add_import("java.util.List")

        assert len(second.imports) == 0

    def test_indented(self):
        """Lines are prefixed with the indentation unit."""
        context = GenerationContext(indent="  ")
        assert context.indented("x;", 2) == "    x;"
