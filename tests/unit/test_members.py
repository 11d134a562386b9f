"""
Unit tests for constructors, methods and inheritance clauses.
"""

import pytest

from classgen.codegen.core.exceptions import ConfigurationError
from classgen.codegen.core.schema import (
    AnnotationSpec,
    AttributeSpec,
    ClassSchema,
    DefaultConstructorSpec,
    MethodSpec,
    ParameterSpec,
)
from classgen.codegen.languages.java.constructors import format_constructors
from classgen.codegen.languages.java.methods import format_method, format_methods
from classgen.codegen.languages.java.relationships import format_relationships


class TestConstructors:
    """Test constructor rendering."""

    def test_all_args(self, context, age_attribute):
        """Every attribute becomes a parameter assigned to this."""
        schema = ClassSchema(
            name="Person", attributes=[age_attribute], all_args_constructor=True
        )

        assert format_constructors(schema, context) == (
            "    public Person(int age) {\n"
            "        this.age = age;\n"
            "    }"
        )

    def test_all_args_registers_imports(self, context):
        """Parameter types are imported."""
        schema = ClassSchema(
            name="Person",
            package="com.acme.model",
            attributes=[AttributeSpec(name="birth", type="java.time.LocalDate")],
            all_args_constructor=True,
        )
        text = format_constructors(schema, context)

        assert "public Person(LocalDate birth) {" in text
        assert "java.time.LocalDate" in context.imports

    def test_no_args_uses_default_content(self, context):
        """The no-args constructor wraps the configured body."""
        schema = ClassSchema(
            name="Person",
            constructor_no_args=True,
            default_constructor=DefaultConstructorSpec(content="super();"),
        )

        assert format_constructors(schema, context) == (
            "    public Person() {\n"
            "        super();\n"
            "    }"
        )

    def test_no_args_empty_body(self, context):
        """An empty body renders just the braces."""
        schema = ClassSchema(name="Person", constructor_no_args=True)

        assert format_constructors(schema, context) == (
            "    public Person() {\n    }"
        )

    def test_both_constructors(self, context, age_attribute):
        """Both constructors are emitted, separated by a blank line."""
        schema = ClassSchema(
            name="Person",
            attributes=[age_attribute],
            constructor_no_args=True,
            all_args_constructor=True,
        )
        text = format_constructors(schema, context)

        assert text.index("public Person() {") < text.index("public Person(int age) {")
        assert "    }\n\n    public Person(int age)" in text

    def test_none_requested(self, context):
        """Nothing requested renders nothing, even without a name."""
        assert format_constructors(ClassSchema(), context) == ""

    def test_missing_name(self, context):
        """A constructor without a class name is a configuration error."""
        schema = ClassSchema(constructor_no_args=True)

        with pytest.raises(ConfigurationError, match="name of class required"):
            format_constructors(schema, context)


class TestMethods:
    """Test method rendering."""

    def test_simple_method(self, context):
        """Signature and body are rendered."""
        spec = MethodSpec(
            name="greet",
            return_type="java.lang.String",
            parameters=[ParameterSpec(type="java.lang.String", name="who")],
            content='return "Hello " + who;',
        )

        assert format_method(spec, context) == (
            "    public String greet(String who) {\n"
            '        return "Hello " + who;\n'
            "    }"
        )
        assert list(context.imports) == ["java.lang.String"]

    def test_throws_clause(self, context):
        """A thrown type adds a throws clause and an import."""
        spec = MethodSpec(
            name="load",
            throws="java.io.IOException",
            parameters=[
                ParameterSpec(type="java.nio.file.Path", name="path"),
                ParameterSpec(type="int", name="retries"),
            ],
        )
        text = format_method(spec, context)

        assert "public void load(Path path, int retries) throws IOException {" in text
        assert list(context.imports) == ["java.nio.file.Path", "java.io.IOException"]

    def test_annotations_and_javadoc(self, context):
        """Javadoc precedes annotations which precede the signature."""
        spec = MethodSpec(
            name="run",
            annotations=[AnnotationSpec(name="org.junit.Test")],
            javadoc="Runs it.",
            content="doWork();",
        )

        assert format_method(spec, context) == (
            "    /**\n"
            "     * Runs it.\n"
            "     */\n"
            "    @Test\n"
            "    public void run() {\n"
            "        doWork();\n"
            "    }"
        )

    def test_content_is_verbatim(self, context):
        """Body text is not reformatted."""
        content = "if (x) {\n            y();\n        }"
        spec = MethodSpec(name="check", content=content)

        assert f"        {content}\n    }}" in format_method(spec, context)

    def test_generic_return_type(self, context):
        """Generic return types print only the outer type."""
        spec = MethodSpec(name="items", return_type="java.util.List<com.acme.model.Item>")

        assert "public List items() {" in format_method(spec, context)
        assert list(context.imports) == ["java.util.List"]

    def test_methods_joined_by_blank_line(self, context):
        """Each method is separated by a blank line."""
        methods = [MethodSpec(name="a"), MethodSpec(name="b")]

        assert format_methods(methods, context) == (
            "    public void a() {\n    }\n\n    public void b() {\n    }"
        )

    def test_idempotent(self):
        """Same input and a fresh context give identical output."""
        from classgen.codegen.core.context import GenerationContext

        spec = MethodSpec(name="a", return_type="java.util.Date")
        first = format_method(spec, GenerationContext())
        second = format_method(spec, GenerationContext())

        assert first == second


class TestRelationships:
    """Test extends and implements clauses."""

    def test_interfaces_only(self, context):
        """No supertype means an empty extends clause."""
        result = format_relationships([], ["a.b.Printable"], context)

        assert result.extends_clause == ""
        assert result.implements_clause == "implements Printable"
        assert "a.b.Printable" in context.imports

    def test_extends_and_implements(self, context):
        """Both clauses list simple names."""
        result = format_relationships(
            ["com.acme.base.Entity"],
            ["java.io.Serializable", "java.lang.Comparable<Person>"],
            context,
        )

        assert result.extends_clause == "extends Entity"
        assert result.implements_clause == "implements Serializable, Comparable"
        assert list(context.imports) == [
            "com.acme.base.Entity",
            "java.io.Serializable",
            "java.lang.Comparable",
        ]

    def test_empty(self, context):
        """No relationships render nothing."""
        result = format_relationships([], [], context)

        assert (result.extends_clause, result.implements_clause) == ("", "")
