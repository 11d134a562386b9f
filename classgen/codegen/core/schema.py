"""
Core schema representation for class generation.

Converts a class description mapping (usually parsed JSON) into the
dataclasses the formatters work with.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import SchemaError


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the value of the first key present in ``data``."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _require(data: Mapping[str, Any], key: str, owner: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        raise SchemaError(f"{owner} requires '{key}': {dict(data)}")
    return value


def _literal(value: Any) -> str:
    """Render a JSON scalar the way Java source spells it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_mapping(value: Any, owner: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaError(f"{owner} must be an object, got {type(value).__name__}")
    return value


def _as_list(value: Any, owner: str) -> list:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise SchemaError(f"{owner} must be a list, got {type(value).__name__}")
    return list(value)


@dataclass
class AnnotationParameter:
    """A single ``key = value`` pair of an annotation."""

    name: str
    value: str


@dataclass
class AnnotationSpec:
    """An annotation usage, e.g. ``javax.persistence.Column(name = "id")``."""

    name: str
    parameters: Optional[List[AnnotationParameter]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AnnotationSpec":
        data = _as_mapping(data, "Annotation")
        raw_parameters = data.get("parameters")
        parameters = None
        if raw_parameters is not None:
            parameters = []
            for item in _as_list(raw_parameters, "Annotation parameters"):
                item = _as_mapping(item, "Annotation parameter")
                parameters.append(
                    AnnotationParameter(
                        name=_require(item, "name", "Annotation parameter"),
                        value=_literal(item.get("value", "")),
                    )
                )

        return cls(name=_require(data, "name", "Annotation"), parameters=parameters)


@dataclass
class ParameterSpec:
    """A method parameter."""

    type: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> "ParameterSpec":
        data = _as_mapping(data, "Parameter")
        return cls(
            type=_require(data, "type", "Parameter"),
            name=_require(data, "name", "Parameter"),
        )


@dataclass
class AttributeSpec:
    """A field of the generated class."""

    name: str
    type: str
    encapsulation: str = "private"
    getters: bool = False
    setters: bool = False
    annotations: List[AnnotationSpec] = field(default_factory=list)
    value: Optional[str] = None
    javadoc: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AttributeSpec":
        data = _as_mapping(data, "Attribute")
        value = data.get("value")
        return cls(
            name=_require(data, "name", "Attribute"),
            type=_require(data, "type", "Attribute"),
            encapsulation=_pick(data, "encapsulation", default="private"),
            getters=bool(data.get("getters", False)),
            setters=bool(data.get("setters", False)),
            annotations=[
                AnnotationSpec.from_dict(a)
                for a in _as_list(data.get("annotations"), "Attribute annotations")
            ],
            value=_literal(value) if value is not None else None,
            javadoc=data.get("javadoc"),
        )


@dataclass
class MethodSpec:
    """A method declared in the schema; ``content`` is the raw body."""

    name: str
    return_type: str = "void"
    encapsulation: str = "public"
    parameters: List[ParameterSpec] = field(default_factory=list)
    content: str = ""
    annotations: List[AnnotationSpec] = field(default_factory=list)
    throws: Optional[str] = None
    javadoc: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "MethodSpec":
        data = _as_mapping(data, "Method")
        return cls(
            name=_require(data, "name", "Method"),
            return_type=_pick(data, "returnType", "return_type", default="void"),
            encapsulation=_pick(data, "encapsulation", default="public"),
            parameters=[
                ParameterSpec.from_dict(p)
                for p in _as_list(data.get("parameters"), "Method parameters")
            ],
            content=_pick(data, "content", default=""),
            annotations=[
                AnnotationSpec.from_dict(a)
                for a in _as_list(data.get("annotations"), "Method annotations")
            ],
            throws=data.get("throws"),
            javadoc=data.get("javadoc"),
        )


@dataclass
class DefaultConstructorSpec:
    """Body of the no-args constructor."""

    content: str = ""


@dataclass
class ClassSchema:
    """Root description of the class to generate."""

    name: Optional[str] = None
    package: str = ""
    encapsulation: str = "public"
    annotations_class: List[AnnotationSpec] = field(default_factory=list)
    extends_classes: List[str] = field(default_factory=list)
    interfaces: List[str] = field(default_factory=list)
    attributes: List[AttributeSpec] = field(default_factory=list)
    methods: List[MethodSpec] = field(default_factory=list)
    constructor_no_args: bool = False
    all_args_constructor: bool = False
    default_constructor: DefaultConstructorSpec = field(
        default_factory=DefaultConstructorSpec
    )
    serializable: bool = False
    generate_to_string: bool = False
    generate_equals_hash_code: bool = False
    javadoc: Optional[str] = None
    author: Optional[str] = None
    additional_imports: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ClassSchema":
        """
        Build a ClassSchema from a mapping.

        Accepts the camelCase keys of the JSON schema format as well as the
        older snake_case spellings (``encapsulation_class``,
        ``annotations_class``, ``extends_classes``).

        Raises:
            SchemaError: If a nested entry lacks a required key
        """
        data = _as_mapping(data, "Class schema")

        default_constructor = _pick(data, "defaultConstructor", "default_constructor")
        if default_constructor is None:
            default_constructor_spec = DefaultConstructorSpec()
        else:
            default_constructor = _as_mapping(default_constructor, "Default constructor")
            default_constructor_spec = DefaultConstructorSpec(
                content=default_constructor.get("content") or ""
            )

        return cls(
            name=data.get("name") or None,
            package=data.get("package") or "",
            encapsulation=_pick(
                data, "encapsulation", "encapsulation_class", default="public"
            ),
            annotations_class=[
                AnnotationSpec.from_dict(a)
                for a in _as_list(
                    _pick(data, "annotationsClass", "annotations_class"),
                    "Class annotations",
                )
            ],
            extends_classes=_as_list(
                _pick(data, "extendsClasses", "extends_classes"), "Extended classes"
            ),
            interfaces=_as_list(data.get("interfaces"), "Interfaces"),
            attributes=[
                AttributeSpec.from_dict(a)
                for a in _as_list(data.get("attributes"), "Attributes")
            ],
            methods=[
                MethodSpec.from_dict(m) for m in _as_list(data.get("methods"), "Methods")
            ],
            constructor_no_args=bool(
                _pick(data, "constructorNoArgs", "constructor_no_args", default=False)
            ),
            all_args_constructor=bool(
                _pick(data, "allArgsConstructor", "all_args_constructor", default=False)
            ),
            default_constructor=default_constructor_spec,
            serializable=bool(data.get("serializable", False)),
            generate_to_string=bool(
                _pick(data, "generateToString", "generate_to_string", default=False)
            ),
            generate_equals_hash_code=bool(
                _pick(
                    data,
                    "generateEqualsHashCode",
                    "generate_equals_hash_code",
                    default=False,
                )
            ),
            javadoc=data.get("javadoc"),
            author=data.get("author"),
            additional_imports=_as_list(
                _pick(data, "additionalImports", "additional_imports"),
                "Additional imports",
            ),
        )
