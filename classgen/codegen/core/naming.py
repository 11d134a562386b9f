"""
Naming utilities for Java type names.

Handles splitting fully-qualified artifact names into package and simple
type, stripping a generic wrapper, and member-name capitalization.
"""

PACKAGE_SEPARATOR = "."

# Java primitives never carry a package and are never imported
JAVA_PRIMITIVES = {
    "boolean",
    "byte",
    "char",
    "short",
    "int",
    "long",
    "float",
    "double",
    "void",
}


def is_qualified(artifact: str) -> bool:
    """Return True if the artifact contains a package separator."""
    return PACKAGE_SEPARATOR in artifact


def package_of(artifact: str) -> str:
    """
    Extract the package of an artifact.

    Example: ``java.util.List`` -> ``java.util``. An artifact without a
    separator yields an empty string.
    """
    return artifact[: artifact.rfind(PACKAGE_SEPARATOR)] if is_qualified(artifact) else ""


def simple_type_of(artifact: str) -> str:
    """
    Extract the simple type of an artifact.

    Example: ``java.util.List`` -> ``List``.
    """
    return artifact[artifact.rfind(PACKAGE_SEPARATOR) + 1 :]


def strip_generic(artifact: str) -> str:
    """
    Remove the first generic span from a type.

    Example: ``java.util.List<com.acme.Item>`` -> ``java.util.List``.

    The span runs from the first ``<`` to its matching ``>``, so nested
    arguments such as ``Map<String, List<Integer>>`` are removed whole.
    An unbalanced ``<`` drops everything after it.
    """
    start = artifact.find("<")
    if start == -1:
        return artifact

    depth = 0
    for position in range(start, len(artifact)):
        char = artifact[position]
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth == 0:
                return artifact[:start] + artifact[position + 1 :]

    return artifact[:start]


def type_name(artifact: str) -> str:
    """Return the printable simple type of an artifact (generic stripped)."""
    return simple_type_of(strip_generic(artifact))


def capitalize(name: str) -> str:
    """
    Uppercase the first character and leave the rest untouched.

    Unlike ``str.capitalize`` this keeps ``ID`` as ``ID`` and ``firstName``
    as ``FirstName``.
    """
    return name[:1].upper() + name[1:]


def is_primitive(artifact: str) -> bool:
    """Check whether a type is a Java primitive (or ``void``)."""
    return strip_generic(artifact) in JAVA_PRIMITIVES
