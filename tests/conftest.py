"""
Pytest configuration and shared fixtures for classgen tests.

Provides generation contexts, sample schemas and a fixed clock so the
serialVersionUID digits are deterministic.
"""

from datetime import datetime

import pytest

from classgen.codegen.core.config import GeneratorConfig
from classgen.codegen.core.context import GenerationContext
from classgen.codegen.core.schema import AttributeSpec, ClassSchema
from classgen.codegen.languages.java.generator import JavaGenerator


# Monday 19 October 2026, 09:05
FIXED_NOW = datetime(2026, 10, 19, 9, 5)


@pytest.fixture
def fixed_now():
    """The instant returned by the fixed clock."""
    return FIXED_NOW


@pytest.fixture
def context():
    """Fresh generation context for a class in ``com.acme.model``."""
    return GenerationContext(package="com.acme.model", now=FIXED_NOW)


@pytest.fixture
def generator():
    """Java generator with default configuration and the fixed clock."""
    return JavaGenerator(GeneratorConfig(), clock=lambda: FIXED_NOW)


@pytest.fixture
def person_dict():
    """Person schema in the JSON format."""
    return {
        "name": "Person",
        "package": "com.acme.model",
        "encapsulation": "public",
        "attributes": [
            {
                "name": "name",
                "type": "java.lang.String",
                "getters": True,
                "setters": True,
            },
            {
                "name": "age",
                "type": "int",
                "getters": True,
                "setters": True,
            },
        ],
        "allArgsConstructor": True,
    }


@pytest.fixture
def person_schema(person_dict):
    """Person schema as a ClassSchema."""
    return ClassSchema.from_dict(person_dict)


@pytest.fixture
def age_attribute():
    """A primitive ``age`` attribute with both accessors."""
    return AttributeSpec(name="age", type="int", getters=True, setters=True)
