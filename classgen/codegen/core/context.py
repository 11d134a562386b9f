"""
Per-call generation state.

A GenerationContext is created once per generated class and handed to
every formatter. Its import registry is the only state that changes
while a class is being generated.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from .naming import is_qualified, package_of, strip_generic
from ...logging_config import get_logger

logger = get_logger(__name__)


class ImportCollector:
    """Append-only, deduplicated registry of imported artifacts."""

    def __init__(self):
        # dict keeps insertion order, values are unused
        self._imports: Dict[str, None] = {}

    def register(self, artifact: Optional[str], owning_package: Optional[str]) -> bool:
        """
        Register an artifact referenced by the class being generated.

        Unqualified types (primitives, ``Object``) and types declared in
        the owning package are ignored.

        Args:
            artifact: Fully-qualified type, possibly generic-wrapped
            owning_package: Package of the class being generated

        Returns:
            True if the artifact was added, False otherwise
        """
        if not artifact:
            return False

        outer_type = strip_generic(artifact)
        if not is_qualified(outer_type):
            return False

        if package_of(outer_type) == (owning_package or ""):
            return False

        if outer_type in self._imports:
            return False

        self._imports[outer_type] = None
        logger.debug("Registered import %s", outer_type)
        return True

    def __contains__(self, artifact: str) -> bool:
        return artifact in self._imports

    def __len__(self) -> int:
        return len(self._imports)

    def __iter__(self):
        return iter(self._imports)

    def render_all(self, sort: bool = False) -> str:
        """Render one ``import <type>;`` line per registered artifact."""
        imports: List[str] = list(self._imports)
        if sort:
            imports = sorted(imports)
        return "\n".join(f"import {artifact};" for artifact in imports)


@dataclass
class GenerationContext:
    """State shared by the formatters during one generation pass."""

    package: str = ""
    indent: str = "    "
    add_comments: bool = True
    now: datetime = field(default_factory=datetime.now)
    imports: ImportCollector = field(default_factory=ImportCollector)

    def add_import(self, artifact: Optional[str]) -> bool:
        """Register an artifact against this context's package."""
        return self.imports.register(artifact, self.package)

    def indented(self, text: str, level: int = 1) -> str:
        """Prefix a single line with ``level`` indentation units."""
        return f"{self.indent * level}{text}"
