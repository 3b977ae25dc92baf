"""Compilation context value objects.

``CompilationContext`` packages the ``(compiler, options)`` pair shared by
every clause builder.  ``PlaceholderAllocator`` is the only mutable piece of
state touched during generation.
"""
from __future__ import annotations

from dataclasses import dataclass

from querybob.compile.base import SQLCompiler
from querybob.config import GenerationOptions


@dataclass(frozen=True)
class CompilationContext:
    """Immutable context for a single generation run.

    Attributes:
        compiler: Dialect-specific SQL compiler instance.
        options: Generation options of the builder being compiled.
    """

    compiler: SQLCompiler
    options: GenerationOptions


@dataclass
class PlaceholderAllocator:
    """Hands out positional placeholders, one per bound value.

    ``count`` starts at the builder's counter (0 unless legacy numbering is
    enabled) and is advanced by exactly one per :meth:`next` call.
    """

    compiler: SQLCompiler
    count: int = 0

    def next(self) -> str:
        """Advance the counter and return the placeholder for its new value."""
        self.count += 1
        return self.compiler.placeholder(self.count)
