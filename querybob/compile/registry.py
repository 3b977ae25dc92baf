"""Compiler registry (Open/Closed Principle).

``CompilerFactory``
    Central registry for :class:`~querybob.compile.base.SQLCompiler`
    implementations keyed by dialect name.  Register a new compiler once;
    every builder whose dialect carries that name picks it up.

Usage::

    from querybob.compile.registry import CompilerFactory

    @CompilerFactory.register("mariadb")
    class MariaDBCompiler(MySQLCompiler):
        ...

    qb = querybob.new_select("users").for_database("mariadb")
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import ClassVar

from querybob.compile.base import SQLCompiler
from querybob.errors import UnknownDialectError


def dialect_key(name: str | Enum) -> str:
    """Return the registry key for a dialect name or :class:`Dialect` member."""
    if isinstance(name, Enum):
        return str(name.value)
    return name.lower()


class CompilerFactory:
    """Registry mapping dialect names to :class:`SQLCompiler` classes.

    Callers register a compiler class once; the generator creates instances
    on demand via :meth:`create`.

    Example::

        @CompilerFactory.register("mariadb")
        class MariaDBCompiler(MySQLCompiler):
            ...

        compiler = CompilerFactory.create("mariadb")
    """

    _compilers: ClassVar[dict[str, type[SQLCompiler]]] = {}

    @classmethod
    def register(cls, name: str | Enum) -> Callable[[type[SQLCompiler]], type[SQLCompiler]]:
        """Decorator that registers a compiler class under ``name``.

        Args:
            name: The dialect name (e.g. ``"postgres"``) or a ``Dialect``.

        Returns:
            A decorator that registers and returns the compiler class.
        """

        def decorator(compiler_cls: type[SQLCompiler]) -> type[SQLCompiler]:
            cls._compilers[dialect_key(name)] = compiler_cls
            return compiler_cls

        return decorator

    @classmethod
    def register_class(cls, name: str | Enum, compiler_cls: type[SQLCompiler]) -> None:
        """Register a compiler class without using the decorator form.

        Args:
            name: The dialect name or a ``Dialect``.
            compiler_cls: The :class:`SQLCompiler` subclass to register.
        """
        cls._compilers[dialect_key(name)] = compiler_cls

    @classmethod
    def create(cls, name: str | Enum) -> SQLCompiler:
        """Instantiate the compiler registered for ``name``.

        Args:
            name: The dialect name or a ``Dialect``.

        Returns:
            A fresh :class:`SQLCompiler` instance.

        Raises:
            UnknownDialectError: If no compiler is registered for ``name``.
        """
        key = dialect_key(name)
        compiler_cls = cls._compilers.get(key)
        if compiler_cls is None:
            raise UnknownDialectError(key, cls.registered_dialects())
        return compiler_cls()

    @classmethod
    def registered_dialects(cls) -> list[str]:
        """Return the sorted list of registered dialect names."""
        return sorted(cls._compilers)
