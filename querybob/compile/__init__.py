"""querybob compilation layer: builder state → parameterized SQL."""
from querybob.compile.base import CompiledStatement, SQLCompiler
from querybob.compile.generator import StatementGenerator
from querybob.compile.generic import GenericCompiler
from querybob.compile.mysql import MySQLCompiler
from querybob.compile.oracle import OracleCompiler
from querybob.compile.postgres import PostgresCompiler
from querybob.compile.registry import CompilerFactory
from querybob.compile.sqlite import SQLiteCompiler

__all__ = [
    "CompiledStatement",
    "SQLCompiler",
    "StatementGenerator",
    "CompilerFactory",
    "GenericCompiler",
    "MySQLCompiler",
    "OracleCompiler",
    "PostgresCompiler",
    "SQLiteCompiler",
]
