"""Application layer for localdb.

The application layer turns statements into load/mutate/save cycles on the
database document.

Exports:
    LocalDB:
        - LocalDB: Library entry point bound to one document
        - initialize / attach: Module-level constructors
    Interpreter:
        - StatementInterpreter: Executes classified statements
        - ExecutionResult: Result of one applied statement
"""

from localdb.application.interpreter import ExecutionResult, StatementInterpreter
from localdb.application.local_db import LocalDB, attach, initialize

__all__ = [
    "LocalDB",
    "initialize",
    "attach",
    "StatementInterpreter",
    "ExecutionResult",
]
