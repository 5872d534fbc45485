from __future__ import annotations

import logging
import sys
from pathlib import Path

from rustl.config import RECURSION_LIMIT
from rustl.reader.parser import parse
from rustl.runtime_context import set_entry_file
from rustl.types.environment import Environment
from rustl.types.errors import RustlError
from rustl.builtin.env_builtin import register
from rustl.evaluation.executor import run

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Host-facing driver: parses Rustl source and runs it against one frame.
    The frame (with built-ins registered) persists across calls, so definitions
    from one `eval` are visible to the next.
    """

    def __init__(self, entry_file: str | Path | None = None, builtins: bool = True):
        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)
        self.env: Environment = Environment()
        if builtins:
            register(self.env)
        if entry_file is not None:
            self.set_entry_file(entry_file)

    def set_entry_file(self, path: str | Path) -> None:
        """Anchor relative imports to the directory of `path`."""
        set_entry_file(path)
        logger.debug("Entry file set to %s", path)

    def eval(self, code: str) -> None:
        """Parse and run `code`; Rustl errors propagate to the caller."""
        run(parse(code), self.env)

    def run(self, code: str) -> str | None:
        """Run `code`, returning None on success or the error message."""
        try:
            self.eval(code)
        except RustlError as e:
            return str(e)
        except RecursionError:
            # Nesting outside any function call, e.g. deeply nested expressions
            return "Maximum recursion depth exceeded"
        return None

    def run_file(self, path: str | Path) -> str | None:
        """Run the file at `path` as the entry file."""
        self.set_entry_file(path)
        try:
            code = Path(path).read_text(encoding="utf-8")
        except OSError:
            return f"Error opening file at {path}"
        except UnicodeDecodeError:
            return f"Error reading file at {path}: not valid UTF-8"
        return self.run(code)
