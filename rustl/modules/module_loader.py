from __future__ import annotations

import logging
import os
from pathlib import Path

from rustl.config import get_library_roots
from rustl.runtime_context import get_entry_dir
from rustl.reader.parser import parse
from rustl.syntax.ast import Program
from rustl.types.errors import RustlModuleNotFound

logger = logging.getLogger(__name__)

_SEPARATORS = ("/",) if os.sep == "/" else ("/", os.sep)


def module_candidates(path: str) -> list[Path]:
    """Files an import path may refer to, in the order they are tried.

    - "./x" or "../x": relative to the entry file's directory (never the
      importing module's directory).
    - anything containing a separator: used as given.
    - a bare name: the entry file's directory, then each RUSTL_LIB root.
    """
    anchor = get_entry_dir()
    if path.startswith("."):
        return [anchor / path]
    if any(sep in path for sep in _SEPARATORS):
        return [Path(path)]
    return [anchor / path, *(root / path for root in get_library_roots())]


def resolve_module(path: str) -> str:
    """Return the source text of the first readable candidate for `path`."""
    candidates = module_candidates(path)
    for candidate in candidates:
        try:
            source = candidate.read_text(encoding="utf-8")
        except OSError:
            logger.debug("Import %r: no module at %s", path, candidate)
            continue
        except UnicodeDecodeError:
            raise RustlModuleNotFound(
                f"Error reading file at {candidate}: not valid UTF-8"
            ) from None
        logger.debug("Import %r resolved to %s", path, candidate)
        return source
    shown = candidates[0] if path.startswith(".") else path
    raise RustlModuleNotFound(f"Error opening file at {shown}")


def load_module(path: str) -> Program:
    """Resolve and parse the module named by an import statement."""
    return parse(resolve_module(path))
