from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Library search path, read on every import
LIBRARY_PATH_VAR = 'RUSTL_LIB'


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_library_roots() -> List[Path]:
    return paths_from_env(LIBRARY_PATH_VAR)


# Floor for the host recursion limit; each Rustl call nests several Python frames
RECURSION_LIMIT = 5000
