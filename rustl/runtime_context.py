from __future__ import annotations
from pathlib import Path
from typing import Optional

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_entry_file: Optional[Path] = None


def set_entry_file(path: str | Path | None) -> None:
    global _entry_file
    _entry_file = Path(path).absolute() if path is not None else None


def get_entry_file() -> Optional[Path]:
    return _entry_file


def get_entry_dir() -> Path:
    """Directory relative imports are anchored to (cwd when no entry file is set)."""
    if _entry_file is None:
        return Path.cwd()
    return _entry_file.parent
