"""Filesystem helpers: atomic text output and YAML loading.

Provides:
    - Atomic writes: tmp file → fsync → rename (readers never see a
      half-written code table)
    - Streaming atomic writes via a context manager, so large tables are
      written line by line instead of joined in memory
    - YAML loading for run configs
    - Directory creation with exist_ok semantics

All paths use pathlib.Path.

Usage:
    from graycode.utils import fs
    with fs.atomic_open_text("gray.txt") as f:
        f.writelines(lines)
    cfg = fs.load_yaml("gray.v1.yaml")
"""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, TextIO, Union

import yaml


def ensure_dir(p: Union[str, Path]) -> Path:
    """Create directory (and parents) if it doesn't exist, return Path."""
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p


@contextmanager
def atomic_open_text(
    path: Union[str, Path],
    encoding: str = "utf-8",
    tmp_suffix: str = ".tmp"
) -> Iterator[TextIO]:
    """Open a text file for writing that appears at ``path`` only when complete.

    Parameters
    ----------
    path : Union[str, Path]
        Target file path
    encoding : str
        Text encoding, default "utf-8"
    tmp_suffix : str
        Temporary file suffix, default ".tmp"

    Yields
    ------
    TextIO
        Writable handle on the temporary file

    Raises
    ------
    OSError
        If the temporary file cannot be created, written or renamed.
        The temporary file is removed and the handle closed first.

    Notes
    -----
    The temporary file lives next to the target so the final rename
    stays on one filesystem. Newlines are written as-is ("\\n").
    """
    path = Path(path)
    ensure_dir(path.parent)
    tmp_path = path.with_suffix(path.suffix + tmp_suffix)

    try:
        with open(tmp_path, 'w', encoding=encoding, newline='\n') as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        safe_remove(tmp_path)
        raise


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Load YAML file safely.

    Parameters
    ----------
    path : Union[str, Path]
        YAML file path

    Returns
    -------
    Dict[str, Any]
        Parsed YAML content (None for an empty file)

    Raises
    ------
    FileNotFoundError
        If file doesn't exist
    yaml.YAMLError
        If YAML parsing fails
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e


def safe_remove(path: Union[str, Path]) -> bool:
    """Remove file or symlink (no error if missing).

    Returns
    -------
    bool
        True if removed, False if it didn't exist or couldn't be removed
    """
    path = Path(path)
    try:
        if path.is_symlink() or path.exists():
            path.unlink()
            return True
        return False
    except OSError:
        return False
