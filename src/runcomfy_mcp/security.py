# SPDX-License-Identifier: MIT
"""Path safety checks for downloaded files."""

import pathlib


def check_not_symlink(path: pathlib.Path, description: str) -> None:
    """Reject ``path`` if it is a symbolic link.

    Raises:
        ValueError: If path exists and is a symlink
    """
    if path.is_symlink():
        raise ValueError(f"{description} cannot be a symbolic link: {path.name}")


def validate_safe_path(base_path: pathlib.Path, filename: str) -> pathlib.Path:
    """Resolve ``filename`` under ``base_path``, refusing anything that escapes it.

    Args:
        base_path: Directory the file must live in
        filename: Bare filename supplied by the caller or derived from a URL

    Returns:
        Resolved absolute path inside ``base_path``

    Raises:
        ValueError: If filename is empty, contains directory parts, or escapes base_path
    """
    if not filename or filename in (".", ".."):
        raise ValueError(f"Invalid filename: {filename!r}")
    if pathlib.PurePosixPath(filename).name != filename or "\\" in filename:
        raise ValueError(f"Invalid filename: path traversal detected in {filename!r}")

    base = base_path.resolve()
    candidate = (base / filename).resolve()
    try:
        candidate.relative_to(base)
    except ValueError as e:
        raise ValueError(f"Invalid filename: path traversal detected in {filename!r}") from e
    return candidate
