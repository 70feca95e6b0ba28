"""Output path resolution for shrunk PDFs.

Every function here is pure: it never touches the filesystem and never
normalizes its input. Paths are handled as strings so that prefixes such as
``./`` or ``../`` come back exactly as they were given.
"""

from __future__ import annotations

import os

from .models import InPlace, LegacyRename, OutputMode, Rename, Subdirectory

PDF_EXTENSION = "pdf"

StrPath = str | os.PathLike[str]

_SEPARATORS = os.sep + (os.altsep or "")


def _split_file_name(path: str) -> tuple[str, str] | None:
    """Split ``path`` into ``(parent, file_name)``, ignoring trailing separators."""
    stripped = path.rstrip(_SEPARATORS) or path
    parent, name = os.path.split(stripped)
    if name in {"", ".", ".."}:
        return None
    return parent, name


def _split_extension(name: str) -> tuple[str, str] | None:
    stem, dot, extension = name.rpartition(".")
    # ".hidden" is all stem
    if not dot or not stem:
        return None
    return stem, extension


def has_pdf_extension(path: StrPath) -> bool:
    """Return True when the last extension of the file name is exactly ``pdf``."""
    parts = _split_file_name(os.fspath(path))
    if parts is None:
        return False
    extension = _split_extension(parts[1])
    return extension is not None and extension[1] == PDF_EXTENSION


def resolve_rename(path: StrPath, suffix: str) -> str | None:
    """Replace a ``.pdf`` extension with ``.<suffix>.pdf``.

    If there is no extension, or the extension is not ``pdf``, returns None.

    >>> resolve_rename("some dir/subdir/name.pdf", "shrunk")
    'some dir/subdir/name.shrunk.pdf'
    >>> resolve_rename("name.txt", "shrunk") is None
    True
    """
    raw = os.fspath(path)
    if not has_pdf_extension(raw):
        return None
    stripped = raw.rstrip(_SEPARATORS)
    _, name = os.path.split(stripped)
    stem = name.rpartition(".")[0]
    prefix = stripped[: len(stripped) - len(name)]
    return f"{prefix}{stem}.{suffix}.{PDF_EXTENSION}"


def resolve_legacy_rename(path: StrPath) -> str | None:
    """Replace a ``.pdf`` extension with ``.cmp.pdf``."""
    return resolve_rename(path, LegacyRename.suffix)


def resolve_into_subdir(path: StrPath, subdir: StrPath) -> str | None:
    """Move the file into the sibling subdirectory ``subdir``.

    >>> resolve_into_subdir("some dir/name.pdf", "subdir")
    'some dir/subdir/name.pdf'
    """
    raw = os.fspath(path)
    if not has_pdf_extension(raw):
        return None
    parts = _split_file_name(raw)
    if parts is None:
        return None
    parent, name = parts
    return os.path.join(parent, os.fspath(subdir), name)


def resolve_subdir_of(path: StrPath, subdir: StrPath) -> str | None:
    """Return the directory that has to exist before writing into ``subdir``.

    >>> resolve_subdir_of("some dir/name.pdf", "subdir")
    'some dir/subdir'
    """
    raw = os.fspath(path)
    if not has_pdf_extension(raw):
        return None
    parts = _split_file_name(raw)
    if parts is None:
        return None
    return os.path.join(parts[0], os.fspath(subdir))


def resolve_output(path: StrPath, mode: OutputMode) -> str | None:
    if isinstance(mode, (Rename, LegacyRename)):
        return resolve_rename(path, mode.suffix)
    if isinstance(mode, Subdirectory):
        return resolve_into_subdir(path, mode.name)
    if isinstance(mode, InPlace):
        raise ValueError("In-place output has no separate output path")
    raise TypeError(f"Unsupported output mode: {mode!r}")


__all__ = [
    "PDF_EXTENSION",
    "has_pdf_extension",
    "resolve_rename",
    "resolve_legacy_rename",
    "resolve_into_subdir",
    "resolve_subdir_of",
    "resolve_output",
]
