# reflow/utils/source_files.py
"""reflow.utils.source_files
===========================

Reading, writing and discovering the source files the engine works on.

- `read_source_lines` decodes a file with chardet-guided encoding detection
  and splits it into lines without terminators, remembering the newline
  style and whether the file ended with a newline.
- `write_source_lines` writes lines back in the same encoding and newline
  style. The new content goes to a temporary file in the target's
  directory which then atomically replaces the original, so a failure
  mid-write never leaves a truncated source file behind.
- `iter_source_files` expands files and directories into the files to
  process, recursively and in a deterministic order.
"""

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

import chardet

from reflow.errors import SourceFileError


logger = logging.getLogger(__name__)

CHARDET_SAMPLE_SIZE = 1024 * 20
CHARDET_MIN_CONFIDENCE = 0.75


@dataclass
class SourceText:
    """A decoded source file."""

    lines: list[str]
    encoding: str = "utf-8"
    newline: str = "\n"
    trailing_newline: bool = True


def _detect_newline(text: str) -> str:
    """Returns the terminator of the first line, ``"\\n"`` if there is none."""
    for index, char in enumerate(text):
        if char == "\n":
            return "\n"
        if char == "\r":
            return "\r\n" if text.startswith("\r\n", index) else "\r"
    return "\n"


def _split_lines(text: str) -> list[str]:
    """Splits on line terminators only; form feeds and other separators stay in the line."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _candidate_encodings(sample: bytes) -> list[tuple[str, str]]:
    """Orders the (encoding, errors) pairs to try for a file."""
    result = chardet.detect(sample)
    guess = result.get("encoding")
    confidence = result.get("confidence") or 0.0
    logger.debug(f"Chardet detected encoding '{guess}' with confidence {confidence:.2f}.")

    candidates: list[tuple[str, str]] = []
    if guess and confidence >= CHARDET_MIN_CONFIDENCE:
        candidates.append((guess, "strict"))
    candidates.extend([("utf-8", "strict"), ("latin-1", "strict")])
    if guess and confidence < CHARDET_MIN_CONFIDENCE:
        candidates.append((guess, "replace"))
    candidates.append(("utf-8", "replace"))

    unique: list[tuple[str, str]] = []
    for candidate in candidates:
        if candidate not in unique:
            unique.append(candidate)
    return unique


def read_source_lines(path: str) -> SourceText:
    """Reads and decodes ``path`` into lines without terminators.

    Raises:
        SourceFileError: If the file cannot be read or decoded.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise SourceFileError(path, f"cannot read file: {e}") from e

    if not raw:
        return SourceText(lines=[], trailing_newline=False)

    text: Optional[str] = None
    encoding = "utf-8"
    for encoding, errors in _candidate_encodings(raw[:CHARDET_SAMPLE_SIZE]):
        try:
            text = raw.decode(encoding, errors=errors)
            break
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode '{path}' as '{encoding}' (errors='{errors}'): {e}")
    if text is None:
        raise SourceFileError(path, "cannot decode file")

    # A UTF-8 BOM is restored on write through the "utf-8-sig" codec.
    if text.startswith("\ufeff"):
        text = text[1:]
        encoding = "utf-8-sig"

    logger.debug(f"Read '{path}' using encoding '{encoding}'.")
    return SourceText(
        lines=_split_lines(text),
        encoding=encoding,
        newline=_detect_newline(text),
        trailing_newline=text.endswith(("\n", "\r")),
    )


def write_source_lines(path: str, lines: Iterable[str], source: SourceText) -> None:
    """Atomically replaces the contents of ``path`` with ``lines``.

    The encoding, newline style and trailing newline of ``source`` are
    preserved, as are the file's permission bits.

    Raises:
        SourceFileError: If the new content cannot be written or swapped in.
    """
    content = source.newline.join(lines)
    if content and source.trailing_newline:
        content += source.newline

    target = Path(path)
    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=source.encoding,
            errors="strict",
            newline="",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            tmp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        shutil.copymode(target, tmp_path)
        tmp_path.replace(target)
        logger.debug(f"Successfully wrote to '{path}'")
    except (OSError, UnicodeEncodeError) as e:
        if tmp_path is not None and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                logger.warning(f"Could not remove temporary file '{tmp_path}'")
        raise SourceFileError(path, f"cannot write file: {e}") from e


def has_extension(path: Path, extensions: Iterable[str]) -> bool:
    """True if the suffix of ``path`` (without the dot) is one of ``extensions``."""
    return path.suffix.lstrip(".").lower() in {ext.lower() for ext in extensions}


def iter_source_files(
    paths: Iterable[str], extensions: Iterable[str], exclude_dirs: Iterable[str] = ()
) -> Iterator[str]:
    """Yields the files to process for the given command-line paths.

    A path naming a file is yielded as is, whatever its extension. A
    directory is walked recursively in sorted order; only files with one
    of ``extensions`` are yielded and directories named in
    ``exclude_dirs`` are skipped. Any other path (e.g. a missing one) is
    yielded too, so reading it reports the failure for that path only.
    """
    extensions = list(extensions)
    excluded = set(exclude_dirs)
    for raw_path in paths:
        path = Path(raw_path)
        if not path.is_dir():
            yield str(path)
            continue
        for root, dirs, files in os.walk(path):
            dirs[:] = sorted(d for d in dirs if d not in excluded)
            for name in sorted(files):
                candidate = Path(root) / name
                if has_extension(candidate, extensions) and candidate.is_file():
                    yield str(candidate)
