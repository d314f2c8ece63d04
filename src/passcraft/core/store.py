"""Results-file persistence: HTML-comment records appended to plain text files.

A saved password is one line ``<!-- name,token,site -->``.  Because the
config-file loader strips HTML comments, results can be appended to the
same file the configuration was read from without disturbing it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

_COMMENT_OPEN: Final[str] = "<!--"
_COMMENT_CLOSE: Final[str] = "-->"


class RecordFileError(OSError):
    """Raised when an existing results file cannot be decoded as UTF-8."""


def html_comment_wrap(text: str) -> str:
    return f"{_COMMENT_OPEN} {text} {_COMMENT_CLOSE}"


def html_comment_unwrap(text: str) -> str:
    text = text.strip()
    text = text.removeprefix(_COMMENT_OPEN)
    text = text.removesuffix(_COMMENT_CLOSE)
    return text.strip()


def add_password_to_file(path: Path | str, text: str) -> Path:
    """Append *text* as a new line of *path*, creating the file if needed.

    Existing content is re-joined line by line with ``\\n`` before *text*
    is added.  The file is rewritten in place, so its mode, owner and any
    links pointing at it are kept.

    Args:
        path: Results file.
        text: Line(s) to add.

    Returns:
        The *path* that was written, for convenient chaining.

    Raises:
        RecordFileError: If the existing file is not valid UTF-8.
        OSError: If the file cannot be read or written.
    """
    path = Path(path)
    if path.exists():
        try:
            lines = path.read_text("utf-8").splitlines()
        except UnicodeDecodeError as exc:
            raise RecordFileError(f"Cannot decode results file {path}: {exc}") from exc
        lines.append(text)
        content = "\n".join(lines)
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        content = text
    path.write_text(content, "utf-8", newline="")
    return path


def build_save_payload(
    record: str,
    *,
    input_file: str | None,
    output_file: str,
) -> str:
    """Text to add to *output_file* for *record*.

    When saving back into the config file itself (or when there is no
    readable config file) only the wrapped record is added.  Otherwise the
    config file's content is carried over ahead of the wrapped record so the
    results file can later be used as a config file too.
    """
    wrapped = html_comment_wrap(record)
    if input_file is None or input_file == output_file:
        return wrapped

    try:
        source = Path(input_file).read_text("utf-8")
    except (OSError, UnicodeDecodeError):
        return wrapped
    return f"{source}\n{wrapped}"


def save_password(
    record: str,
    *,
    input_file: str | None,
    output_file: str,
) -> Path:
    """Persist *record* to *output_file*.  Raises ``OSError`` on failure."""
    payload = build_save_payload(record, input_file=input_file, output_file=output_file)
    return add_password_to_file(output_file, payload)


def read_records(path: Path | str) -> list[str]:
    """Return the unwrapped ``name,token,site`` records saved in *path*.

    Only whole-line HTML comments count as records; other lines
    (configuration, ``#`` comments) are skipped.
    """
    records = []
    for line in Path(path).read_text("utf-8").splitlines():
        stripped = line.strip()
        if stripped.startswith(_COMMENT_OPEN) and stripped.endswith(_COMMENT_CLOSE):
            records.append(html_comment_unwrap(stripped))
    return records
