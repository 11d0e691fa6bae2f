import os
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Union, runtime_checkable

from .logging_config import LoggerMixin
from .validation import FileValidator, InputUnreadableError


def normalize_filename(filename: str) -> str:
    """
    Normalize a file name to NFC so the same name always displays the same way.

    Args:
        filename: Original filename string

    Returns:
        Normalized filename string
    """
    return unicodedata.normalize('NFC', filename)


def safe_filename_encode(filename: str) -> str:
    """
    Make a file name safe to log and display.

    Args:
        filename: Original filename

    Returns:
        Filename with undecodable characters replaced
    """
    try:
        normalized = normalize_filename(filename)
        return normalized.encode('utf-8', errors='replace').decode('utf-8')
    except (UnicodeError, AttributeError, TypeError):
        return repr(filename)


def decode_content(raw: Union[bytes, str]) -> str:
    """Decode file bytes as UTF-8; undecodable bytes become U+FFFD and are later stripped."""
    if isinstance(raw, str):
        return raw
    return raw.decode('utf-8', errors='replace')


@dataclass(frozen=True)
class Document:
    """The full text of one comparison input."""

    text: str
    label: str = "input"
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.label


@runtime_checkable
class ReadableSource(Protocol):
    """Anything with ``read()`` returning the whole content, e.g. an upload."""

    def read(self) -> Union[bytes, str]: ...


# What compare() accepts for each side
DocumentSource = Union[Document, str, os.PathLike, ReadableSource]


class DocumentLoader(LoggerMixin):
    """
    Reads comparison inputs fully into memory.

    A source is a ``Document`` (returned unchanged), a filesystem path
    (``str`` or ``os.PathLike``), or a file-like object with ``read()``
    returning bytes or text, such as a Streamlit upload.
    """

    def __init__(self, max_file_size_mb: Optional[float] = None):
        self.max_file_size_mb = max_file_size_mb

    def load(self, source: DocumentSource, label: str = "input") -> Document:
        """
        Read ``source`` into a ``Document``.

        Raises:
            InputUnreadableError: If the source cannot be opened or read
        """
        if isinstance(source, Document):
            return source
        if isinstance(source, (str, os.PathLike)):
            return self.load_path(source, label)
        if isinstance(source, ReadableSource):
            return self.load_stream(source, label)
        raise InputUnreadableError(
            f"The {label} input is neither a path nor a readable file: {type(source).__name__}",
            label=label,
            path=source
        )

    def load_path(self, file_path: Union[str, os.PathLike], label: str = "input") -> Document:
        path = FileValidator.validate_file_path(file_path, label=label, max_size_mb=self.max_file_size_mb)
        name = normalize_filename(path.name)
        safe_path = safe_filename_encode(str(path))

        with self.log_operation("read_document", label=label, source=safe_path):
            try:
                with open(path, 'rb') as handle:
                    raw = handle.read()
            except OSError as e:
                raise InputUnreadableError(
                    f"Cannot read the {label} file {safe_path}: {e.strerror or e}",
                    label=label,
                    path=path
                ) from e

            self.logger.debug(f"Read {len(raw)} bytes from {safe_path}")
            return Document(text=decode_content(raw), label=label, name=name)

    def load_stream(self, stream: ReadableSource, label: str = "input") -> Document:
        raw_name = getattr(stream, 'name', None)
        name = normalize_filename(os.path.basename(str(raw_name))) if raw_name else None

        with self.log_operation("read_document", label=label, source=safe_filename_encode(name or label)):
            try:
                if getattr(stream, 'seekable', lambda: False)():
                    stream.seek(0)
                raw = stream.read()
            except (OSError, ValueError) as e:
                # ValueError covers reads from an already closed file
                described = f"the {label} file {name}" if name else f"the {label} file"
                raise InputUnreadableError(
                    f"Cannot read {described}: {e}",
                    label=label,
                    path=raw_name
                ) from e

            if raw is None:
                raise InputUnreadableError(f"The {label} file returned no data", label=label, path=raw_name)

            return Document(text=decode_content(raw), label=label, name=name)
