"""Path assembly from drive, directory, file name and extension components.

The assembler concatenates up to four optional components into a bounded
``PathBuffer``:

    drive:      ``A`` or ``A:``; only the first character is used and a colon
                is always appended
    directory:  ``\\top\\next\\last\\`` or ``/top/next/last/``, with or without
                leading and trailing separators; mixed separators are kept
    file_name:  copied verbatim
    extension:  with or without a leading ``.``

Components are not validated. When the buffer fills up the text is cut to
``capacity - 1`` characters and the remaining components are dropped. The
truncation is silent: callers that need to detect it compare lengths or use
``make_path_strict``.

Byte components are decoded with the configured path encoding first, so the
trailing-separator check looks at the last decoded character. In double-byte
encodings such as cp932 the second byte of a character can equal ``0x5C``
(``\\``) without being a separator.
"""

from typing import Iterable, Optional, Union

from makepath.paths.errors import PathLengthExceededError
from makepath.paths.path_buffer import PathBuffer
from makepath.utils.config.parameters import ParameterLoader
from makepath.utils.io.logger import Logger

Component = Optional[Union[str, bytes]]


class PathAssembler:
    """Builds path strings from their components inside a bounded buffer."""

    _PARAMS = ParameterLoader()
    _ACCEPTED_SEPARATORS = _PARAMS.get("accepted_separators")
    _CANONICAL_SEPARATOR: str = _PARAMS.get("canonical_separator")
    _DRIVE_DELIMITER: str = _PARAMS.get("drive_delimiter")
    _EXTENSION_DELIMITER: str = _PARAMS.get("extension_delimiter")
    _PATH_ENCODING: str = _PARAMS.get("path_encoding")
    _TERMINATOR: str = _PARAMS.get("terminator")

    @staticmethod
    def _text(component: Component, encoding: Optional[str] = None) -> str:
        """Decode a component and cut it at an embedded terminator."""
        if component is None:
            return ""
        if isinstance(component, (bytes, bytearray)):
            component = bytes(component).decode(
                encoding or PathAssembler._PATH_ENCODING, errors="surrogateescape"
            )
        if not isinstance(component, str):
            raise TypeError(
                f"Path components must be str or bytes, not {type(component).__name__}"
            )
        end = component.find(PathAssembler._TERMINATOR)
        return component if end < 0 else component[:end]

    @staticmethod
    def _copy(buffer: PathBuffer, chars: Iterable[str]) -> bool:
        for char in chars:
            if not buffer.put(char):
                return False
        return True

    @staticmethod
    def ends_with_separator(text: Component, encoding: Optional[str] = None) -> bool:
        """Return True if the last decoded character is an accepted separator."""
        decoded = PathAssembler._text(text, encoding)
        return len(decoded) > 0 and decoded[-1] in PathAssembler._ACCEPTED_SEPARATORS

    @staticmethod
    def assemble(
        buffer: PathBuffer,
        drive: Component = None,
        directory: Component = None,
        file_name: Component = None,
        extension: Component = None,
        encoding: Optional[str] = None,
    ) -> None:
        """Write the path built from the given components into ``buffer``.

        Never fails on overlong input: the buffer is left holding a
        null-terminated prefix of ``capacity - 1`` characters instead.
        """
        drive_text = PathAssembler._text(drive, encoding)
        directory_text = PathAssembler._text(directory, encoding)
        file_name_text = PathAssembler._text(file_name, encoding)
        extension_text = PathAssembler._text(extension, encoding)
        buffer.clear()

        if drive_text:
            if not PathAssembler._copy(
                buffer, (drive_text[0], PathAssembler._DRIVE_DELIMITER)
            ):
                return

        if directory_text:
            if not PathAssembler._copy(buffer, directory_text):
                return
            if not PathAssembler.ends_with_separator(directory_text):
                if not buffer.put(PathAssembler._CANONICAL_SEPARATOR):
                    return

        if not PathAssembler._copy(buffer, file_name_text):
            return

        if extension_text and not extension_text.startswith(
            PathAssembler._EXTENSION_DELIMITER
        ):
            if not buffer.put(PathAssembler._EXTENSION_DELIMITER):
                return
        if not PathAssembler._copy(buffer, extension_text):
            return
        buffer.terminate()

    @staticmethod
    def make_path(
        drive: Component = None,
        directory: Component = None,
        file_name: Component = None,
        extension: Component = None,
        capacity: Optional[int] = None,
        encoding: Optional[str] = None,
    ) -> str:
        """Assemble into a fresh bounded buffer and return its text."""
        buffer = PathBuffer(capacity)
        PathAssembler.assemble(
            buffer, drive, directory, file_name, extension, encoding=encoding
        )
        return buffer.value

    @staticmethod
    def make_path_unbounded(
        drive: Component = None,
        directory: Component = None,
        file_name: Component = None,
        extension: Component = None,
        encoding: Optional[str] = None,
    ) -> str:
        """Assemble without any length limit."""
        buffer = PathBuffer(growable=True)
        PathAssembler.assemble(
            buffer, drive, directory, file_name, extension, encoding=encoding
        )
        return buffer.value

    @staticmethod
    def make_path_strict(
        drive: Component = None,
        directory: Component = None,
        file_name: Component = None,
        extension: Component = None,
        capacity: Optional[int] = None,
        encoding: Optional[str] = None,
    ) -> str:
        """Assemble like ``make_path`` but raise instead of truncating."""
        buffer = PathBuffer(capacity)
        full_path = PathAssembler.make_path_unbounded(
            drive, directory, file_name, extension, encoding=encoding
        )
        limit = buffer.capacity or 0
        if len(full_path) >= limit:
            Logger.warning(
                f"Path of {len(full_path)} characters exceeds capacity {limit}: "
                f"{full_path[:40]}..."
            )
            raise PathLengthExceededError(len(full_path), limit)
        PathAssembler.assemble(
            buffer, drive, directory, file_name, extension, encoding=encoding
        )
        return buffer.value
