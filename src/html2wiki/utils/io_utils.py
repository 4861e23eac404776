#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2wiki/utils/io_utils.py
"""I/O utilities for writing converted wiki text."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_text(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write wiki text to a file path or stream.

    Parameters
    ----------
    text : str
        Converted markup
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive
        UTF-8 bytes; text streams receive the string unchanged.

    Raises
    ------
    TypeError
        If ``output`` is not a path or writable stream

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_text("== Title ==", buffer)
        >>> buffer.getvalue()
        b'== Title =='

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(text, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)


__all__ = ["write_text"]
