#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/utils/io_utils.py
"""Output helpers shared by the renderers and the command-line front end."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or a text or binary stream.

    Parameters
    ----------
    content : str
        Text to write; encoded as UTF-8 for paths and binary streams
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If output is neither a path nor a writable object

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("<b>x</b>", buffer)
        >>> buffer.getvalue()
        b'<b>x</b>'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)
