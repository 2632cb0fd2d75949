#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the bbhtml library.

Markup itself never causes an exception: the lexer, tree builder and
renderers turn every malformed construct into text. What remains are
mistakes made by the calling code (wrong options, inconsistent tag
declarations) and file access problems in the command-line front end.

Exception Hierarchy
-------------------
- BBHtmlError (base exception)
  - ValidationError (a call received an unusable argument)
    - InvalidOptionsError (options object of the wrong class)
  - SchemaError (tag declarations; raised while building a registry)
    - DuplicateTagError (two declarations share a tag name)
    - InvalidSchemaError (a declaration contradicts itself)
  - FileError (reading input in the command-line front end)
    - InputFileNotFoundError (input path does not exist)
"""

from typing import Any


class BBHtmlError(Exception):
    """Base exception class for all bbhtml-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(BBHtmlError):
    """A parser, renderer or API call received an argument it cannot use.

    Parameters
    ----------
    message : str
        Description of the problem
    argument : str, optional
        Name of the offending argument
    value : any, optional
        The offending value

    """

    def __init__(self, message: str, argument: str | None = None, value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value


class InvalidOptionsError(ValidationError):
    """An options object of the wrong class was passed to a parser or renderer.

    For example, ``HtmlRendererOptions`` given to ``BBCodeParser``.

    Parameters
    ----------
    component : str
        Short name of the parser or renderer ("bbcode", "html")
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object actually passed

    """

    def __init__(self, component: str, expected_type: type, received_type: type):
        super().__init__(
            f"The {component} component takes {expected_type.__name__}, not {received_type.__name__}",
            argument="options",
            value=received_type,
        )
        self.component = component
        self.expected_type = expected_type
        self.received_type = received_type


class SchemaError(BBHtmlError):
    """Base exception for tag declaration errors.

    Raised only while a registry is being built; a registry is never handed
    out in an inconsistent state.

    Parameters
    ----------
    message : str
        Description of the declaration problem
    tag_name : str, optional
        The tag whose declaration is at fault

    """

    def __init__(self, message: str, tag_name: str | None = None):
        super().__init__(message)
        self.tag_name = tag_name


class DuplicateTagError(SchemaError):
    """Two declarations share a tag name (compared case-insensitively)."""

    def __init__(self, tag_name: str):
        super().__init__(f"Tag '{tag_name}' is already registered", tag_name=tag_name)


class InvalidSchemaError(SchemaError):
    """A single tag declaration is internally inconsistent."""


class FileError(BBHtmlError):
    """Input could not be read by the command-line front end.

    Parameters
    ----------
    message : str
        Description of the problem
    file_path : str, optional
        Path that was being read
    original_error : Exception, optional
        The underlying ``OSError``

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputFileNotFoundError(FileError):
    """The input path does not exist."""

    def __init__(self, file_path: str):
        super().__init__(f"File not found: {file_path}", file_path=file_path)
