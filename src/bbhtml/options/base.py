"""Base classes for parser and renderer options.

Options are frozen dataclasses, so one instance can be shared by any number
of concurrent parse or render calls. Field metadata doubles as the
command-line definition of each option:

- ``help``: help text (required on every field)
- ``cli_name``: flag name when it differs from the kebab-cased field name
- ``type``: argparse converter for non-boolean fields (default ``str``)
- ``exclude_from_cli``: leave the field off the command line
"""

from __future__ import annotations

import sys
from dataclasses import MISSING, dataclass, fields, replace
from typing import Any, Iterator

from bbhtml.exceptions import InvalidOptionsError

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin adding copy-with-changes to frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        ``__post_init__`` validation runs again on the copy.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options."""

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options."""

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
        pass


def snake_to_kebab(name: str) -> str:
    """Convert a field name to flag form.

    Examples
    --------
    >>> snake_to_kebab("max_nesting_depth")
    'max-nesting-depth'

    """
    return name.replace("_", "-")


def cli_arguments(options_class: type) -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield ``(flag, add_argument kwargs)`` for each field of an options class.

    A boolean field that defaults to True becomes a ``--no-...`` flag storing
    False; one that defaults to False becomes a plain switch. Every argument
    stores into ``dest`` equal to the field name, so parsed arguments map
    straight back onto the options constructor.

    Parameters
    ----------
    options_class : type
        A frozen options dataclass

    Yields
    ------
    tuple of (str, dict)
        Flag and keyword arguments for ``ArgumentParser.add_argument``

    """
    for option_field in fields(options_class):
        metadata = option_field.metadata
        if metadata.get("exclude_from_cli"):
            continue

        default = option_field.default if option_field.default is not MISSING else None
        name = metadata.get("cli_name", snake_to_kebab(option_field.name))
        kwargs: dict[str, Any] = {"dest": option_field.name, "default": default, "help": metadata["help"]}

        if isinstance(default, bool):
            kwargs["action"] = "store_false" if default else "store_true"
            if default and not name.startswith("no-"):
                name = f"no-{name}"
        else:
            kwargs["type"] = metadata.get("type", str)
            kwargs["help"] = f"{kwargs['help']} (default: %(default)s)"
        yield f"--{name}", kwargs


def check_options_type(options: Any, expected_type: type, component: str) -> None:
    """Raise ``InvalidOptionsError`` unless ``options`` is None or an ``expected_type``."""
    if options is not None and not isinstance(options, expected_type):
        raise InvalidOptionsError(component, expected_type, type(options))
