# ABOUTME: Shared Click options and parameter types for bookfetch CLI commands.
# ABOUTME: Provides the ISBN argument type and the --api-key option.

from typing import Any

import click

from bookfetch.config import GOOGLE_BOOKS_ENV_VAR
from bookfetch.metadata.isbn import to_isbn13


class IsbnParamType(click.ParamType):
    """Accepts an ISBN-13 or ISBN-10 with any punctuation; yields ISBN-13 digits."""

    name = "isbn"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        isbn13 = to_isbn13(str(value))
        if isbn13 is None:
            self.fail(f"{value!r} is not an ISBN-13 or a valid ISBN-10", param, ctx)
        return isbn13


ISBN = IsbnParamType()

api_key_option = click.option(
    "--api-key",
    default=None,
    help=(
        f"Google Books API key. The {GOOGLE_BOOKS_ENV_VAR} environment variable takes "
        "precedence; with neither set only Open Library is used."
    ),
    metavar="KEY",
)
