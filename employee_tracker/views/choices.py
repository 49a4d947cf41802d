"""
Choice lists: turns query rows into the label/value pairs offered by single-select prompts.
"""

from typing import Any, Callable, Iterable, NamedTuple


class Choice(NamedTuple):
    label: str
    value: Any


NONE_CHOICE = Choice("None", None)


class NoChoicesAvailable(Exception):
    """Raised when a prompt needs at least one choice and the source rows are empty."""

    def __init__(self, message: str = "No items available."):
        super().__init__(message)
        self.message = message


def employee_label(row) -> str:
    """'First Last' label for any row carrying first_name and last_name."""
    return f"{row.first_name} {row.last_name}"


def build_choices(
    rows: Iterable,
    label: Callable[[Any], str],
    value: Callable[[Any], Any],
    include_none: bool = False,
    required: bool = False,
    empty_message: str = "No items available.",
) -> list[Choice]:
    """
    Builds the ordered choice list for a single-select prompt.

    The order of `rows` is preserved and each choice carries value(row).
    With `include_none`, a leading "None" choice (value None) is added for
    nullable references. With `required`, an empty `rows` raises
    NoChoicesAvailable so the caller can abort before prompting; the "None"
    choice alone never satisfies it.
    """
    choices = [Choice(str(label(row)), value(row)) for row in rows]

    if required and not choices:
        raise NoChoicesAvailable(empty_message)

    if include_none:
        choices.insert(0, NONE_CHOICE)

    return choices
