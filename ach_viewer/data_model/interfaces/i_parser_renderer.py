# ach_viewer/data_model/interfaces/i_parser_renderer.py
"""
Generic, runtime-checkable protocol for text → object → display converters.

This protocol models a *pair* of operations over a fixed-width record format:
a **parser** that converts a whole document into an object holding the
ordered, decoded lines, and a **renderer** that turns such objects into a
display form (HTML by default).

### Expectations for implementers

- **Determinism:** Given the same input string, ``parse`` must produce the same
  sequence of items. Parsing twice in a row must not leak state from the first
  run into the second.
- **Order preservation:** items appear in source order.
- **Totality:** ``parse`` never raises for malformed content. Lines that do not
  decode are kept as raw lines instead.
- **Purity:** ``render`` must not mutate the items it is given; any display
  substitutions (escaping, space markers) apply to the output only.

Note: This is a **structural** type (``typing.Protocol``). Any class with
matching attributes/methods is considered compatible without explicit
inheritance.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from typing_extensions import Protocol, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IParserRenderer(Protocol[T]):
    """
    Runtime-checkable protocol for paired parser/renderer implementations.

    Attributes
    ----------
    record_length : int
        Width of one fixed-width record handled by this implementation.
    """

    record_length: int

    def parse(self, unparsed_string: str) -> T:
        """
        Parse a complete textual document.

        Parameters
        ----------
        unparsed_string : str
            The full contents of the source document. Line endings ``\\n`` and
            ``\\r\\n`` are treated equivalently; empty lines are skipped.

        Returns
        -------
        T
            The decoded document, items in document order.
        """

    def render(self, obj: Iterable[T] | T) -> str:
        """
        Render one document (or several, concatenated) to display text.
        """
