# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Free-standing and type-attached notes."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Note:
    """A note with a stable ``N<index>`` identifier.

    Attributes:
        id: Identifier assigned at insertion time.
        text: Free text shown in the note.
        targets: Names of the types the note is attached to.
    """

    id: str
    text: str
    targets: tuple[str, ...] = ()

    def render(self, rename: Callable[[str], str] | None = None) -> str:
        """Return the note declaration followed by one association line per target."""
        lines = [f'note "{self.text}" as {self.id}']
        for target in self.targets:
            name = rename(target) if rename else target
            lines.append(f"{self.id} .. {name}")
        return "\n".join(lines)


class NoteSet:
    """Ordered collection of notes."""

    def __init__(self) -> None:
        self._notes: list[Note] = []

    def add_free_note(self, text: str) -> str:
        """Append a note without attachments and return its id."""
        return self._append(text, ())

    def add_attached_note(self, text: str, *targets: str) -> str:
        """Append a note attached to each of *targets* and return its id."""
        return self._append(text, targets)

    def all(self, rename: Callable[[str], str] | None = None) -> list[str]:
        """Return the formatted note blocks in insertion order.

        Args:
            rename: Optional mapping applied to each attachment target, used to
                turn stored names into display names.
        """
        return [note.render(rename) for note in self._notes]

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def _append(self, text: str, targets: tuple[str, ...]) -> str:
        note = Note(id=f"N{len(self._notes)}", text=text, targets=tuple(targets))
        self._notes.append(note)
        return note.id
