"""Codec applied to symptom notes at rest."""

from typing import Protocol


class NotesCodec(Protocol):
    """Reversible transform between plaintext notes and their stored form."""

    def encode(self, plaintext: str) -> str:
        """Return the stored form of plaintext notes."""

    def decode(self, stored: str) -> str:
        """Return plaintext notes from their stored form."""


class PlainNotesCodec(NotesCodec):
    """Stores notes unchanged."""

    def encode(self, plaintext: str) -> str:
        return plaintext

    def decode(self, stored: str) -> str:
        return stored
