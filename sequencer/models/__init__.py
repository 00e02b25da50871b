"""Database models."""

from sqlmodel import SQLModel

from sequencer.models.sequence_element import SequenceElement

__all__ = [
    "SQLModel",
    "SequenceElement",
]
