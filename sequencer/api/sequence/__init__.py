"""Sequence API package."""

from sequencer.api.sequence.routes import router

__all__ = ["router"]
