"""Sequence domain exceptions."""

from sequencer.services.exceptions import NotFoundError


class SequenceElementNotFound(NotFoundError):
    """No element matches the given type and id."""

    def __init__(self, element_type: str, element_id: int):
        self.element_type = element_type
        self.element_id = element_id
        super().__init__(f"No {element_type!r} element with id {element_id}")
