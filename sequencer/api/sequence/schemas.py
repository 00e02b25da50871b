"""API schemas for sequence endpoints.

Field names are camelCase on the wire and snake_case in Python.
"""

from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel

from sequencer.models.sequence_element import SequenceElement


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Request Schemas
# =============================================================================


class SequenceRequest(CamelModel):
    """Element to append to its type's sequence."""

    element_type: str
    element_id: StrictInt


class ReorderElement(CamelModel):
    element_id: StrictInt
    new_sequence: StrictInt


class ReorderRequest(CamelModel):
    """New positions for elements of one type."""

    element_type: str
    elements: list[ReorderElement]


class NewVersionData(CamelModel):
    text: str


class VersionRequest(CamelModel):
    """Element to stamp with a new version."""

    element_type: str
    element_id: StrictInt
    new_version_data: NewVersionData


# =============================================================================
# Response Schemas
# =============================================================================


class SequenceElementResponse(CamelModel):
    """Sequence element response schema."""

    id: str
    element_type: str
    element_id: StrictInt
    sequence_number: int
    version_number: int

    @classmethod
    def from_model(cls, element: SequenceElement) -> "SequenceElementResponse":
        """Create response from SequenceElement model."""
        return cls(
            id=element.id,
            element_type=element.element_type,
            element_id=element.element_id,
            sequence_number=element.sequence_number,
            version_number=element.version_number,
        )
