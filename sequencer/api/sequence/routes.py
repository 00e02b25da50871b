"""Sequence API endpoints."""

from fastapi import APIRouter, HTTPException, Response, status

from sequencer.api.sequence.dependencies import SequenceServiceDep
from sequencer.api.sequence.schemas import (
    ReorderRequest,
    SequenceElementResponse,
    SequenceRequest,
    VersionRequest,
)
from sequencer.services.sequence.exceptions import SequenceElementNotFound
from sequencer.services.sequence.sequence_service import ReorderEntry

router = APIRouter(prefix="/sequence", tags=["sequence"])


@router.post(
    "",
    response_model=SequenceElementResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="generateSequenceNumber",
)
async def generate_sequence_number(
    body: SequenceRequest,
    service: SequenceServiceDep,
) -> SequenceElementResponse:
    """Create an element at the end of its type's sequence."""
    element = await service.generate_sequence_number(body.element_type, body.element_id)
    return SequenceElementResponse.from_model(element)


@router.post("/reorder", status_code=status.HTTP_200_OK, operation_id="reorderElements")
async def reorder_elements(
    body: ReorderRequest,
    service: SequenceServiceDep,
) -> Response:
    """Set new sequence numbers for elements of one type.

    Entries that match no element are ignored. Returns an empty body.
    """
    await service.reorder_elements(
        body.element_type,
        [ReorderEntry(element_id=e.element_id, new_sequence=e.new_sequence) for e in body.elements],
    )
    return Response(status_code=status.HTTP_200_OK)


@router.post("/version", response_model=SequenceElementResponse, operation_id="createVersion")
async def create_version(
    body: VersionRequest,
    service: SequenceServiceDep,
) -> SequenceElementResponse:
    """Increment the version number of an element."""
    try:
        element = await service.create_version(body.element_type, body.element_id, body.new_version_data.text)
        return SequenceElementResponse.from_model(element)
    except SequenceElementNotFound:
        raise HTTPException(status_code=404, detail="Element not found")
