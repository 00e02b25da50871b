"""FastAPI dependencies for service injection."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sequencer.db import get_session_maker
from sequencer.services.sequence.sequence_service import SequenceService


async def get_sequence_service(
    session_maker: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_maker)],
) -> SequenceService:
    """Get a SequenceService bound to the application's session maker."""
    return SequenceService(session_maker)


SequenceServiceDep = Annotated[SequenceService, Depends(get_sequence_service)]
