"""Sequence assignment, reordering and versioning of elements.

Every operation opens its own session(s) from the session maker.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sequencer.models.sequence_element import SequenceElement
from sequencer.services.sequence.exceptions import SequenceElementNotFound
from sequencer.services.sequence.repository import SequenceElementRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReorderEntry:
    """New position for one element of the reordered type."""

    element_id: int
    new_sequence: int


class SequenceService:
    """Service for sequence and version operations."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker

    async def generate_sequence_number(self, element_type: str, element_id: int) -> SequenceElement:
        """Append a new element at the end of its type's sequence.

        The count and the insert are separate statements with no lock between
        them: two concurrent calls for the same type can observe the same count
        and both store the same sequence number. No uniqueness check is made on
        (element_type, element_id) either.
        """
        async with self.session_maker() as session:
            repository = SequenceElementRepository(session)
            count = await repository.count_by_type(element_type)
            element = await repository.insert(
                SequenceElement(
                    element_type=element_type,
                    element_id=element_id,
                    sequence_number=count + 1,
                    version_number=1,
                )
            )

        logger.info(
            "Assigned sequence number",
            element_type=element_type,
            element_id=element_id,
            sequence_number=element.sequence_number,
            id=element.id,
        )
        return element

    async def reorder_elements(self, element_type: str, entries: Sequence[ReorderEntry]) -> list[int]:
        """Move each listed element to its new sequence number.

        Updates run concurrently, each in its own session and transaction.
        An entry that matches no row is a no-op. If any update fails, the
        exception is raised once all updates have finished; updates that
        already committed stay applied.

        Returns:
            Affected row count per entry, in input order.
        """
        results = await asyncio.gather(
            *[self._update_sequence(element_type, entry) for entry in entries],
            return_exceptions=True,
        )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        affected = [r for r in results if isinstance(r, int)]
        logger.info(
            "Reordered elements",
            element_type=element_type,
            requested=len(entries),
            matched=sum(1 for r in affected if r > 0),
        )
        return affected

    async def _update_sequence(self, element_type: str, entry: ReorderEntry) -> int:
        async with self.session_maker() as session:
            repository = SequenceElementRepository(session)
            return await repository.update_sequence_where(element_type, entry.element_id, entry.new_sequence)

    async def create_version(self, element_type: str, element_id: int, new_version_text: str) -> SequenceElement:
        """Stamp a new version on an element by bumping its version number.

        The version text is not stored; only the counter changes. The increment
        happens in the database, so concurrent calls never lose a version.

        Raises:
            SequenceElementNotFound: no element matches the type and id
        """
        async with self.session_maker() as session:
            repository = SequenceElementRepository(session)
            element = await repository.find_one_where(element_type, element_id)
            if element is None:
                logger.warning("Element not found for versioning", element_type=element_type, element_id=element_id)
                raise SequenceElementNotFound(element_type, element_id)

            element = await repository.increment_version(element)

        logger.info(
            "Created version",
            element_type=element_type,
            element_id=element_id,
            version_number=element.version_number,
            text_length=len(new_version_text),
        )
        return element
