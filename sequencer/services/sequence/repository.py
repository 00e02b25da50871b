"""Query operations on the sequence_elements table."""

from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import set_committed_value
from sqlmodel import col, select

from sequencer.models.sequence_element import SequenceElement


class SequenceElementRepository:
    """The four query shapes the sequence service needs, bound to one session.

    Writes commit immediately; there is no unit of work spanning calls.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count_by_type(self, element_type: str) -> int:
        statement = select(func.count()).select_from(SequenceElement).where(SequenceElement.element_type == element_type)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def insert(self, element: SequenceElement) -> SequenceElement:
        self.session.add(element)
        await self.session.commit()
        await self.session.refresh(element)
        return element

    async def update_sequence_where(self, element_type: str, element_id: int, new_sequence: int) -> int:
        """Set sequence_number on every matching row. Returns the affected row count."""
        statement = (
            update(SequenceElement)
            .where(
                col(SequenceElement.element_type) == element_type,
                col(SequenceElement.element_id) == element_id,
            )
            .values(sequence_number=new_sequence)
        )
        result = await self.session.execute(statement)
        await self.session.commit()
        return result.rowcount  # type: ignore[attr-defined]

    async def find_one_where(self, element_type: str, element_id: int) -> SequenceElement | None:
        """First matching row, in whatever order the database returns them."""
        statement = select(SequenceElement).where(
            SequenceElement.element_type == element_type,
            SequenceElement.element_id == element_id,
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def increment_version(self, element: SequenceElement) -> SequenceElement:
        """Add one to version_number in the database, not from the loaded value.

        Concurrent calls each advance the counter once; the element gets the
        number its own UPDATE produced.
        """
        statement = (
            update(SequenceElement)
            .where(col(SequenceElement.id) == element.id)
            .values(version_number=col(SequenceElement.version_number) + 1)
            .returning(col(SequenceElement.version_number))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        version_number: int = result.scalar_one()
        await self.session.commit()
        set_committed_value(element, "version_number", version_number)
        return element

    async def save(self, element: SequenceElement) -> SequenceElement:
        self.session.add(element)
        await self.session.commit()
        await self.session.refresh(element)
        return element
