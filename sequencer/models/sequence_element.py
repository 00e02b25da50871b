"""SequenceElement database model."""

from sqlalchemy import BigInteger, Column
from sqlmodel import Field, SQLModel
from ulid import ULID

from sequencer.models.types import ULIDType


def _ulid() -> str:
    """Generate a new ULID string."""
    return str(ULID())


class SequenceElement(SQLModel, table=True):
    """Position and version stamp of an external element within its type.

    (element_type, element_id) is expected to be unique but is not enforced;
    callers own that invariant.
    """

    __tablename__ = "sequence_elements"

    # ULID stored as PostgreSQL UUID
    id: str = Field(
        default_factory=_ulid,
        max_length=26,
        sa_column=Column(ULIDType, primary_key=True),
    )
    element_type: str = Field(nullable=False)
    element_id: int = Field(nullable=False, sa_type=BigInteger)
    sequence_number: int = Field(nullable=False, sa_type=BigInteger)
    version_number: int = Field(default=1, nullable=False, sa_type=BigInteger)
