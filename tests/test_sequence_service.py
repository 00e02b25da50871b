"""Tests for SequenceService against a sqlite database."""

import asyncio

import pytest

from sequencer.services.sequence.exceptions import SequenceElementNotFound
from sequencer.services.sequence.repository import SequenceElementRepository
from sequencer.services.sequence.sequence_service import ReorderEntry


class TestGenerateSequenceNumber:
    """Tests for generate_sequence_number."""

    async def test_sequential_calls_number_from_one(self, service):
        """Sequential calls for one type yield 1..N in call order."""
        elements = [await service.generate_sequence_number("photo", element_id) for element_id in range(10, 15)]

        assert [e.sequence_number for e in elements] == [1, 2, 3, 4, 5]
        assert [e.element_id for e in elements] == [10, 11, 12, 13, 14]

    async def test_new_element_starts_at_version_one(self, service):
        element = await service.generate_sequence_number("task", 7)

        assert element.version_number == 1
        assert element.element_type == "task"
        assert element.element_id == 7
        assert len(element.id) == 26

    async def test_types_are_numbered_independently(self, service):
        await service.generate_sequence_number("photo", 1)
        await service.generate_sequence_number("photo", 2)

        task = await service.generate_sequence_number("task", 1)

        assert task.sequence_number == 1

    async def test_duplicate_pair_creates_second_row(self, service, fetch_elements):
        """No uniqueness check: the same type/id pair gets two rows."""
        first = await service.generate_sequence_number("photo", 5)
        second = await service.generate_sequence_number("photo", 5)

        assert first.id != second.id
        assert (first.sequence_number, second.sequence_number) == (1, 2)
        assert len(await fetch_elements()) == 2


class TestReorderElements:
    """Tests for reorder_elements."""

    async def test_updates_only_matching_rows(self, service, fetch_elements):
        for element_id in (4, 5, 6):
            await service.generate_sequence_number("photo", element_id)
        await service.generate_sequence_number("task", 5)

        affected = await service.reorder_elements("photo", [ReorderEntry(element_id=5, new_sequence=3)])

        assert affected == [1]
        by_key = {(e.element_type, e.element_id): e.sequence_number for e in await fetch_elements()}
        assert by_key == {
            ("photo", 4): 1,
            ("photo", 5): 3,
            ("photo", 6): 3,
            ("task", 5): 1,
        }

    async def test_unknown_element_is_a_noop(self, service, fetch_elements):
        await service.generate_sequence_number("photo", 1)

        affected = await service.reorder_elements("photo", [ReorderEntry(element_id=99, new_sequence=8)])

        assert affected == [0]
        assert [e.sequence_number for e in await fetch_elements()] == [1]

    async def test_applies_every_entry(self, service, fetch_elements):
        for element_id in (1, 2, 3):
            await service.generate_sequence_number("photo", element_id)

        affected = await service.reorder_elements(
            "photo",
            [
                ReorderEntry(element_id=1, new_sequence=3),
                ReorderEntry(element_id=2, new_sequence=1),
                ReorderEntry(element_id=3, new_sequence=2),
            ],
        )

        assert affected == [1, 1, 1]
        positions = {e.element_id: e.sequence_number for e in await fetch_elements()}
        assert positions == {1: 3, 2: 1, 3: 2}

    async def test_updates_all_duplicate_rows(self, service, fetch_elements):
        await service.generate_sequence_number("photo", 5)
        await service.generate_sequence_number("photo", 5)

        affected = await service.reorder_elements("photo", [ReorderEntry(element_id=5, new_sequence=9)])

        assert affected == [2]
        assert [e.sequence_number for e in await fetch_elements()] == [9, 9]

    async def test_empty_batch(self, service):
        assert await service.reorder_elements("photo", []) == []

    async def test_failure_propagates_without_undoing_siblings(self, service, fetch_elements, monkeypatch):
        """A failing entry raises, but updates that succeeded stay applied."""
        for element_id in (1, 2):
            await service.generate_sequence_number("photo", element_id)

        original = SequenceElementRepository.update_sequence_where

        async def flaky_update(self, element_type, element_id, new_sequence):
            if element_id == 2:
                raise RuntimeError("connection lost")
            return await original(self, element_type, element_id, new_sequence)

        monkeypatch.setattr(SequenceElementRepository, "update_sequence_where", flaky_update)

        with pytest.raises(RuntimeError, match="connection lost"):
            await service.reorder_elements(
                "photo",
                [
                    ReorderEntry(element_id=1, new_sequence=7),
                    ReorderEntry(element_id=2, new_sequence=8),
                ],
            )

        positions = {e.element_id: e.sequence_number for e in await fetch_elements()}
        assert positions == {1: 7, 2: 2}


class TestCreateVersion:
    """Tests for create_version."""

    async def test_increments_version_and_keeps_identity(self, service):
        created = await service.generate_sequence_number("photo", 5)

        versioned = await service.create_version("photo", 5, "retouched")

        assert versioned.version_number == 2
        assert versioned.id == created.id
        assert versioned.element_type == "photo"
        assert versioned.element_id == 5
        assert versioned.sequence_number == created.sequence_number

    async def test_each_call_adds_exactly_one(self, service, fetch_elements):
        await service.generate_sequence_number("photo", 5)

        for _ in range(3):
            await service.create_version("photo", 5, "edit")

        [stored] = await fetch_elements()
        assert stored.version_number == 4

    async def test_concurrent_versions_are_all_counted(self, service, fetch_elements):
        """Every successful call advances the stored counter exactly once."""
        await service.generate_sequence_number("photo", 5)

        results = await asyncio.gather(*[service.create_version("photo", 5, f"edit {n}") for n in range(5)])

        assert sorted(r.version_number for r in results) == [2, 3, 4, 5, 6]
        [stored] = await fetch_elements()
        assert stored.version_number == 6

    async def test_missing_element_raises_and_changes_nothing(self, service, fetch_elements):
        await service.generate_sequence_number("photo", 5)

        with pytest.raises(SequenceElementNotFound) as exc_info:
            await service.create_version("photo", 6, "edit")

        assert exc_info.value.element_type == "photo"
        assert exc_info.value.element_id == 6
        [stored] = await fetch_elements()
        assert stored.version_number == 1

    async def test_type_must_match(self, service):
        await service.generate_sequence_number("photo", 5)

        with pytest.raises(SequenceElementNotFound):
            await service.create_version("task", 5, "edit")
