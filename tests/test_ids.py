"""Tests for item ID generators."""

import random
import re
from unittest import mock

from checklist_editor.ids import (
    IdGenerator,
    SequentialIdGenerator,
    UuidGenerator,
    create_id_generator,
)
from checklist_editor.models import IdStyle

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


class TestUuidGenerator:
    """Tests for UuidGenerator."""

    def test_format_is_version_4_style(self) -> None:
        """Generated IDs look like v4 UUIDs."""
        generator = UuidGenerator()
        for _ in range(50):
            assert UUID_PATTERN.match(generator.next())

    def test_ids_are_distinct(self) -> None:
        """Repeated calls never return the same ID."""
        generator = UuidGenerator()
        ids = [generator.next() for _ in range(2000)]
        assert len(set(ids)) == len(ids)

    def test_keeps_no_history(self) -> None:
        """Issuing IDs does not grow the generator's state."""
        rng = random.Random(42)
        generator = UuidGenerator(rng=rng)
        for _ in range(5000):
            generator.next()

        assert vars(generator) == {"_rng": rng}

    def test_digits_come_from_the_rng(self) -> None:
        """Two generators seeded alike agree within the same millisecond."""
        a = UuidGenerator(rng=random.Random(7))
        b = UuidGenerator(rng=random.Random(7))
        with mock.patch("checklist_editor.ids.time.time_ns", return_value=10**15):
            assert a.next() == b.next()


class TestSequentialIdGenerator:
    """Tests for SequentialIdGenerator."""

    def test_counts_from_one(self) -> None:
        generator = SequentialIdGenerator()
        assert [generator.next() for _ in range(3)] == ["item-1", "item-2", "item-3"]

    def test_custom_prefix_and_start(self) -> None:
        generator = SequentialIdGenerator(prefix="row", start=10)
        assert generator.next() == "row-10"
        assert generator.next() == "row-11"

    def test_instances_are_independent(self) -> None:
        """Two generators do not share a counter."""
        a = SequentialIdGenerator()
        b = SequentialIdGenerator()
        a.next()
        assert b.next() == "item-1"


class TestCreateIdGenerator:
    """Tests for create_id_generator."""

    def test_uuid_style(self) -> None:
        generator = create_id_generator(IdStyle.UUID)
        assert isinstance(generator, UuidGenerator)
        assert isinstance(generator, IdGenerator)

    def test_sequential_style(self) -> None:
        generator = create_id_generator(IdStyle.SEQUENTIAL)
        assert isinstance(generator, SequentialIdGenerator)
