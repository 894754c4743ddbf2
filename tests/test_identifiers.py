"""
Tests for UUID generation and validation.
"""

import uuid as stdlib_uuid

from kittylib import generate_uuid, is_uuid
from kittylib import api


class TestGenerateUuid:

    def test_generated_values_validate(self):
        assert all(is_uuid(generate_uuid()) for _ in range(1000))

    def test_generated_values_are_unique(self):
        assert len({generate_uuid() for _ in range(1000)}) == 1000

    def test_canonical_form(self):
        value = generate_uuid()
        parsed = stdlib_uuid.UUID(value)
        assert parsed.version == 4
        assert str(parsed) == value

    def test_uuid_alias(self):
        assert is_uuid(api.uuid())


class TestIsUuid:

    def test_rejects_garbage(self):
        assert not is_uuid("not-a-uuid")
        assert not is_uuid("")

    def test_accepts_uppercase(self):
        assert is_uuid(generate_uuid().upper())

    def test_rejects_other_versions(self):
        assert not is_uuid(str(stdlib_uuid.uuid1()))
        assert not is_uuid("123e4567-e89b-12d3-a456-426614174000")

    def test_rejects_wrong_variant(self):
        assert not is_uuid("123e4567-e89b-42d3-c456-426614174000")

    def test_rejects_surrounding_text(self):
        value = generate_uuid()
        assert not is_uuid(value + "\n")
        assert not is_uuid(" " + value)
        assert not is_uuid("{" + value + "}")

    def test_rejects_non_strings(self):
        assert not is_uuid(None)
        assert not is_uuid(stdlib_uuid.uuid4())
