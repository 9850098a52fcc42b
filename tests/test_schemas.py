"""
Tests for note/section validation and error message translation.
"""

import pytest
from pydantic import ValidationError

from app.schemas.note import MESSAGES as NOTE_MESSAGES
from app.schemas.note import Note, WritableNote
from app.schemas.section import WritableSection
from app.schemas.validation import translate_errors


def messages(exc_info) -> str:
    return translate_errors(exc_info.value.errors())


class TestWritableNote:

    def test_valid_note(self):
        note = WritableNote.model_validate({
            "name": "groceries",
            "desc": "weekly list",
            "labels": ["home"],
            "metadata": {"color": "green"},
        })
        assert note.description == "weekly list"

    @pytest.mark.parametrize("payload, expected", [
        ({}, "name is required field"),
        ({"name": ""}, "name is required field"),
        ({"name": None}, "name is required field"),
        ({"name": "   "}, "name can't be empty value"),
        ({"name": "n" * 101}, "name must be less than 100 chars"),
        ({"name": "n", "desc": "d" * 251}, "desc must be less than 250 chars"),
        ({"name": "n", "labels": list("abcdef")}, "label count can't be more than 5"),
        ({"name": "n", "labels": ["l" * 21]}, "label must be less than 20 chars"),
        (
            {"name": "n", "metadata": {f"k{i}": "v" for i in range(21)}},
            "metadata count can't be more than 20",
        ),
        (
            {"name": "n", "metadata": {"k": "v" * 101}},
            "metadata key and value must be less than 20 and 100 chars respectively",
        ),
    ])
    def test_rule_messages(self, payload, expected):
        with pytest.raises(ValidationError) as exc_info:
            WritableNote.model_validate(payload)
        assert messages(exc_info) == expected

    def test_failing_fields_joined(self):
        with pytest.raises(ValidationError) as exc_info:
            WritableNote.model_validate({"name": "", "labels": ["l" * 21]})
        assert messages(exc_info) == "name is required field, label must be less than 20 chars"

    def test_wrong_type_uses_default_message(self):
        with pytest.raises(ValidationError) as exc_info:
            WritableNote.model_validate({"name": "n", "labels": "not-a-list"})
        assert messages(exc_info) == "validation for 'labels.list_type' failed"

    def test_messages_are_immutable(self):
        with pytest.raises(TypeError):
            NOTE_MESSAGES["name.required"] = "changed"

    def test_sanitized(self):
        note = WritableNote(name=" n ", description=" d ", labels=[" a", " "], metadata={" k ": " v ", " ": "x"})
        clean = note.sanitized()

        assert clean.name == "n"
        assert clean.description == "d"
        assert clean.labels == ["a"]
        assert clean.metadata == {"k": "v"}
        assert note.name == " n "


class TestWritableSection:

    def test_null_name(self):
        with pytest.raises(ValidationError) as exc_info:
            WritableSection.model_validate({"name": None})
        assert messages(exc_info) == "name is required field"

    def test_data_count(self):
        with pytest.raises(ValidationError) as exc_info:
            WritableSection.model_validate({"name": "s", "data": {f"k{i}": "v" for i in range(51)}})
        assert messages(exc_info) == "data count can't be more than 50"

    def test_data_value_length(self):
        with pytest.raises(ValidationError) as exc_info:
            WritableSection.model_validate({"name": "s", "data": {"k": "v" * 2001}})
        assert messages(exc_info) == "data key and value must be less than 50 and 2000 chars respectively"

    def test_limits_are_inclusive(self):
        section = WritableSection.model_validate({
            "name": "n" * 100,
            "labels": ["l" * 20] * 5,
            "data": {"k" * 50: "v" * 2000},
        })
        assert len(section.name) == 100


class TestNote:

    def test_empty_fields_excluded(self):
        data = Note(id="1", name="n").model_dump(by_alias=True, exclude_none=True)
        assert data == {"id": "1", "name": "n"}

    def test_aliases(self):
        data = Note(id="1", description="d").model_dump(by_alias=True, exclude_none=True)
        assert data == {"id": "1", "desc": "d"}
