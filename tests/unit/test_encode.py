from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from hemis_legacy.adapter import encode, encode_list
from hemis_legacy.domain import StudentDto, StudentStatus, UniversityDto

STUDENT_TAG = "hemishe_EStudent"
UNIVERSITY_TAG = "hemishe_EUniversity"
CUBA_TIMESTAMP = "2025-11-28 21:46:40.863"
ZERO_PADDED_TIMESTAMP = "2025-12-01 08:00:00.005"


class _Unreadable(BaseModel):
    code: str
    name: Optional[str] = None


class _BrokenComputed(BaseModel):
    name: Optional[str] = None

    @computed_field(alias="label")  # type: ignore[prop-decorator]
    @property
    def label(self) -> str:
        raise RuntimeError("lookup failed")


def test_none_record_encodes_to_none():
    assert encode(None, STUDENT_TAG) is None


def test_metadata_keys_come_first(student):
    document = encode(student, STUDENT_TAG, include_nulls=False, view=None)
    keys = list(document)
    assert keys[:2] == ["_entityName", "_instanceName"]
    assert document["_entityName"] == STUDENT_TAG
    assert document["_instanceName"] == "Karimov Anvar Rustamovich"


def test_fields_follow_declaration_order(student):
    document = encode(student, STUDENT_TAG)
    keys = list(document)[2:]
    assert keys[:4] == ["id", "code", "firstname", "lastname"]
    assert keys.index("_soato") < keys.index("status") < keys.index("createTs")
    # computed fields are appended after the stored ones
    assert keys[-1] == "full_name"


def test_wire_aliases_are_used(student):
    document = encode(student, STUDENT_TAG)
    assert document["_university"] == "354"
    assert document["_current_soato"] == "1726264"
    assert "university" not in document
    assert "create_ts" not in document


def test_datetime_uses_cuba_format(student):
    document = encode(student, STUDENT_TAG)
    assert document["createTs"] == CUBA_TIMESTAMP
    assert document["updateTs"] == ZERO_PADDED_TIMESTAMP


def test_scalar_conversions(student):
    document = encode(student, STUDENT_TAG)
    assert document["id"] == "9dbdbe96-88e2-f6c7-453a-298c7187311c"
    assert document["birthday"] == "1999-01-30"
    assert document["status"] == "ACTIVE"
    assert document["version"] == 3
    assert document["active"] is True
    assert document["verified"] is False
    assert document["points"] == "87.5"


def test_enum_emits_symbolic_name_not_value():
    document = encode(StudentDto(status=StudentStatus.GRADUATED), STUDENT_TAG)
    assert document["status"] == "GRADUATED"


def test_null_fields_are_omitted_by_default(sparse_student):
    document = encode(sparse_student, STUDENT_TAG, include_nulls=False)
    assert "phone" not in document
    assert "_university" not in document
    assert "createTs" not in document
    assert document["firstname"] == "Dilnoza"


def test_null_fields_are_emitted_when_requested(sparse_student):
    document = encode(sparse_student, STUDENT_TAG, include_nulls=True)
    assert "phone" in document and document["phone"] is None
    assert "_university" in document and document["_university"] is None
    assert document["firstname"] == "Dilnoza"


def test_computed_field_in_default_view(sparse_student):
    document = encode(sparse_student, STUDENT_TAG)
    assert document["full_name"] == "Usmonova Dilnoza"


def test_computed_null_follows_null_policy():
    empty = StudentDto()
    assert "full_name" not in encode(empty, STUDENT_TAG, include_nulls=False)
    document = encode(empty, STUDENT_TAG, include_nulls=True)
    assert "full_name" in document and document["full_name"] is None


def test_local_view_drops_references_and_housekeeping(student):
    document = encode(student, STUDENT_TAG, include_nulls=True, view="_local")
    keys = list(document)
    assert keys[:2] == ["_entityName", "_instanceName"]
    for key in keys[2:]:
        assert not key.startswith("_")
        assert key not in {"version", "fullname"}
    assert "full_name" not in document
    assert document["firstname"] == "Anvar"
    assert document["createTs"] == CUBA_TIMESTAMP


class _Named(BaseModel):
    name: Optional[str] = None
    fullname: Optional[str] = None
    full_name: Optional[str] = None
    display: Optional[str] = Field(None, alias="fullName")


def test_local_view_drops_only_the_exact_fullname_key():
    record = _Named(name="n", fullname="a", full_name="b", fullName="c")
    default = encode(record, "hemishe_Named")
    assert default["fullname"] == "a"
    local = encode(record, "hemishe_Named", view="_local")
    assert "fullname" not in local
    assert local["full_name"] == "b"
    assert local["fullName"] == "c"
    assert local["name"] == "n"


def test_unknown_view_behaves_like_default(student):
    assert encode(student, STUDENT_TAG, view="eStudent-view") == encode(student, STUDENT_TAG)


def test_metadata_survives_local_view_on_empty_record():
    document = encode(UniversityDto(), UNIVERSITY_TAG, include_nulls=False, view="_local")
    assert document["_entityName"] == UNIVERSITY_TAG
    assert document["_instanceName"] is not None
    assert list(document) == ["_entityName", "_instanceName"]


def test_unreadable_field_is_skipped_and_logged(caplog):
    record = _Unreadable.model_construct(name="Fizika")
    with caplog.at_level(logging.WARNING, logger="hemis_legacy.adapter.transcoder"):
        document = encode(record, "hemishe_Test", include_nulls=True)
    assert "code" not in document
    assert document["name"] == "Fizika"
    assert any("Cannot read field: code" in r.getMessage() for r in caplog.records)


def test_failing_computed_field_is_skipped_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="hemis_legacy.adapter.transcoder"):
        document = encode(_BrokenComputed(name="x"), "hemishe_Test", include_nulls=True)
    assert "label" not in document
    assert document["name"] == "x"
    assert any("Cannot invoke computed field: label" in r.getMessage() for r in caplog.records)


def test_encode_list_preserves_order(student, sparse_student):
    third = StudentDto(firstname="Bobur", lastname="Aliyev")
    documents = encode_list([student, sparse_student, third], STUDENT_TAG)
    assert [d["_instanceName"] for d in documents] == [
        "Karimov Anvar Rustamovich",
        "Usmonova Dilnoza",
        "Aliyev Bobur",
    ]


def test_encode_list_of_none_is_empty():
    assert encode_list(None, STUDENT_TAG) == []


def test_encode_list_applies_view(student):
    (document,) = encode_list([student], STUDENT_TAG, True, "_local")
    assert "_university" not in document
    assert "version" not in document


def test_datetime_without_milliseconds_still_has_three_digits():
    record = StudentDto(create_ts=datetime(2024, 1, 2, 3, 4, 5))
    assert encode(record, STUDENT_TAG)["createTs"] == "2024-01-02 03:04:05.000"
