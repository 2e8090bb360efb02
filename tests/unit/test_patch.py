from __future__ import annotations

import pytest

from hemis_legacy.adapter import decode, merge_patch
from hemis_legacy.domain import StudentDto, TeacherDto


def test_merge_applies_only_sent_fields(student):
    patch = decode({"phone": "+998977777777", "_university": None, "status": "GRADUATED"}, StudentDto)
    merged = merge_patch(student, patch)

    assert merged.phone == "+998977777777"
    assert merged.status.name == "GRADUATED"
    assert merged.university == student.university
    assert merged.firstname == student.firstname
    # existing record is not mutated
    assert student.phone == "+998901234567"


def test_empty_patch_returns_equal_copy(student):
    merged = merge_patch(student, decode({}, StudentDto))
    assert merged is not student
    assert merged.model_dump() == student.model_dump()


def test_mismatched_types_are_rejected(student):
    with pytest.raises(TypeError):
        merge_patch(student, TeacherDto(firstname="x"))
