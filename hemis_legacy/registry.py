"""
Registry of CUBA entity names and the record types that back them.

Entity controllers address records by their legacy CUBA entity name
(``hemishe_EStudent``); the registry resolves such a name to the pydantic
record type used for decoding request bodies.
"""

from __future__ import annotations

from typing import Dict, List, Type

from pydantic import BaseModel

from hemis_legacy.adapter.descriptors import describe
from hemis_legacy.domain.models import StudentDto, StudentMetaDto, TeacherDto, UniversityDto

STUDENT = "hemishe_EStudent"
TEACHER = "hemishe_ETeacher"
UNIVERSITY = "hemishe_EUniversity"
STUDENT_META = "hemishe_EStudentMeta"

_ENTITIES: Dict[str, Type[BaseModel]] = {
    STUDENT: StudentDto,
    TEACHER: TeacherDto,
    UNIVERSITY: UniversityDto,
    STUDENT_META: StudentMetaDto,
}


def register_entity(name: str, record_type: Type[BaseModel]) -> None:
    """
    Register (or replace) the record type for a CUBA entity name.

    The descriptor table is built immediately so an unsupported type fails at
    registration rather than on the first request.
    """
    describe(record_type)
    _ENTITIES[name] = record_type


def available_entities() -> List[str]:
    """List registered CUBA entity names."""
    return sorted(_ENTITIES)


def resolve_entity(name: str) -> Type[BaseModel]:
    if name not in _ENTITIES:
        raise ValueError(f"Unknown entity '{name}'. Available: {', '.join(available_entities())}")
    return _ENTITIES[name]


__all__ = [
    "STUDENT",
    "STUDENT_META",
    "TEACHER",
    "UNIVERSITY",
    "available_entities",
    "register_entity",
    "resolve_entity",
]
