"""
Domain package for the HEMIS legacy adapter.

Exports the record types served through the CUBA REST layer.
Keep this package focused on data definitions.
"""

from hemis_legacy.domain.models import (
    StudentDto,
    StudentMetaDto,
    StudentStatus,
    TeacherDto,
    UniversityDto,
)

__all__ = [
    "StudentDto",
    "StudentMetaDto",
    "StudentStatus",
    "TeacherDto",
    "UniversityDto",
]
