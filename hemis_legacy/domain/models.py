"""
HEMIS record types served through the CUBA REST layer.

Wire keys follow the legacy JSON exactly: where the old API used a key that is
not a valid Python attribute (or one starting with an underscore, which marks
a reference to another entity), the key is declared as the field's alias.
Every field has a default so the adapter can build patches from partial
request bodies.
"""
from __future__ import annotations

import enum
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, computed_field

_MODEL_CONFIG = {
    "populate_by_name": True,
}


class StudentStatus(enum.Enum):
    ACTIVE = "11"
    ACADEMIC_LEAVE = "12"
    EXPELLED = "13"
    GRADUATED = "14"


class StudentDto(BaseModel):
    """
    Student record (CUBA entity ``hemishe_EStudent``).
    """

    id: Optional[UUID] = Field(None, description="Primary key.")
    code: Optional[str] = Field(None, description="Student code.")
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    fathername: Optional[str] = None
    pinfl: Optional[str] = Field(None, description="Personal identification number.")
    birthday: Optional[date] = None
    serial_number: Optional[str] = Field(None, description="Passport serial and number.")
    phone: Optional[str] = None
    address: Optional[str] = None
    current_address: Optional[str] = None

    # References to classifiers and other entities
    soato: Optional[str] = Field(None, alias="_soato")
    current_soato: Optional[str] = Field(None, alias="_current_soato")
    university: Optional[str] = Field(None, alias="_university")
    faculty: Optional[str] = Field(None, alias="_faculty")
    speciality: Optional[str] = Field(None, alias="_speciality")
    student_status: Optional[str] = Field(None, alias="_student_status")
    payment_form: Optional[str] = Field(None, alias="_payment_form")
    education_type: Optional[str] = Field(None, alias="_education_type")
    education_form: Optional[str] = Field(None, alias="_education_form")
    course: Optional[str] = Field(None, alias="_course")
    education_year: Optional[str] = Field(None, alias="_education_year")
    gender: Optional[str] = Field(None, alias="_gender")
    nationality: Optional[str] = Field(None, alias="_nationality")
    citizenship: Optional[str] = Field(None, alias="_citizenship")
    country: Optional[str] = Field(None, alias="_country")

    status: Optional[StudentStatus] = None
    active: Optional[bool] = None
    verified: Optional[bool] = None
    points: Optional[str] = None

    # Audit
    version: Optional[int] = Field(None, description="Optimistic lock counter.")
    create_ts: Optional[datetime] = Field(None, alias="createTs")
    update_ts: Optional[datetime] = Field(None, alias="updateTs")

    model_config = _MODEL_CONFIG

    @computed_field(alias="full_name")  # type: ignore[prop-decorator]
    @property
    def full_name(self) -> Optional[str]:
        parts = [p for p in (self.lastname, self.firstname, self.fathername) if p]
        return " ".join(parts) if parts else None

    def get_fullname(self) -> Optional[str]:
        return self.full_name


class TeacherDto(BaseModel):
    """
    Teacher record (CUBA entity ``hemishe_ETeacher``).
    """

    id: Optional[UUID] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    fathername: Optional[str] = None
    full_name: Optional[str] = Field(None, alias="fullName")
    birthday: Optional[date] = None
    gender: Optional[str] = Field(None, alias="_gender")
    pinfl: Optional[str] = None
    employee_id_number: Optional[str] = Field(None, alias="employeeIdNumber")
    university: Optional[str] = Field(None, alias="_university")
    academic_degree: Optional[str] = Field(None, alias="_academic_degree")
    academic_rank: Optional[str] = Field(None, alias="_academic_rank")
    active: Optional[bool] = None
    version: Optional[int] = None

    model_config = _MODEL_CONFIG


class UniversityDto(BaseModel):
    """
    Higher education institution (CUBA entity ``hemishe_EUniversity``).
    """

    code: Optional[str] = Field(None, description="Institution code, primary key.")
    tin: Optional[str] = Field(None, description="Taxpayer identification number.")
    name: Optional[str] = None
    address: Optional[str] = None
    cadastre: Optional[str] = None
    university_url: Optional[str] = None
    student_url: Optional[str] = None
    teacher_url: Optional[str] = None
    soato: Optional[str] = Field(None, alias="_soato")
    soato_region: Optional[str] = Field(None, alias="_soato_region")
    university_type: Optional[str] = Field(None, alias="_university_type")
    ownership: Optional[str] = Field(None, alias="_ownership")
    parent_university: Optional[str] = Field(None, alias="_parent_university")
    active: Optional[bool] = None
    gpa_edit: Optional[bool] = None
    accreditation_edit: Optional[bool] = None
    add_student: Optional[bool] = None
    allow_grouping: Optional[bool] = None
    allow_transfer_outside: Optional[bool] = None

    model_config = _MODEL_CONFIG


class StudentMetaDto(BaseModel):
    """
    Per-semester academic state of a student (CUBA entity ``hemishe_EStudentMeta``).
    """

    id: Optional[UUID] = None
    u_id: Optional[int] = Field(None, alias="uId")
    university: Optional[str] = None
    student_id_number: Optional[str] = Field(None, alias="studentIdNumber")
    student: Optional[UUID] = None
    department: Optional[UUID] = None
    education_type: Optional[str] = Field(None, alias="educationType")
    education_form: Optional[str] = Field(None, alias="educationForm")
    semester: Optional[str] = None
    level: Optional[str] = None
    education_year: Optional[str] = Field(None, alias="educationYear")
    payment_form: Optional[str] = Field(None, alias="paymentForm")
    student_status: Optional[str] = Field(None, alias="studentStatus")
    group_id: Optional[int] = Field(None, alias="groupId")
    group_name: Optional[str] = Field(None, alias="groupName")
    order_number: Optional[str] = Field(None, alias="orderNumber")
    order_date: Optional[date] = Field(None, alias="orderDate")
    status_change_reason: Optional[str] = Field(None, alias="statusChangeReason")
    accreditation_accepted: Optional[bool] = Field(None, alias="accreditationAccepted")

    model_config = _MODEL_CONFIG


__all__ = [
    "StudentDto",
    "StudentMetaDto",
    "StudentStatus",
    "TeacherDto",
    "UniversityDto",
]
