"""
Pytest configuration for the HEMIS legacy adapter.

Provides fixtures for:
- Fully populated sample records
- Settings cache isolation
- Root logger isolation for CLI tests
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Generator
from uuid import UUID

import pytest

from hemis_legacy.config import get_settings
from hemis_legacy.domain import StudentDto, StudentMetaDto, StudentStatus, UniversityDto

STUDENT_ID = UUID("9dbdbe96-88e2-f6c7-453a-298c7187311c")


@pytest.fixture
def student() -> StudentDto:
    """
    A student with every stored field populated.
    """
    return StudentDto(
        id=STUDENT_ID,
        code="ST-0001",
        firstname="Anvar",
        lastname="Karimov",
        fathername="Rustamovich",
        pinfl="30101995123456",
        birthday=date(1999, 1, 30),
        serial_number="AB1234567",
        phone="+998901234567",
        address="Toshkent shahar",
        current_address="Chilonzor 5",
        soato="1726",
        current_soato="1726264",
        university="354",
        faculty="F-12",
        speciality="60610500",
        student_status="11",
        payment_form="12",
        education_type="11",
        education_form="11",
        course="12",
        education_year="2025",
        gender="11",
        nationality="01",
        citizenship="11",
        country="UZ",
        status=StudentStatus.ACTIVE,
        active=True,
        verified=False,
        points="87.5",
        version=3,
        create_ts=datetime(2025, 11, 28, 21, 46, 40, 863000),
        update_ts=datetime(2025, 12, 1, 8, 0, 0, 5000),
    )


@pytest.fixture
def sparse_student() -> StudentDto:
    """
    A student with only a handful of fields set; everything else is None.
    """
    return StudentDto(firstname="Dilnoza", lastname="Usmonova", code="ST-0002")


@pytest.fixture
def university() -> UniversityDto:
    return UniversityDto(code="354", name="TATU", soato="1726", active=True)


@pytest.fixture
def student_meta() -> StudentMetaDto:
    return StudentMetaDto(
        id=UUID("0b8e6c1e-2f0a-4f5c-9d4e-3c2a1b0f9e8d"),
        u_id=1001,
        student_id_number="354221100123",
        group_id=77,
        order_date=date(2024, 9, 1),
        accreditation_accepted=True,
    )


@pytest.fixture
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Drop the cached Settings before and after a test that tweaks the environment.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def isolated_logging() -> Generator[None, None, None]:
    """
    Restore root logger handlers and level after a test reconfigures logging.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
