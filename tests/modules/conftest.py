"""
Model factories shared by the module tests.

Models are MagicMock(spec=...) objects with every column set, so they
serialize through the response schemas like real rows.
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from mou_tracker.modules.admins.models import Admin, PendingAdmin, RegistrationStatus
from mou_tracker.modules.courses.models import CompletionStatus, Course
from mou_tracker.modules.fields.models import Field
from mou_tracker.modules.mous.models import MOU
from mou_tracker.modules.participants.models import Candidate
from mou_tracker.modules.schools.models import School


def _stamp(obj):
    obj.id = uuid4()
    obj.created_at = datetime.now(UTC)
    obj.updated_at = obj.created_at
    return obj


@pytest.fixture
def make_school():
    def _make(name: str = "University of Ghana", count: int = 1):
        school = _stamp(MagicMock(spec=School))
        school.name = name
        school.count = count
        return school

    return _make


@pytest.fixture
def make_mou():
    def _make(
        mou_code: str = "MOU-001",
        partner: str = "University of Ghana",
        strategic_areas: str = "Research exchange",
    ):
        mou = _stamp(MagicMock(spec=MOU))
        mou.mou_code = mou_code
        mou.name_of_partner_institution = partner
        mou.strategic_areas = strategic_areas
        return mou

    return _make


@pytest.fixture
def make_field():
    def _make(name: str = "Data Science", count: int = 1):
        field = _stamp(MagicMock(spec=Field))
        field.name_of_the_field = name
        field.count = count
        return field

    return _make


@pytest.fixture
def make_course():
    def _make(
        course_code: str = "C-100",
        field: str = "Data Science",
        completed: CompletionStatus = CompletionStatus.NO,
    ):
        course = _stamp(MagicMock(spec=Course))
        course.course_code = course_code
        course.name = "Intro to Data Analysis"
        course.eligible_departments = ["Statistics", "Computer Science"]
        course.start_date = datetime(2026, 3, 1, tzinfo=UTC)
        course.end_date = course.start_date + timedelta(days=30)
        course.completed = completed
        course.field = field
        return course

    return _make


@pytest.fixture
def make_candidate():
    def _make(email: str = "kofi@example.com"):
        candidate = _stamp(MagicMock(spec=Candidate))
        candidate.name = "Kofi Mensah"
        candidate.email = email
        candidate.phone_number = "+233201234567"
        candidate.gender = "male"
        candidate.designation = "Lecturer"
        candidate.department = "Physics"
        candidate.organization = "KNUST"
        return candidate

    return _make


@pytest.fixture
def make_admin():
    def _make(email: str = "ada@university.edu", password_hash: str = "hash"):
        admin = _stamp(MagicMock(spec=Admin))
        admin.name = "Ada Admin"
        admin.email = email
        admin.phone_number = "+233200000000"
        admin.password_hash = password_hash
        return admin

    return _make


@pytest.fixture
def make_pending_admin():
    def _make(status: RegistrationStatus = RegistrationStatus.PENDING):
        pending = _stamp(MagicMock(spec=PendingAdmin))
        pending.name = "Grace Registrant"
        pending.email = "grace@university.edu"
        pending.phone_number = "+233209999999"
        pending.password_hash = "$2b$12$hash"
        pending.status = status
        pending.processed_date = None if status == RegistrationStatus.PENDING else datetime.now(UTC)
        return pending

    return _make
