"""
Fixtures for course tests.
"""

import pytest


@pytest.fixture
def course_payload():
    return {
        "ID": "C-100",
        "Name": "Intro to Data Analysis",
        "eligibleDepartments": ["Statistics", "Computer Science"],
        "startDate": "2026-03-01",
        "endDate": "2026-03-31",
        "field": "Data Science",
    }
