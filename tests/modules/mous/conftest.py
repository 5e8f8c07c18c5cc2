"""
Fixtures for MOU tests.
"""

import pytest


class InMemoryMOUStore:
    """
    Stands in for the MOU and School repositories.

    MOUs are keyed by code and schools keep a count, so a sequence of
    service calls can be checked end to end.
    """

    def __init__(self, make_mou, make_school):
        self._make_mou = make_mou
        self._make_school = make_school
        self.mous = {}
        self.schools = {}

    async def get_by_code(self, db, mou_code):
        return self.mous.get(mou_code)

    async def increment_or_create(self, db, name):
        name = name.strip()
        school = self.schools.get(name)
        if school is None:
            school = self._make_school(name=name, count=0)
            self.schools[name] = school
        school.count += 1
        return school

    async def add(self, db, *, mou_code, name_of_partner_institution, strategic_areas):
        mou = self._make_mou(mou_code, name_of_partner_institution, strategic_areas)
        self.mous[mou_code] = mou
        return mou


@pytest.fixture
def mou_store(make_mou, make_school):
    return InMemoryMOUStore(make_mou, make_school)


@pytest.fixture
def mou_payload():
    return {
        "ID": "MOU-001",
        "nameOfPartnerInstitution": "University of Ghana",
        "strategicAreas": "Joint research; staff exchange",
    }
