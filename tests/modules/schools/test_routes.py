"""
Route tests for /api/schools.
"""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from mou_tracker.modules.schools.service import SchoolNotFoundError, get_school_mous


class TestActiveSchools:
    @pytest.mark.asyncio
    async def test_active_schools_are_links(self, client, auth_headers, make_school):
        school = make_school("KNUST", count=2)
        with patch(
            "mou_tracker.modules.schools.service.list_active_schools",
            new=AsyncMock(return_value=[school]),
        ):
            response = await client.get("/api/schools/active", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["data"][0] == {
            "id": str(school.id),
            "name": "KNUST",
            "count": 2,
            "link": f"/api/schools/{school.id}",
        }


class TestSchoolMOUs:
    @pytest.mark.asyncio
    async def test_returns_school_and_its_mous(self, client, auth_headers, make_school, make_mou):
        school = make_school("KNUST", count=2)
        mous = [make_mou("M1", "KNUST"), make_mou("M2", "KNUST")]
        with patch(
            "mou_tracker.modules.schools.service.get_school_mous",
            new=AsyncMock(return_value=(school, mous)),
        ):
            response = await client.get(f"/api/schools/{school.id}", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["schoolId"] == str(school.id)
        assert body["school"]["name"] == "KNUST"
        assert body["count"] == 2
        assert {m["ID"] for m in body["data"]} == {"M1", "M2"}

    @pytest.mark.asyncio
    async def test_malformed_id_is_400_before_lookup(self, client, auth_headers):
        with patch(
            "mou_tracker.modules.schools.service.get_school_mous", new=AsyncMock()
        ) as mock_get:
            response = await client.get("/api/schools/not-a-uuid", headers=auth_headers)

        assert response.status_code == 400
        mock_get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_school_is_404(self, client, auth_headers, mock_db):
        mock_db.get.return_value = None
        response = await client.get(f"/api/schools/{uuid4()}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "SCHOOL_NOT_FOUND"


class TestSchoolService:
    @pytest.mark.asyncio
    async def test_unknown_school_raises(self, mock_db):
        mock_db.get.return_value = None
        with pytest.raises(SchoolNotFoundError):
            await get_school_mous(mock_db, uuid4())

    @pytest.mark.asyncio
    async def test_mous_are_matched_by_school_name(self, mock_db, make_school, make_mou):
        school = make_school("KNUST")
        mock_db.get.return_value = school
        with patch(
            "mou_tracker.modules.schools.service.mou_repository.list_by_partner",
            new=AsyncMock(return_value=[make_mou("M1", "KNUST")]),
        ) as mock_list:
            found, mous = await get_school_mous(mock_db, school.id)

        assert found is school
        assert len(mous) == 1
        mock_list.assert_awaited_once_with(mock_db, "KNUST")
