"""
Tests for outbound email helpers.
"""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from mou_tracker.core import email


def test_verification_links_use_public_base_url():
    pending_id = str(uuid4())
    with patch.object(email.settings, "public_base_url", "https://api.example.edu"):
        confirm, deny = email.build_verification_links(pending_id)

    assert confirm == f"https://api.example.edu/api/admin/verify/yes/{pending_id}"
    assert deny == f"https://api.example.edu/api/admin/verify/no/{pending_id}"


@pytest.mark.asyncio
async def test_send_email_without_api_key_only_logs():
    with (
        patch.object(email.resend, "api_key", None),
        patch.object(email.resend.Emails, "send") as mock_send,
    ):
        assert await email.send_email("a@b.com", "Hi", "<p>Hi</p>") is True

    mock_send.assert_not_called()


@pytest.mark.asyncio
async def test_send_email_reports_provider_failure():
    with (
        patch.object(email.resend, "api_key", "re_test"),
        patch.object(email.resend.Emails, "send", side_effect=RuntimeError("provider down")),
    ):
        assert await email.send_email("a@b.com", "Hi", "<p>Hi</p>") is False


@pytest.mark.asyncio
async def test_send_email_success():
    with (
        patch.object(email.resend, "api_key", "re_test"),
        patch.object(email.resend.Emails, "send", return_value={"id": "em_1"}) as mock_send,
    ):
        assert await email.send_email("a@b.com", "Hi", "<p>Hi</p>") is True

    params = mock_send.call_args.args[0]
    assert params["to"] == ["a@b.com"]
    assert params["from"] == email.settings.email_from


@pytest.mark.asyncio
async def test_registration_request_escapes_registrant_input():
    pending_id = str(uuid4())
    with patch.object(email, "send_email", new=AsyncMock(return_value=True)) as mock_send:
        await email.send_registration_request(
            to_email="approver@university.edu",
            registrant_name="<script>alert(1)</script>",
            registrant_email="grace@university.edu",
            registrant_phone="+233",
            pending_admin_id=pending_id,
        )

    html = mock_send.call_args.kwargs["html_content"]
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert f"/api/admin/verify/yes/{pending_id}" in html
    assert f"/api/admin/verify/no/{pending_id}" in html
    assert mock_send.call_args.kwargs["to_email"] == "approver@university.edu"


@pytest.mark.asyncio
async def test_registration_request_subject_is_plain_text():
    with patch.object(email, "send_email", new=AsyncMock(return_value=True)) as mock_send:
        await email.send_registration_request(
            to_email="approver@university.edu",
            registrant_name="Siobhán O'Brien & Co",
            registrant_email="obrien@university.edu",
            registrant_phone="+353",
            pending_admin_id=str(uuid4()),
        )

    kwargs = mock_send.call_args.kwargs
    assert kwargs["subject"] == "Admin registration request from Siobhán O'Brien & Co"
    assert "O&#x27;Brien &amp; Co" in kwargs["html_content"]
