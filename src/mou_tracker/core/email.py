"""
Email Service using Resend

Handles sending emails for the admin registration flow.
"""

import asyncio
import logging
from html import escape

import resend

from mou_tracker.core.config import settings

logger = logging.getLogger(__name__)

# Initialize Resend with API key
resend.api_key = settings.resend_api_key

_STYLE = """
        <style>
            body { font-family: system-ui, -apple-system, sans-serif; line-height: 1.6; color: #1f2937; }
            .container { max-width: 600px; margin: 0 auto; padding: 40px 20px; }
            .header { color: #1a365d; margin-bottom: 24px; }
            .button { display: inline-block; color: white; padding: 14px 28px; text-decoration: none; border-radius: 8px; margin: 24px 8px 24px 0; }
            .approve { background-color: #15803d; }
            .deny { background-color: #b91c1c; }
            .info-box { background-color: #f3f4f6; padding: 16px; border-radius: 8px; margin: 16px 0; }
            .footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e7eb; color: #6b7280; font-size: 14px; }
        </style>
"""


async def send_email(
    to_email: str,
    subject: str,
    html_content: str,
) -> bool:
    """
    Send an email using Resend.

    Args:
        to_email: Recipient email address
        subject: Email subject line
        html_content: HTML content of the email

    Returns:
        True if email was sent successfully
    """
    if not resend.api_key:
        logger.warning("RESEND_API_KEY not set - logging email instead of sending")
        logger.info(f"EMAIL TO: {to_email} | SUBJECT: {subject}")
        return True

    try:
        params: resend.Emails.SendParams = {
            "from": settings.email_from,
            "to": [to_email],
            "subject": subject,
            "html": html_content,
        }

        # Run sync Resend call in thread pool to avoid blocking event loop
        email = await asyncio.to_thread(resend.Emails.send, params)
        logger.info(f"Email sent successfully to {to_email}, id: {email['id']}")
        return True
    except Exception as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return False


def build_verification_links(pending_admin_id: str) -> tuple[str, str]:
    """Return the (confirm, deny) action links for a pending admin."""
    base = f"{settings.public_base_url}/api/admin/verify"
    return f"{base}/yes/{pending_admin_id}", f"{base}/no/{pending_admin_id}"


async def send_registration_request(
    to_email: str,
    registrant_name: str,
    registrant_email: str,
    registrant_phone: str,
    pending_admin_id: str,
) -> bool:
    """Send the confirm/deny request for a new admin registration."""
    safe_name = escape(registrant_name)
    safe_email = escape(registrant_email)
    safe_phone = escape(registrant_phone)
    confirm_url, deny_url = build_verification_links(pending_admin_id)

    html_content = f"""
    <!DOCTYPE html>
    <html>
    <head>{_STYLE}</head>
    <body>
        <div class="container">
            <h1 class="header">New Admin Registration</h1>

            <p>Someone has asked for administrator access to the MOU Tracker.</p>

            <div class="info-box">
                <p><strong>Name:</strong> {safe_name}</p>
                <p><strong>Email:</strong> {safe_email}</p>
                <p><strong>Phone:</strong> {safe_phone}</p>
            </div>

            <p>Approve this request only if you recognise the person.</p>

            <a href="{confirm_url}" class="button approve">Approve</a>
            <a href="{deny_url}" class="button deny">Deny</a>

            <p>Each link works once. After either link is used the request is closed.</p>

            <div class="footer">
                <p>MOU Tracker - Partnerships &amp; Training Administration</p>
            </div>
        </div>
    </body>
    </html>
    """
    return await send_email(
        to_email=to_email,
        subject=f"Admin registration request from {registrant_name}",
        html_content=html_content,
    )


async def send_registration_approved(to_email: str, name: str) -> bool:
    """Tell the registrant their admin account is active."""
    safe_name = escape(name)
    html_content = f"""
    <!DOCTYPE html>
    <html>
    <head>{_STYLE}</head>
    <body>
        <div class="container">
            <h1 class="header">Your Admin Account Is Ready</h1>
            <p>Hello {safe_name},</p>
            <p>Your registration has been approved. You can now sign in with the email and password you registered with.</p>
            <div class="footer">
                <p>MOU Tracker - Partnerships &amp; Training Administration</p>
            </div>
        </div>
    </body>
    </html>
    """
    return await send_email(
        to_email=to_email,
        subject="Your MOU Tracker admin account has been approved",
        html_content=html_content,
    )


async def send_registration_rejected(to_email: str, name: str) -> bool:
    """Tell the registrant their request was declined."""
    safe_name = escape(name)
    html_content = f"""
    <!DOCTYPE html>
    <html>
    <head>{_STYLE}</head>
    <body>
        <div class="container">
            <h1 class="header">Registration Declined</h1>
            <p>Hello {safe_name},</p>
            <p>Your request for administrator access was not approved. If you believe this is a mistake, please contact the partnerships office.</p>
            <div class="footer">
                <p>MOU Tracker - Partnerships &amp; Training Administration</p>
            </div>
        </div>
    </body>
    </html>
    """
    return await send_email(
        to_email=to_email,
        subject="Your MOU Tracker admin registration",
        html_content=html_content,
    )
