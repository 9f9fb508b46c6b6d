"""
Contact form mail relay.

Validates a contact submission and forwards it as an HTML email to the site
owner's inbox. Each request is independent: nothing is stored and a failed
send is never retried automatically, the visitor resubmits instead.

Flow:
1. Validate (all five fields present) -> reject with zero sends
2. Build subject and HTML body
3. Send exactly once through the configured transport
4. Report success, or a generic failure with the cause logged here only
"""

import html
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional, Protocol

from fastapi.concurrency import run_in_threadpool

from greenfarm.core.config import Settings
from greenfarm.core.exceptions import TransportError
from greenfarm.core.validation import validate_submission
from greenfarm.models.contact import ContactResponse, ContactSubmission

logger = logging.getLogger(__name__)

SUBJECT_TEMPLATE = "New Contact Message: {subject}"
SUCCESS_MESSAGE = "Message sent successfully! We'll get back to you soon."


def build_subject(submission: ContactSubmission) -> str:
    return SUBJECT_TEMPLATE.format(subject=submission.subject)


def build_html(submission: ContactSubmission) -> str:
    """Render the notification body. Visitor text is escaped before interpolation."""
    name = html.escape(submission.full_name)
    email = html.escape(submission.email)
    subject = html.escape(submission.subject)
    message = html.escape(submission.message)
    return f"""
    <h2>New Message from GreenFarm Contact Form</h2>
    <p><strong>Name:</strong> {name}</p>
    <p><strong>Email:</strong> {email}</p>
    <p><strong>Subject:</strong> {subject}</p>
    <p><strong>Message:</strong></p>
    <p>{message}</p>
    <hr />
    <small>Sent via GreenFarm website</small>
    """.strip()


class MailTransport(Protocol):
    def send(self, html: str, subject: str, to: str) -> None:
        """Deliver one message. Raise on any failure."""
        ...


class SmtpMailTransport:
    """Authenticated SMTP delivery using the site's mail account."""

    def __init__(self, settings: Settings):
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.timeout = settings.smtp_timeout
        self.user = settings.email_user
        self.password = settings.email_pass
        self.from_name = settings.mail_from_name

    def _message(self, html_body: str, subject: str, to: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = formataddr((self.from_name, self.user))
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content("This message requires an HTML capable mail client.")
        msg.add_alternative(html_body, subtype="html")
        return msg

    def send(self, html: str, subject: str, to: str) -> None:
        if not (self.user and self.password):
            raise TransportError("SMTP credentials missing (EMAIL_USER / EMAIL_PASS)")
        if not to:
            raise TransportError("Mail recipient missing (EMAIL_TO)")

        msg = self._message(html, subject, to)
        context = ssl.create_default_context()

        if self.port == 465:
            with smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=context) as s:
                s.login(self.user, self.password)
                s.send_message(msg)
        else:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as s:
                s.ehlo()
                s.starttls(context=context)
                s.ehlo()
                s.login(self.user, self.password)
                s.send_message(msg)

        logger.info(f"✅ SMTP send ok → {to} via {self.host}:{self.port}")


class ContactRelay:
    """
    Validate a submission and dispatch it through a mail transport.

    Args:
        settings: Application settings, supplies the recipient address
        transport: Anything with send(html, subject, to)
    """

    def __init__(self, settings: Settings, transport: Optional[MailTransport] = None):
        self.recipient = settings.email_to
        self.transport = transport or SmtpMailTransport(settings)

    async def relay(self, submission: ContactSubmission) -> ContactResponse:
        validate_submission(submission)

        subject = build_subject(submission)
        body = build_html(submission)
        logger.info(f"📨 Dispatching contact message '{subject}'")

        try:
            await run_in_threadpool(self.transport.send, body, subject, self.recipient)
        except Exception as e:
            logger.error(f"❌ Email send error: {type(e).__name__}: {str(e)}")
            raise TransportError() from e

        logger.info("✅ Contact message delivered")
        return ContactResponse(success=True, message=SUCCESS_MESSAGE)
