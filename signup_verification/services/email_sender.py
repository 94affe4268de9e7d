"""Activation email dispatch over SMTP."""

import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Tuple

from loguru import logger
from starlette.concurrency import run_in_threadpool

from signup_verification.core.exceptions import TransportFailure
from signup_verification.settings import Settings


class ActivationMailer:
    """Sends the activation code to the address being verified."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @property
    def enabled(self) -> bool:
        return bool(self.settings.smtp_host)

    def render(self, code: str) -> Tuple[str, str, str]:
        """Build subject, html body and plain text body for ``code``."""
        html = (
            "<html><body>"
            "<h1>Welcome \U0001F44B</h1>"
            "<p>Your activation code is:</p>"
            f'<h2 style="letter-spacing: 4px;">{code}</h2>'
            "</body></html>"
        )
        text = f"Welcome!\n\nYour activation code is: {code}\n"
        return self.settings.email_subject, html, text

    def _build_message(self, recipient: str, code: str) -> MIMEMultipart:
        subject, html, text = self.render(code)
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = formataddr(("", self.settings.email_from))
        msg["To"] = recipient
        msg.attach(MIMEText(text, "plain", "utf-8"))
        msg.attach(MIMEText(html, "html", "utf-8"))
        return msg

    def _send_sync(self, recipient: str, code: str) -> None:
        msg = self._build_message(recipient, code)
        with smtplib.SMTP(
            self.settings.smtp_host,
            self.settings.smtp_port,
            timeout=self.settings.smtp_timeout,
        ) as conn:
            conn.ehlo()
            if self.settings.smtp_use_tls:
                conn.starttls()
                conn.ehlo()
            if self.settings.smtp_user:
                conn.login(self.settings.smtp_user, self.settings.smtp_pass)
            conn.sendmail(self.settings.email_from, [recipient], msg.as_string())

    async def send(self, recipient: str, code: str) -> None:
        """
        Email ``code`` to ``recipient``.

        Raises TransportFailure when the SMTP conversation fails. Without an
        SMTP host the dispatch is only logged.
        """
        if not self.enabled:
            logger.warning(f"SMTP host not configured, activation email to {recipient} not sent")
            return
        try:
            await run_in_threadpool(self._send_sync, recipient, code)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending activation email to {recipient}: {e!s}")
            raise TransportFailure(detail=TransportFailure.message) from e
        logger.info(f"Activation email sent to {recipient}")
