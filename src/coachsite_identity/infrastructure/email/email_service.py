import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from coachsite_config.settings import Settings
from coachsite_identity.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)

OTP_SUBJECT = "Your {purpose} OTP"

OTP_TEXT = """Hello {name},

Your {purpose} code is: {otp}

It expires in {expiry_minutes} minutes. Do not share this code with anyone.

If you didn't request this, you can safely ignore this email.

-- {sender}
"""

OTP_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f9fafb; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px; box-shadow: 0 1px 3px rgba(0,0,0,0.1);">
        <h2 style="color: #111827; margin-top: 0;">Hello {name},</h2>
        <p style="color: #374151; line-height: 1.6;">Your {purpose} code is:</p>
        <p style="margin: 30px 0; text-align: center; font-size: 32px; font-weight: 700; letter-spacing: 8px; color: #111827;">{otp}</p>
        <p style="color: #374151; line-height: 1.6;">It expires in {expiry_minutes} minutes. Do not share this code with anyone.</p>
        <div style="margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e7eb;">
            <p style="color: #9ca3af; font-size: 13px; margin: 0;">If you didn't request this, you can safely ignore this email.</p>
            <p style="color: #9ca3af; font-size: 13px; margin-top: 8px;">{sender}</p>
        </div>
    </div>
</body>
</html>
"""


class EmailService:
    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            logger.error("SMTP host not configured")
            raise EmailDeliveryError(to_email)

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                ) as server:
                    if self._settings.smtp_starttls:
                        context = ssl.create_default_context()
                        server.starttls(context=context)
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

            logger.info("Email sent to %s", to_email)

        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise EmailDeliveryError(to_email) from e

    def send_otp_email(
        self,
        to_email: str,
        name: str,
        otp: str,
        purpose: str,
        expiry_minutes: int,
    ) -> None:
        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, skipping %s email to %s (code: %s)",
                purpose,
                to_email,
                otp,
            )
            return

        context = {
            "name": name,
            "otp": otp,
            "purpose": purpose,
            "expiry_minutes": expiry_minutes,
            "sender": self._settings.smtp_from_name,
        }

        message = self._create_message(
            to_email=to_email,
            subject=OTP_SUBJECT.format(purpose=purpose),
            text_body=OTP_TEXT.format(**context),
            html_body=OTP_HTML.format(**context),
        )

        self._send_email(to_email, message)
