"""
Confirmation e-mails sent over SMTP.

Sending runs as a FastAPI background task after the registration response
has gone out; failures are logged and never reach the caller.
"""
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from punaboost.core import config

logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "Confirm Your Email - PunaBoost"


def build_confirmation_message(email: str, code: str) -> MIMEMultipart:
    msg = MIMEMultipart("alternative")
    msg["Subject"] = CONFIRMATION_SUBJECT
    msg["From"] = f"PunaBoost <{config.EMAIL_FROM}>"
    msg["To"] = email

    text = f"""
Welcome to PunaBoost!

Thank you for registering. Enter this code on the email verification page:

    {code}

This verification code will expire in {config.EMAIL_CONFIRMATION_TTL_HOURS} hours.
If you didn't create an account with PunaBoost, please ignore this email.
"""
    html = f"""
<html>
  <body style="font-family: Arial, sans-serif; line-height: 1.6;">
    <h1>Welcome to PunaBoost!</h1>
    <p>Thank you for registering. Enter this code on the email verification page:</p>
    <p style="font-size: 20px; font-weight: bold; font-family: 'Courier New', monospace;">{code}</p>
    <p>This verification code will expire in {config.EMAIL_CONFIRMATION_TTL_HOURS} hours.</p>
    <p><em>If you didn't create an account with PunaBoost, please ignore this email.</em></p>
  </body>
</html>
"""
    msg.attach(MIMEText(text, "plain", "utf-8"))
    msg.attach(MIMEText(html, "html", "utf-8"))
    return msg


def send_confirmation_email(email: str, code: str) -> bool:
    """Send the confirmation code. Returns False when SMTP is not configured or sending failed."""
    if not config.SMTP_HOST:
        logger.warning(f"[DEV] SMTP not configured, confirmation code for {email}: {code}")
        return False

    msg = build_confirmation_message(email, code)
    try:
        with smtplib.SMTP(config.SMTP_HOST, config.SMTP_PORT, timeout=10) as server:
            if config.SMTP_USE_TLS:
                server.starttls()
            if config.SMTP_USERNAME:
                server.login(config.SMTP_USERNAME, config.SMTP_PASSWORD)
            server.sendmail(config.EMAIL_FROM, [email], msg.as_string())
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send confirmation email to {email}: {e}", exc_info=True)
        return False

    logger.info(f"Confirmation email sent to {email}")
    return True
