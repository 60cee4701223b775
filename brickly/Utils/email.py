import smtplib
from email.message import EmailMessage

from flask import current_app


class EmailNotConfigured(RuntimeError):
    pass


def send_verification_email(to: str, verify_url: str):
    """
    Sends the account verification link over SMTP (STARTTLS).
    Raises EmailNotConfigured when SMTP credentials are missing and
    lets smtplib errors propagate to the caller.
    """
    cfg = current_app.config
    if not cfg.get("SMTP_USER") or not cfg.get("SMTP_PASS") or not cfg.get("SMTP_FROM"):
        raise EmailNotConfigured("SMTP_NOT_CONFIGURED")

    msg = EmailMessage()
    msg["From"] = cfg["SMTP_FROM"]
    msg["To"] = to
    msg["Subject"] = "Verify your Brickly account"
    msg.set_content(f"Verify your email by clicking: {verify_url}")
    msg.add_alternative(
        f'<p>Verify your email by clicking:</p><p><a href="{verify_url}">{verify_url}</a></p>',
        subtype="html",
    )

    with smtplib.SMTP(cfg["SMTP_HOST"], cfg["SMTP_PORT"], timeout=15) as smtp:
        smtp.starttls()
        smtp.login(cfg["SMTP_USER"], cfg["SMTP_PASS"])
        smtp.send_message(msg)

    current_app.logger.info(f"Verification email sent to {to}")
