import logging
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app

logger = logging.getLogger(__name__)


def _send_email(to_email: str, subject: str, text_body: str, html_body: str = None) -> bool:
    """
    Internal helper: sends email using SMTP config from Flask current_app.config.
    Never raises; a failed send is logged and reported as False.
    """
    config = current_app.config
    if config.get("MAIL_SUPPRESS_SEND"):
        logger.info("Mail sending suppressed, skipping '%s' to %s", subject, to_email)
        return False

    smtp_server = config.get("MAIL_SERVER", "smtp.gmail.com")
    smtp_port = int(config.get("MAIL_PORT", 587))
    smtp_user = config.get("MAIL_USERNAME")
    smtp_pass = config.get("MAIL_PASSWORD")

    if not smtp_user or not smtp_pass:
        logger.warning("Mail credentials missing (MAIL_USERNAME / MAIL_PASSWORD), email to %s not sent", to_email)
        return False

    try:
        msg = MIMEMultipart("alternative")
        msg["From"] = config.get("MAIL_DEFAULT_SENDER") or smtp_user
        msg["To"] = to_email
        msg["Subject"] = subject
        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        server = smtplib.SMTP(smtp_server, smtp_port, timeout=50)
        try:
            server.ehlo()
            server.starttls()
            server.ehlo()
            server.login(smtp_user, smtp_pass)
            server.send_message(msg)
        finally:
            server.quit()

        logger.info("Email sent to %s", to_email)
        return True
    except Exception:
        logger.exception("Failed to send email to %s", to_email)
        return False


# --------------------------------
# Welcome Email (new employee account)
# --------------------------------
def send_employee_welcome_email(email: str, first_name: str, temp_password: str = None, login_url: str = None) -> bool:
    app_name = current_app.config.get("APP_NAME", "HRMS")
    login_url = login_url or current_app.config.get("FRONTEND_URL")
    subject = f"Welcome to {app_name}! Your Account Details"

    text = (
        f"Dear {first_name},\n\n"
        "Welcome to our company's HR Management System! Your account has been created.\n\n"
        "Please use the following details to log in and complete your profile:\n"
        f"Email: {email}\n"
    )
    html = (
        f"<p>Dear <strong>{first_name}</strong>,</p>"
        "<p>Welcome to our company's HR Management System! Your account has been created.</p>"
        "<p>Please use the following details to log in and complete your profile:</p>"
        f"<p><strong>Email:</strong> {email}</p>"
    )

    if temp_password:
        text += (
            f"Temporary Password: {temp_password}\n\n"
            "Please log in using this temporary password and change it immediately.\n"
        )
        html += (
            f"<p><strong>Temporary Password:</strong> {temp_password}</p>"
            "<p>Please log in using this temporary password and change it immediately.</p>"
        )
    else:
        text += "You can set up your password by visiting the login page.\n"
        html += "<p>You can set up your password by visiting the login page.</p>"

    text += f"Login URL: {login_url}\n\nBest regards,\nYour HR Team"
    html += f'<p>Click here to log in: <a href="{login_url}">{login_url}</a></p><p>Best regards,<br>Your HR Team</p>'

    return _send_email(email, subject, text, html)
