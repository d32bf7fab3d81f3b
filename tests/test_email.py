import smtplib

from hrms.utils import email_utils


def test_suppressed_send_is_skipped(app):
    with app.app_context():
        assert email_utils.send_employee_welcome_email("x@acme.com", "X", "tmp123", "http://app") is False


def test_missing_credentials_skip_send(app, monkeypatch):
    app.config.update(MAIL_SUPPRESS_SEND=False, MAIL_USERNAME=None, MAIL_PASSWORD=None)

    def _boom(*args, **kwargs):
        raise AssertionError("SMTP should not be contacted")

    monkeypatch.setattr(smtplib, "SMTP", _boom)
    with app.app_context():
        assert email_utils.send_employee_welcome_email("x@acme.com", "X", "tmp123") is False


def test_smtp_failure_is_swallowed(app, monkeypatch):
    app.config.update(MAIL_SUPPRESS_SEND=False, MAIL_USERNAME="bot@acme.com", MAIL_PASSWORD="pw")

    def _refuse(*args, **kwargs):
        raise smtplib.SMTPConnectError(421, "service not available")

    monkeypatch.setattr(smtplib, "SMTP", _refuse)
    with app.app_context():
        assert email_utils.send_employee_welcome_email("x@acme.com", "X", "tmp123") is False


def test_successful_send(app, monkeypatch):
    app.config.update(MAIL_SUPPRESS_SEND=False, MAIL_USERNAME="bot@acme.com", MAIL_PASSWORD="pw")
    sent = []

    class _FakeSMTP:
        def __init__(self, host, port, timeout=None):
            self.host, self.port = host, port

        def ehlo(self):
            pass

        def starttls(self):
            pass

        def login(self, user, password):
            pass

        def send_message(self, msg):
            sent.append(msg)

        def quit(self):
            pass

    monkeypatch.setattr(smtplib, "SMTP", _FakeSMTP)
    with app.app_context():
        assert email_utils.send_employee_welcome_email("x@acme.com", "Xena", "tmp123", "http://app/login") is True

    assert sent[0]["To"] == "x@acme.com"
    body = sent[0].get_payload()[0].get_payload()
    assert "tmp123" in body
    assert "http://app/login" in body
