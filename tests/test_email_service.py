"""
Confirmation e-mail composition and SMTP delivery.
"""
import smtplib
from unittest.mock import MagicMock

import pytest

from punaboost.core import config
from punaboost.services import email_service


@pytest.fixture
def smtp(monkeypatch):
    monkeypatch.setattr(config, "SMTP_HOST", "smtp.punaboost.com")
    monkeypatch.setattr(config, "SMTP_PORT", 2525)
    monkeypatch.setattr(config, "SMTP_USERNAME", "mailer")
    monkeypatch.setattr(config, "SMTP_PASSWORD", "hunter2")
    monkeypatch.setattr(config, "SMTP_USE_TLS", True)
    factory = MagicMock()
    monkeypatch.setattr(smtplib, "SMTP", factory)
    return factory


def test_confirmation_message_carries_the_code():
    msg = email_service.build_confirmation_message("ana@mail.al", "482913")

    assert msg["Subject"] == "Confirm Your Email - PunaBoost"
    assert msg["To"] == "ana@mail.al"
    plain, html = msg.get_payload()
    assert "482913" in plain.get_payload(decode=True).decode("utf-8")
    assert "482913" in html.get_payload(decode=True).decode("utf-8")
    assert html.get_content_type() == "text/html"


def test_send_without_smtp_only_logs(monkeypatch, caplog):
    monkeypatch.setattr(config, "SMTP_HOST", "")
    factory = MagicMock()
    monkeypatch.setattr(smtplib, "SMTP", factory)

    with caplog.at_level("WARNING"):
        assert email_service.send_confirmation_email("ana@mail.al", "482913") is False

    factory.assert_not_called()
    assert "482913" in caplog.text


def test_send_uses_tls_and_login(smtp):
    assert email_service.send_confirmation_email("ana@mail.al", "482913") is True

    smtp.assert_called_once_with("smtp.punaboost.com", 2525, timeout=10)
    server = smtp.return_value.__enter__.return_value
    server.starttls.assert_called_once_with()
    server.login.assert_called_once_with("mailer", "hunter2")
    sender, recipients, body = server.sendmail.call_args[0]
    assert sender == "noreply@punaboost.com"
    assert recipients == ["ana@mail.al"]
    assert "Confirm Your Email - PunaBoost" in body


def test_send_failure_returns_false(smtp):
    smtp.return_value.__enter__.return_value.sendmail.side_effect = smtplib.SMTPException("relay denied")

    assert email_service.send_confirmation_email("ana@mail.al", "482913") is False
