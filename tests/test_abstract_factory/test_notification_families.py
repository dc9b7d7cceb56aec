"""
Tests for the Abstract Factory families.

These tests verify that each factory produces matching products and that
unsupported combinations come back as None instead of raising.
"""

import logging

import pytest

from abstract_factory.demo import send_alert
from abstract_factory.factories import (
    FACTORIES,
    MarketingNotificationFactory,
    NotificationFactory,
    UnknownFamilyError,
    UrgentNotificationFactory,
    get_factory,
)
from abstract_factory.notifications import EmailNotification, NotificationKind, SMSNotification
from abstract_factory.templates import CasualTemplate, FormalTemplate


class TestNotificationKind:
    """Tests for parsing kind strings."""

    @pytest.mark.parametrize("value", ["EMAIL", "email", "Email"])
    def test_parse_is_case_insensitive(self, value):
        """Test that any casing maps to the same member."""
        assert NotificationKind.parse(value) is NotificationKind.EMAIL

    @pytest.mark.parametrize("value", [None, "", "FAX"])
    def test_parse_unknown_returns_none(self, value):
        """Test that missing or unknown kinds parse to None."""
        assert NotificationKind.parse(value) is None

    def test_parse_accepts_member(self):
        """Test that a member passes through unchanged."""
        assert NotificationKind.parse(NotificationKind.SMS) is NotificationKind.SMS


class TestUrgentNotificationFactory:
    """Tests for the urgent (formal) family."""

    def test_creates_email(self, urgent_factory: UrgentNotificationFactory):
        """Test EMAIL yields an EmailNotification."""
        assert isinstance(urgent_factory.create_notification("EMAIL"), EmailNotification)

    def test_creates_sms(self, urgent_factory: UrgentNotificationFactory):
        """Test SMS yields an SMSNotification."""
        assert isinstance(urgent_factory.create_notification("sms"), SMSNotification)

    def test_template_is_formal(self, urgent_factory: UrgentNotificationFactory):
        """Test the urgent family is bound to FormalTemplate."""
        assert isinstance(urgent_factory.create_template(), FormalTemplate)

    def test_unknown_kind_returns_none(self, urgent_factory: UrgentNotificationFactory):
        """Test an unknown kind is an unsupported combination, not an error."""
        assert urgent_factory.create_notification("PUSH") is None


class TestMarketingNotificationFactory:
    """Tests for the marketing (casual) family."""

    def test_creates_email(self, marketing_factory: MarketingNotificationFactory):
        """Test EMAIL yields an EmailNotification."""
        assert isinstance(marketing_factory.create_notification("email"), EmailNotification)

    def test_sms_not_supported(self, marketing_factory: MarketingNotificationFactory, caplog):
        """Test SMS yields None and a warning is logged."""
        with caplog.at_level(logging.WARNING, logger="abstract_factory"):
            result = marketing_factory.create_notification("SMS")

        assert result is None
        assert any("does not support" in record.message for record in caplog.records)

    def test_template_is_casual(self, marketing_factory: MarketingNotificationFactory):
        """Test the marketing family is bound to CasualTemplate."""
        assert isinstance(marketing_factory.create_template(), CasualTemplate)

    def test_supports(self, marketing_factory: MarketingNotificationFactory):
        """Test the supports() helper mirrors create_notification()."""
        assert marketing_factory.supports("Email") is True
        assert marketing_factory.supports("SMS") is False
        assert marketing_factory.supports(None) is False


class TestGetFactory:
    """Tests for looking up a factory by family name."""

    @pytest.mark.parametrize("name, expected", [
        ("urgent", UrgentNotificationFactory),
        ("MARKETING", MarketingNotificationFactory),
    ])
    def test_known_families(self, name, expected):
        """Test family lookup ignores case."""
        assert isinstance(get_factory(name), expected)

    def test_unknown_family_raises(self):
        """Test an unknown family raises with the name attached."""
        with pytest.raises(UnknownFamilyError, match="transactional") as exc_info:
            get_factory("transactional")

        assert exc_info.value.family == "transactional"
        assert isinstance(exc_info.value, ValueError)

    def test_registry_covers_both_families(self):
        """Test the registry lists exactly the two families."""
        assert set(FACTORIES) == {"urgent", "marketing"}


class TestSending:
    """Tests for sending matched products."""

    def test_email_send_output(self, marketing_factory: MarketingNotificationFactory, capsys):
        """Test an email prints its header followed by the formatted text."""
        notification = marketing_factory.create_notification("EMAIL")
        notification.send("Hi", marketing_factory.create_template())

        out = capsys.readouterr().out
        assert out == "Sending Email...\n Just a quick update for you via Email: Hi \n"

    def test_sms_send_uses_sms_channel_name(self, urgent_factory: UrgentNotificationFactory, capsys):
        """Test an SMS hands "SMS" to the template."""
        notification = urgent_factory.create_notification("SMS")
        notification.send("Test", urgent_factory.create_template())

        out = capsys.readouterr().out
        assert out.startswith("Sending SMS...\n")
        assert "Formal SMS Notification" in out

    def test_send_alert_unsupported(self, marketing_factory: MarketingNotificationFactory, capsys):
        """Test send_alert reports False and prints nothing for a missing product."""
        assert send_alert(marketing_factory, "SMS", "Nope") is False
        assert capsys.readouterr().out == ""


class TestFamilyContract:
    """Tests for what a concrete family must provide."""

    def test_family_without_supported_kinds_fails_loudly(self):
        """Test a family that never declares its kinds cannot quietly support none."""

        class IncompleteFactory(NotificationFactory):
            def create_template(self):
                return CasualTemplate()

        with pytest.raises(AttributeError, match="supported_kinds"):
            IncompleteFactory().create_notification("EMAIL")

    def test_families_do_not_share_kind_maps(self):
        """Test each family owns its own kind map."""
        assert UrgentNotificationFactory.supported_kinds is not MarketingNotificationFactory.supported_kinds
