"""Template pattern: sending notifications.

Email and SMS senders written separately each repeat rate limiting, recipient
validation, formatting and audit logging, and the copies drift apart.

The fixed skeleton lives in one ``NotificationSender.send``. Instead of
subclasses overriding abstract hooks, the varying steps are injected as
functions: ``compose`` and ``deliver`` are required, ``analytics`` has a
default.
"""
from dataclasses import dataclass
from typing import Callable


def default_analytics(to: str) -> None:
    print(f"Analytics updated for: {to}")


@dataclass(frozen=True)
class NotificationSender:
    """Fixed send skeleton with injected channel-specific steps."""
    channel: str
    compose: Callable[[str], str]
    deliver: Callable[[str, str], None]
    analytics: Callable[[str], None] = default_analytics

    def send(self, to: str, raw_message: str) -> str:
        """Run every step in order and return the delivered message."""
        self._rate_limit_check(to)
        self._validate_recipient(to)
        formatted = self._format_message(raw_message)
        self._pre_send_audit_log(to, formatted)
        composed = self.compose(formatted)
        self.deliver(to, composed)
        self.analytics(to)
        return composed

    def _rate_limit_check(self, to: str) -> None:
        print(f"Checking rate limits for: {to}")

    def _validate_recipient(self, to: str) -> None:
        print(f"Validating recipient: {to}")

    def _format_message(self, message: str) -> str:
        return message.strip()

    def _pre_send_audit_log(self, to: str, formatted: str) -> None:
        print(f"Logging before send: {formatted} to {to}")


def _compose_email(formatted: str) -> str:
    return f"<html><body><p>{formatted}</p></body></html>"


def _deliver_email(to: str, message: str) -> None:
    print(f"Sending EMAIL to {to} with content:")
    print(message)


def _compose_sms(formatted: str) -> str:
    return f"[SMS] {formatted}"


def _deliver_sms(to: str, message: str) -> None:
    print(f"Sending SMS to {to} with message: {message}")


def _sms_analytics(to: str) -> None:
    print(f"Custom SMS analytics for: {to}")


def email_sender() -> NotificationSender:
    return NotificationSender("email", compose=_compose_email, deliver=_deliver_email)


def sms_sender() -> NotificationSender:
    return NotificationSender(
        "sms", compose=_compose_sms, deliver=_deliver_sms, analytics=_sms_analytics
    )


def main() -> None:
    email_sender().send("john@example.com", "Welcome to TUF+!")
    print()
    sms_sender().send("9876543210", "Your OTP is 4567.")


if __name__ == "__main__":
    main()
