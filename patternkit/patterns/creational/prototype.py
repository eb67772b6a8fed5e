"""Prototype pattern: cloning email templates.

Building every email from scratch repeats the setup of subject and default
content, and callers must know the concrete template class to do it.

A configured template is cloned and then tweaked. A prototype registry hands
out fresh copies by tag, so callers never construct templates directly.
"""
import copy
from dataclasses import dataclass, field
from typing import Dict

from patternkit.infrastructure.registry import CapabilityRegistry


@dataclass
class EmailTemplate:
    subject: str
    content: str
    headers: Dict[str, str] = field(default_factory=dict)

    def clone(self) -> "EmailTemplate":
        """Independent deep copy of this template."""
        return copy.deepcopy(self)

    def set_content(self, content: str) -> None:
        self.content = content

    def render(self, to: str) -> str:
        return f"Sending to {to}: [{self.subject}] {self.content}"

    def send(self, to: str) -> str:
        message = self.render(to)
        print(message)
        return message


class WelcomeEmail(EmailTemplate):
    def __init__(self):
        super().__init__(
            subject="Welcome to TUF+",
            content="Hi there! Thanks for joining us.",
        )


class PrototypeRegistry:
    """Stores prototypes by tag and hands out clones."""

    def __init__(self):
        self._prototypes: CapabilityRegistry[EmailTemplate] = CapabilityRegistry("Email template")

    def add(self, tag: str, prototype: EmailTemplate) -> None:
        self._prototypes.register(tag, prototype)

    def create(self, tag: str) -> EmailTemplate:
        """
        Clone the prototype stored under ``tag``.

        Raises:
            CapabilityNotFoundError: If no prototype is stored under the tag
        """
        return self._prototypes.resolve(tag).clone()


def main() -> None:
    registry = PrototypeRegistry()
    registry.add("welcome", WelcomeEmail())

    email1 = registry.create("welcome")
    email1.send("user1@example.com")

    email2 = email1.clone()
    email2.set_content("Hi there! Welcome to TUF Premium.")
    email2.send("user2@example.com")


if __name__ == "__main__":
    main()
