"""Mediator pattern: collaborative document editing.

If every user held references to every other user, each join would rewire the
whole group and broadcasting would be duplicated in every user.

Users talk only to the document session, which relays each change to the
other participants.
"""
from typing import List, Protocol


class DocumentSessionMediator(Protocol):
    def join(self, user: "User") -> None:
        ...

    def broadcast_change(self, change: str, sender: "User") -> None:
        ...


class CollaborativeDocument:
    """Mediator relaying edits between joined users."""

    def __init__(self):
        self.users: List["User"] = []

    def join(self, user: "User") -> None:
        self.users.append(user)

    def broadcast_change(self, change: str, sender: "User") -> None:
        for user in self.users:
            if user is not sender:
                user.receive_change(change, sender)


class User:
    """Participant that edits through the mediator."""

    def __init__(self, name: str, mediator: DocumentSessionMediator):
        self.name = name
        self.mediator = mediator
        self.received: List[str] = []

    def make_change(self, change: str) -> None:
        print(f"{self.name} edited the document: {change}")
        self.mediator.broadcast_change(change, self)

    def receive_change(self, change: str, sender: "User") -> None:
        self.received.append(change)
        print(f'{self.name} saw change from {sender.name}: "{change}"')


def main() -> None:
    doc = CollaborativeDocument()

    alice = User("Alice", doc)
    bob = User("Bob", doc)
    charlie = User("Charlie", doc)

    doc.join(alice)
    doc.join(bob)
    doc.join(charlie)

    alice.make_change("Added project title")
    bob.make_change("Corrected grammar in paragraph 2")


if __name__ == "__main__":
    main()
