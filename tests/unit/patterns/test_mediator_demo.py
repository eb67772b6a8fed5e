"""Tests for the collaborative document mediator demonstration."""

from patternkit.patterns.behavioural import mediator
from patternkit.patterns.behavioural.mediator import CollaborativeDocument, User


def test_change_reaches_everyone_but_the_sender():
    doc = CollaborativeDocument()
    alice, bob, carol = User("Alice", doc), User("Bob", doc), User("Carol", doc)
    for user in (alice, bob, carol):
        doc.join(user)

    alice.make_change("title")

    assert alice.received == []
    assert bob.received == ["title"]
    assert carol.received == ["title"]


def test_users_who_have_not_joined_receive_nothing():
    doc = CollaborativeDocument()
    alice, outsider = User("Alice", doc), User("Outsider", doc)
    doc.join(alice)

    alice.make_change("draft")

    assert outsider.received == []


def test_main_output(capsys):
    mediator.main()

    assert capsys.readouterr().out.splitlines() == [
        "Alice edited the document: Added project title",
        'Bob saw change from Alice: "Added project title"',
        'Charlie saw change from Alice: "Added project title"',
        "Bob edited the document: Corrected grammar in paragraph 2",
        'Alice saw change from Bob: "Corrected grammar in paragraph 2"',
        'Charlie saw change from Bob: "Corrected grammar in paragraph 2"',
    ]
