"""Tests for the resume editor memento demonstration."""

import pytest

from patternkit.patterns.behavioural import memento
from patternkit.patterns.behavioural.memento import ResumeEditor, ResumeHistory


@pytest.fixture
def editor():
    editor = ResumeEditor(name="Alice", education="B.Tech", experience="Fresher")
    editor.set_skills(["Java"])
    return editor


def test_snapshot_is_immutable_and_detached(editor):
    snapshot = editor.save()
    editor.skills.append("Go")

    assert snapshot.skills == ("Java",)
    with pytest.raises(AttributeError):
        snapshot.name = "Mallory"


def test_undo_restores_saved_state(editor):
    history = ResumeHistory()
    history.save(editor)

    editor.experience = "SDE"
    editor.set_skills(["Java", "LLD"])

    assert history.undo(editor) is True
    assert editor.experience == "Fresher"
    assert editor.skills == ["Java"]


def test_undo_is_last_in_first_out(editor):
    history = ResumeHistory()
    history.save(editor)
    editor.experience = "Intern"
    history.save(editor)
    editor.experience = "Senior"

    history.undo(editor)
    assert editor.experience == "Intern"
    history.undo(editor)
    assert editor.experience == "Fresher"
    assert len(history) == 0


def test_undo_with_empty_history_leaves_editor_untouched(editor):
    before = editor.save()

    assert ResumeHistory().undo(editor) is False
    assert editor.save() == before


def test_render(editor):
    assert editor.render() == [
        "----- Resume -----",
        "Name: Alice",
        "Education: B.Tech",
        "Experience: Fresher",
        "Skills: [Java]",
        "------------------",
    ]


def test_main_output(capsys):
    memento.main()

    blocks = capsys.readouterr().out.split("\n\n")
    assert len(blocks) == 3
    assert "Experience: SDE Intern at TUF+" in blocks[0]
    assert "Skills: [Java, DSA, LLD, Spring Boot]" in blocks[0]
    # The first undo restores the snapshot taken right before printing
    assert blocks[1] == blocks[0]
    assert "Experience: Fresher" in blocks[2]
    assert "Skills: [Java, DSA]" in blocks[2]
