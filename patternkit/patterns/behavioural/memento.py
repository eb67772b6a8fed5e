"""Memento pattern: undo for a resume editor.

Letting a history object copy the editor's fields itself would break the
editor's encapsulation and tie the history to every field the editor has.

The editor produces an opaque, immutable snapshot (the memento) and knows how
to restore from one. The history only stacks snapshots.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class ResumeMemento:
    """Immutable snapshot of a resume."""
    name: Optional[str]
    education: Optional[str]
    experience: Optional[str]
    skills: Tuple[str, ...]


@dataclass
class ResumeEditor:
    """Originator holding the editable resume."""
    name: Optional[str] = None
    education: Optional[str] = None
    experience: Optional[str] = None
    skills: List[str] = field(default_factory=list)

    def set_skills(self, skills: Sequence[str]) -> None:
        self.skills = list(skills)

    def save(self) -> ResumeMemento:
        return ResumeMemento(self.name, self.education, self.experience, tuple(self.skills))

    def restore(self, memento: ResumeMemento) -> None:
        self.name = memento.name
        self.education = memento.education
        self.experience = memento.experience
        self.skills = list(memento.skills)

    def render(self) -> List[str]:
        return [
            "----- Resume -----",
            f"Name: {self.name}",
            f"Education: {self.education}",
            f"Experience: {self.experience}",
            f"Skills: [{', '.join(self.skills)}]",
            "------------------",
        ]

    def print_resume(self) -> None:
        for line in self.render():
            print(line)


class ResumeHistory:
    """Caretaker stacking snapshots of an editor."""

    def __init__(self):
        self._history: List[ResumeMemento] = []

    def save(self, editor: ResumeEditor) -> None:
        self._history.append(editor.save())

    def undo(self, editor: ResumeEditor) -> bool:
        """
        Restore the most recent snapshot.

        Returns:
            False when there is nothing to restore; the editor is untouched.
        """
        if not self._history:
            return False
        editor.restore(self._history.pop())
        return True

    def __len__(self) -> int:
        return len(self._history)


def main() -> None:
    editor = ResumeEditor()
    history = ResumeHistory()

    editor.name = "Alice"
    editor.education = "B.Tech CSE"
    editor.experience = "Fresher"
    editor.set_skills(["Java", "DSA"])
    history.save(editor)

    editor.experience = "SDE Intern at TUF+"
    editor.set_skills(["Java", "DSA", "LLD", "Spring Boot"])
    history.save(editor)

    editor.print_resume()
    print()

    history.undo(editor)
    editor.print_resume()
    print()

    history.undo(editor)
    editor.print_resume()


if __name__ == "__main__":
    main()
