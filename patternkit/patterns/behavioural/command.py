"""Command pattern: a remote control with undo.

A naive remote calls ``light.on()`` and ``ac.off()`` directly and remembers
only a ``last_action`` string, so undo is a switch over every action it knows
and only goes one step back.

Commands wrap a receiver and an action behind ``execute``/``undo``. The remote
(invoker) keeps its buttons in a registry keyed by slot and pushes every
executed command onto a LIFO history.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.registry import CapabilityRegistry

logger = get_logger(__name__)


# Receivers

class Light:
    """Receiver that can be switched on and off."""

    def __init__(self):
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print("Light turned ON")

    def off(self) -> None:
        self.is_on = False
        print("Light turned OFF")


class AirConditioner:
    """Receiver that can be switched on and off."""

    def __init__(self):
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print("AC turned ON")

    def off(self) -> None:
        self.is_on = False
        print("AC turned OFF")


# Commands

class Command(ABC):
    """A request wrapped as an object."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the action."""


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.on()

    def undo(self) -> None:
        self.light.off()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.off()

    def undo(self) -> None:
        self.light.on()


class AirConditionerOnCommand(Command):
    def __init__(self, ac: AirConditioner):
        self.ac = ac

    def execute(self) -> None:
        self.ac.on()

    def undo(self) -> None:
        self.ac.off()


class AirConditionerOffCommand(Command):
    def __init__(self, ac: AirConditioner):
        self.ac = ac

    def execute(self) -> None:
        self.ac.off()

    def undo(self) -> None:
        self.ac.on()


class CommandHistory:
    """LIFO stack of executed commands."""

    def __init__(self):
        self._stack: List[Command] = []

    def push(self, command: Command) -> None:
        self._stack.append(command)

    def pop(self) -> Optional[Command]:
        """Most recent command, or None when the history is empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def undo(self) -> bool:
        """
        Undo the most recent command.

        Returns:
            False when there was nothing to undo.
        """
        command = self.pop()
        if command is None:
            return False
        command.undo()
        return True

    def __len__(self) -> int:
        return len(self._stack)


class RemoteControl:
    """Invoker: buttons bound to commands, plus an undo button."""

    def __init__(self):
        self._buttons: CapabilityRegistry[Command] = CapabilityRegistry("Remote slot")
        self.history = CommandHistory()

    def set_command(self, slot: int, command: Command) -> None:
        """Bind a command to a slot, replacing whatever was there."""
        self._buttons.register(slot, command)

    def press_button(self, slot: int) -> None:
        """
        Execute the command bound to a slot.

        Raises:
            CapabilityNotFoundError: If nothing is bound to the slot
        """
        command = self._buttons.resolve(slot)
        command.execute()
        self.history.push(command)

    def press_undo(self) -> bool:
        """Undo the last executed command. Returns False if there was none."""
        if self.history.undo():
            return True
        logger.debug("Undo requested with empty history")
        print("No commands to undo.")
        return False


def main() -> None:
    light = Light()
    ac = AirConditioner()

    remote = RemoteControl()
    remote.set_command(0, LightOnCommand(light))
    remote.set_command(1, LightOffCommand(light))
    remote.set_command(2, AirConditionerOnCommand(ac))
    remote.set_command(3, AirConditionerOffCommand(ac))

    remote.press_button(0)  # Light ON
    remote.press_button(2)  # AC ON
    remote.press_button(1)  # Light OFF
    remote.press_undo()     # Light back ON
    remote.press_undo()     # AC back OFF


if __name__ == "__main__":
    main()
