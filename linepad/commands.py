"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command
        """


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        self._move(editor, key_event)

    @abstractmethod
    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the movement."""


class LeftCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.navigator.move_left()


class RightCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.navigator.move_right()


class UpLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.navigator.move_up()


class DownLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.navigator.move_down()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        self._edit(editor, key_event)

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.erase_character()


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.new_line()


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        char = key_event.value
        # Tab is the only control character that goes into the text
        if char == '\t' or ord(char[0]) >= 32:
            for ch in char:
                editor.insert_character(ch)


class SystemCommand(EditorCommand):
    """Base class for commands that end the editing phase."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        self._execute_system(editor, key_event)

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.force_save()


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.request_exit()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCharCommand())
        self.register((KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((KeyType.SPECIAL, 'down'), DownLineCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.CTRL, 'h'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        # System commands
        self.register((KeyType.CTRL, 's'), SaveCommand())
        self.register((KeyType.SPECIAL, 'escape'), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination.

        Regular characters without a binding of their own insert themselves.
        """
        command = self._commands.get((key_type, value))
        if command is None and key_type == KeyType.REGULAR:
            return self._insert_text
        return command

    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Execute the command for the given key event; unbound keys do nothing."""
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            command.execute(editor, key_event)
