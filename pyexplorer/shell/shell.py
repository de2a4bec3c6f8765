"""
PyExplorer Shell Module

The interactive command loop for the file explorer.

Author: YSNRFD
Version: 1.0.0
"""

from enum import Enum, auto
from typing import Optional

try:
    import readline
except ImportError:
    # Not shipped on every platform; input() still works without recall.
    readline = None

from .builtins import BuiltinCommands
from .console import Console
from .parser import CommandParser, ParsedCommand
from pyexplorer.core.config_loader import Config, get_config
from pyexplorer.filesystem.explorer import FileExplorer
from pyexplorer.logger import get_logger


class ShellState(Enum):
    """
    Command loop states.
    
    State transitions:
        RUNNING -> TERMINATED: exit, end of input, interrupt or read error
    """
    
    RUNNING = auto()
    TERMINATED = auto()


class Shell:
    """
    PyExplorer Interactive Shell.
    
    Provides:
    - Prompt showing the current directory
    - Command parsing and dispatch to built-in commands
    - In-memory line recall through readline, when available
    
    Example:
        >>> shell = Shell()
        >>> shell.run()
    """
    
    def __init__(
        self,
        explorer: Optional[FileExplorer] = None,
        config: Optional[Config] = None,
        console: Optional[Console] = None
    ):
        self._config = config or get_config()
        self._logger = get_logger('shell')
        self._explorer = explorer or FileExplorer()
        self._console = console or Console(use_colors=self._config.shell.use_colors)
        self._parser = CommandParser()
        self._builtins = BuiltinCommands(self)
        self._state = ShellState.TERMINATED
    
    @property
    def explorer(self) -> FileExplorer:
        return self._explorer
    
    @property
    def console(self) -> Console:
        return self._console
    
    @property
    def state(self) -> ShellState:
        return self._state
    
    def run(self) -> int:
        """
        Run the interactive shell.
        
        This is the main REPL loop. End-of-input and Ctrl-C print one
        newline before terminating so the terminal's next prompt starts
        on a fresh line; `exit` prints nothing.

        Returns:
            Exit status, always 0
        """
        self._state = ShellState.RUNNING
        self._setup_line_editing()
        self._print_welcome()
        self._logger.info("Session started", context={'cwd': self._explorer.current_dir})
        
        while self._state is ShellState.RUNNING:
            try:
                line = input(self._get_prompt())
            except (EOFError, KeyboardInterrupt):
                self._console.write()
                self._state = ShellState.TERMINATED
                break
            except OSError as e:
                self._logger.warning(f"Read error: {e}")
                self._state = ShellState.TERMINATED
                break
            
            try:
                self.execute_line(line)
            except Exception as e:
                self._logger.exception(f"Shell error: {e}", exc=e)
                self._console.failure(str(e))
        
        self._logger.info("Session ended")
        return 0
    
    def _setup_line_editing(self) -> None:
        if readline is None:
            return
        readline.set_history_length(self._config.shell.history_size)
    
    def _print_welcome(self) -> None:
        self._console.banner(self._config.shell.banner)
        if self._config.shell.show_help_on_start:
            self._builtins.execute('help', [])
    
    def _get_prompt(self) -> str:
        """Generate the shell prompt."""
        return self._console.prompt(
            self._explorer.current_dir,
            readline_markers=readline is not None
        )
    
    def execute_line(self, line: str) -> int:
        """
        Execute a command line.
        
        Args:
            line: Command line string
        
        Returns:
            Exit code; 0 for a blank line
        """
        cmd = self._parser.parse(line)
        
        if cmd is None:
            return 0
        
        return self._execute_command(cmd)
    
    def _execute_command(self, cmd: ParsedCommand) -> int:
        self._logger.debug("Dispatching", context={'command': cmd.command, 'args': cmd.args})
        return self._builtins.execute(cmd.command, cmd.args)
    
    def request_exit(self) -> None:
        """Request the shell to exit."""
        self._state = ShellState.TERMINATED
