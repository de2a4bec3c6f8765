"""
Console Output Module

Every line the shell prints goes through Console so colors can be
switched off in one place.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from typing import Optional, TextIO

from colorama import Back, Fore, Style, just_fix_windows_console


# readline needs non-printing markers around escape codes in a prompt
# or it miscounts the prompt width.
RL_START = '\001'
RL_END = '\002'

# colorama has no underline constant
UNDERLINE = '\033[4m'

SUCCESS_MARK = '✓'
FAILURE_MARK = '✗'
PROMPT_MARK = '➤'
LISTING_MARK = '📂'


class Console:
    """
    Colored terminal output for the explorer.
    
    Example:
        >>> console = Console(use_colors=False)
        >>> console.success("Created a.txt")
        ✓ Created a.txt
    """
    
    def __init__(self, use_colors: bool = True, stream: Optional[TextIO] = None):
        self._stream = stream
        self.use_colors = use_colors
        if use_colors:
            just_fix_windows_console()
    
    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout
    
    def style(self, text: str, *codes: str) -> str:
        """Wrap text in color codes when colors are on."""
        if not self.use_colors or not codes:
            return text
        return f"{''.join(codes)}{text}{Style.RESET_ALL}"
    
    def write(self, text: str = '') -> None:
        print(text, file=self.stream)
    
    def success(self, message: str) -> None:
        self.write(f"{self.style(SUCCESS_MARK, Fore.GREEN)} {self.style(message, Fore.CYAN)}")
    
    def failure(self, message: str) -> None:
        self.write(f"{self.style(FAILURE_MARK, Fore.RED)} {self.style(f'Error: {message}', Fore.RED)}")
    
    def usage(self, text: str) -> None:
        self.write(self.style(f"Usage: {text}", Fore.YELLOW))
    
    def unknown(self, command: str) -> None:
        self.write(
            f"{self.style('Unknown command', Fore.RED, Style.BRIGHT)}: "
            f"{self.style(command, Fore.YELLOW)}"
        )
    
    def heading(self, text: str) -> None:
        self.write(f"{self.style(LISTING_MARK, Fore.CYAN)} {self.style(text, Style.BRIGHT)}")
    
    def entry(self, name: str, is_dir: bool) -> None:
        if is_dir:
            self.write(f"  {self.style(name, Fore.BLUE, Style.BRIGHT)}")
        else:
            self.write(f"  {self.style(name, Fore.YELLOW)}")
    
    def banner(self, title: str, width: int = 40) -> None:
        self.write(self.style(title, Style.BRIGHT, Back.CYAN, Fore.BLACK))
        self.write(self.style('━' * width, Fore.CYAN))
    
    def help(self, commands: list[tuple[str, str, bool]]) -> None:
        """
        Print the command reference.
        
        Args:
            commands: (name, text, is_argument) triples; arguments are
                highlighted, descriptions are plain
        """
        self.write()
        self.write(self.style("Available commands:", Style.BRIGHT, UNDERLINE))
        for name, text, is_argument in commands:
            colored_name = self.style(name, Fore.CYAN, Style.BRIGHT)
            if is_argument:
                self.write(f"  {colored_name} {self.style(text, Fore.YELLOW)}")
            else:
                self.write(f"  {colored_name}  {self.style(text, Fore.WHITE)}")
        self.write()
    
    def prompt(self, cwd: str, readline_markers: bool = False) -> str:
        """Build the input prompt for the given directory."""
        if not self.use_colors:
            return f"{PROMPT_MARK} {cwd} "
        
        def mark(code: str) -> str:
            if readline_markers:
                return f"{RL_START}{code}{RL_END}"
            return code
        
        return (
            f"{mark(Fore.GREEN + Style.BRIGHT)}{PROMPT_MARK}{mark(Style.RESET_ALL)} "
            f"{mark(Fore.CYAN)}{cwd}{mark(Style.RESET_ALL)} "
        )
