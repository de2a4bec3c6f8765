"""
Shell Tests

Drives the command loop with scripted input and checks what it prints.

Author: YSNRFD
Version: 1.0.0
"""

import io
import os
import tempfile
import unittest
from unittest.mock import patch

from pyexplorer.core.config_loader import Config, ShellConfig
from pyexplorer.filesystem.explorer import FileExplorer
from pyexplorer.shell.console import Console
from pyexplorer.shell.shell import Shell, ShellState


class ShellTestCase(unittest.TestCase):
    
    def setUp(self):
        self._old_cwd = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)
        os.chdir(self.root)
        self.out = io.StringIO()
        self.shell = self.make_shell()
    
    def tearDown(self):
        os.chdir(self._old_cwd)
        self._tmp.cleanup()
    
    def make_shell(self, show_help=False):
        config = Config(shell=ShellConfig(use_colors=False, show_help_on_start=show_help))
        return Shell(
            explorer=FileExplorer(),
            config=config,
            console=Console(use_colors=False, stream=self.out),
        )
    
    def run_session(self, *lines):
        """Feed lines to the shell followed by end-of-input."""
        with patch('builtins.input', side_effect=list(lines) + [EOFError()]) as fake_input:
            status = self.shell.run()
        self.assertEqual(status, 0)
        return fake_input
    
    def output_lines(self):
        return self.out.getvalue().splitlines()


class TestSessionScenarios(ShellTestCase):
    """End-to-end command sequences."""
    
    def test_create_list_delete(self):
        self.run_session('create a.txt', 'ls', 'delete a.txt', 'ls')
        lines = self.output_lines()
        
        heading = f"📂 Contents of {self.root}:"
        self.assertIn("✓ Created a.txt", lines)
        self.assertIn("✓ Deleted a.txt", lines)
        
        first = lines.index(heading)
        self.assertEqual(lines[first + 1], "  a.txt")
        second = lines.index(heading, first + 1)
        self.assertEqual(lines[second + 1:], [''])
        self.assertFalse(os.path.exists('a.txt'))
    
    def test_cd_into_missing_directory(self):
        self.run_session('cd nope')
        
        failure = f"✗ Error: Directory not found: {os.path.join(self.root, 'nope')}"
        self.assertIn(failure, self.output_lines())
        self.assertEqual(self.shell.explorer.current_dir, self.root)
    
    def test_cd_success_message(self):
        os.mkdir('sub')
        self.run_session('cd sub')
        
        target = os.path.join(self.root, 'sub')
        self.assertIn(f"✓ Changed directory to {target}", self.output_lines())
        self.assertEqual(self.shell.explorer.current_dir, target)
    
    def test_blank_lines_produce_no_output(self):
        self.run_session()
        baseline = self.out.getvalue()
        
        self.out.truncate(0)
        self.out.seek(0)
        self.shell = self.make_shell()
        self.run_session('', '   ', '\t')
        
        self.assertEqual(self.out.getvalue(), baseline)
    
    def test_cd_parent_at_root(self):
        root = os.path.abspath(os.sep)
        self.shell.explorer.change_directory(root)
        self.run_session('cd ..', 'ls')
        self.assertEqual(self.shell.explorer.current_dir, os.path.realpath(root))
    
    def test_errors_do_not_end_session(self):
        fake_input = self.run_session('delete ghost', 'create a.txt')
        
        self.assertEqual(fake_input.call_count, 3)
        self.assertTrue(any(line.startswith("✗ Error: Failed to delete") for line in self.output_lines()))
        self.assertIn("✓ Created a.txt", self.output_lines())
    
    def test_open_reports_success(self):
        self.shell.explorer.create_file('doc.txt')
        with patch('pyexplorer.filesystem.explorer.open_with_default_app'):
            self.run_session('open doc.txt')
        self.assertIn("✓ Opened doc.txt", self.output_lines())
    
    def test_unexpected_error_is_reported(self):
        with patch.object(self.shell.explorer, 'list_entries', side_effect=RuntimeError("boom")):
            fake_input = self.run_session('ls', 'ls')
        
        self.assertEqual(self.output_lines().count("✗ Error: boom"), 2)
        self.assertEqual(fake_input.call_count, 3)


class TestDispatch(ShellTestCase):
    """Command selection and argument checks."""
    
    def test_unknown_command(self):
        self.run_session('frobnicate now')
        self.assertIn("Unknown command: frobnicate", self.output_lines())
    
    def test_usage_messages(self):
        self.run_session('cd', 'open', 'delete', 'create')
        lines = self.output_lines()
        
        for usage in ("Usage: cd <directory>", "Usage: open <filename>",
                      "Usage: delete <filename>", "Usage: create <filename>"):
            self.assertIn(usage, lines)
    
    def test_extra_arguments_are_ignored(self):
        self.run_session('create one.txt two.txt')
        self.assertTrue(os.path.exists('one.txt'))
        self.assertFalse(os.path.exists('two.txt'))
    
    def test_help_lists_every_command(self):
        self.run_session('help')
        text = self.out.getvalue()
        
        self.assertIn("Available commands:", text)
        for name in ('cd', 'ls', 'open', 'delete', 'create', 'help', 'exit'):
            self.assertIn(f"  {name} ", text)
    
    def test_execute_line_returns_exit_codes(self):
        self.assertEqual(self.shell.execute_line(''), 0)
        self.assertEqual(self.shell.execute_line('create x.txt'), 0)
        self.assertEqual(self.shell.execute_line('cd missing'), 1)
        self.assertEqual(self.shell.execute_line('cd'), 1)
        self.assertEqual(self.shell.execute_line('bogus'), 127)


class TestTermination(ShellTestCase):
    """Every way out of the loop ends in TERMINATED with status 0."""
    
    def test_exit_stops_reading(self):
        with patch('builtins.input', side_effect=['exit', 'ls']) as fake_input:
            status = self.shell.run()
        
        self.assertEqual(status, 0)
        self.assertEqual(fake_input.call_count, 1)
        self.assertIs(self.shell.state, ShellState.TERMINATED)
    
    def test_exit_prints_nothing(self):
        self.run_session()
        before = self.out.getvalue()
        
        self.out.truncate(0)
        self.out.seek(0)
        self.shell = self.make_shell()
        with patch('builtins.input', side_effect=['exit']):
            self.shell.run()
        
        # end-of-input prints a newline, exit does not
        self.assertEqual(self.out.getvalue() + "\n", before)
    
    def test_end_of_input(self):
        self.run_session('ls')
        self.assertIs(self.shell.state, ShellState.TERMINATED)
    
    def test_interrupt(self):
        with patch('builtins.input', side_effect=KeyboardInterrupt()):
            self.assertEqual(self.shell.run(), 0)
        self.assertIs(self.shell.state, ShellState.TERMINATED)
    
    def test_read_error(self):
        with patch('builtins.input', side_effect=OSError("tty gone")):
            self.assertEqual(self.shell.run(), 0)
        self.assertIs(self.shell.state, ShellState.TERMINATED)


class TestWelcome(ShellTestCase):
    
    def test_banner_and_help(self):
        self.shell = self.make_shell(show_help=True)
        self.run_session()
        lines = self.output_lines()
        
        self.assertEqual(lines[0], " PyExplorer ")
        self.assertEqual(lines[1], "━" * 40)
        self.assertIn("Available commands:", lines)
    
    def test_prompt_shows_current_directory(self):
        with patch('builtins.input', side_effect=EOFError()) as fake_input:
            self.shell.run()
        fake_input.assert_called_once_with(f"➤ {self.root} ")


if __name__ == '__main__':
    unittest.main()
