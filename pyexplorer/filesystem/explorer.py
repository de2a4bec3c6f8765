"""
File Explorer Session State

Tracks the current working directory and performs filesystem
operations relative to it.

Author: YSNRFD
Version: 1.0.0
"""

import os
import shutil
from dataclasses import dataclass
from typing import Optional, List

from pyexplorer.exceptions import DirectoryNotFoundError, FileOperationError
from pyexplorer.logger import get_logger
from .launcher import open_with_default_app


@dataclass(frozen=True)
class DirEntry:
    """A named item inside a listed directory."""
    name: str
    is_dir: bool


def _is_text_name(name: str) -> bool:
    # os.scandir surfaces undecodable bytes as lone surrogates
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


class FileExplorer:
    """
    Session state for the interactive explorer.
    
    Holds one absolute, canonical directory path that is kept in sync
    with the process working directory. Every path argument is joined
    onto it, so absolute arguments replace it outright.
    
    Example:
        >>> explorer = FileExplorer()
        >>> explorer.change_directory('..')
        >>> [e.name for e in explorer.list_entries()]
    """
    
    def __init__(self, start_dir: Optional[str] = None):
        """
        Initialize the session.
        
        Args:
            start_dir: Directory to start in; defaults to the process
                working directory
        """
        self._logger = get_logger('explorer')
        self._current_dir = os.path.realpath(os.getcwd())
        if start_dir is not None:
            self.change_directory(start_dir)
    
    @property
    def current_dir(self) -> str:
        return self._current_dir
    
    def resolve(self, path: str) -> str:
        """Join a user-supplied path onto the current directory."""
        return os.path.join(self._current_dir, path)
    
    def change_directory(self, path: str) -> None:
        """
        Change the current directory.
        
        Args:
            path: Target directory, relative or absolute
        
        Raises:
            DirectoryNotFoundError: If the target is not an existing directory
            FileOperationError: If the OS refuses the change
        """
        new_path = self.resolve(path)
        
        if not os.path.isdir(new_path):
            self._logger.warning("Directory not found", context={'path': new_path})
            raise DirectoryNotFoundError(new_path)
        
        try:
            os.chdir(new_path)
        except OSError as e:
            raise FileOperationError.from_os_error(
                "Failed to change directory", new_path, e
            )
        
        self._current_dir = os.path.realpath(new_path)
        self._logger.info("Changed directory", context={'path': self._current_dir})
    
    def create_file(self, filename: str) -> str:
        """
        Create an empty file, truncating an existing plain file.
        
        Returns:
            The path that was created
        
        Raises:
            FileOperationError: If the file cannot be created
        """
        path = self.resolve(filename)
        
        try:
            with open(path, 'w'):
                pass
        except OSError as e:
            self._logger.warning("Create failed", context={'path': path, 'error': e})
            raise FileOperationError.from_os_error("Failed to create file", path, e)
        
        self._logger.info("Created file", context={'path': path})
        return path
    
    def delete_path(self, name: str) -> str:
        """
        Delete a file, or a directory and everything in it.
        
        There is no confirmation step; directories go recursively.
        Symlinks are removed themselves, never their targets.
        
        Returns:
            The path that was deleted
        
        Raises:
            FileOperationError: If the removal fails
        """
        target = self.resolve(name)
        
        try:
            if os.path.isdir(target) and not os.path.islink(target):
                shutil.rmtree(target)
            else:
                os.remove(target)
        except OSError as e:
            self._logger.warning("Delete failed", context={'path': target, 'error': e})
            raise FileOperationError.from_os_error("Failed to delete", target, e)
        
        self._logger.info("Deleted", context={'path': target})
        return target
    
    def open_file(self, filename: str) -> str:
        """
        Open a file with the host's default application.
        
        Returns:
            The path that was opened
        
        Raises:
            FileOperationError: If the path is missing or no handler works
        """
        path = self.resolve(filename)
        
        if not os.path.exists(path):
            raise FileOperationError(
                "Failed to open", path, reason="No such file or directory"
            )
        
        open_with_default_app(path)
        self._logger.info("Opened", context={'path': path})
        return path
    
    def list_entries(self) -> List[DirEntry]:
        """
        List the current directory in OS enumeration order.
        
        Entries whose names are not valid text are skipped.
        
        Raises:
            FileOperationError: If the directory cannot be read
        """
        entries: List[DirEntry] = []
        
        try:
            with os.scandir(self._current_dir) as it:
                for entry in it:
                    if not _is_text_name(entry.name):
                        self._logger.debug("Skipping undecodable entry name")
                        continue
                    
                    try:
                        is_dir = entry.is_dir()
                    except OSError:
                        is_dir = False
                    
                    entries.append(DirEntry(name=entry.name, is_dir=is_dir))
        except OSError as e:
            raise FileOperationError.from_os_error(
                "Failed to read directory", self._current_dir, e
            )
        
        return entries
