"""
Default Application Launcher

Hands a path to whatever the host desktop has registered for it.

Author: YSNRFD
Version: 1.0.0
"""

import os
import platform
import subprocess

from pyexplorer.exceptions import FileOperationError
from pyexplorer.logger import get_logger


_logger = get_logger('launcher')


def _launcher_command(path: str) -> list[str]:
    if platform.system() == 'Darwin':
        return ['open', path]
    return ['xdg-open', path]


def open_with_default_app(path: str) -> None:
    """
    Open a path with the host's default handler.
    
    Windows goes through os.startfile; macOS uses `open` and everything
    else `xdg-open`. Both launchers exit non-zero when no handler is
    registered.
    
    Args:
        path: Absolute path to open
    
    Raises:
        FileOperationError: If no handler exists or the launcher fails
    """
    if platform.system() == 'Windows':
        try:
            os.startfile(path)
        except OSError as e:
            raise FileOperationError.from_os_error("Failed to open", path, e)
        return
    
    command = _launcher_command(path)
    _logger.debug("Launching default handler", context={'command': ' '.join(command)})
    
    try:
        subprocess.run(
            command,
            check=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        raise FileOperationError(
            "Failed to open", path,
            reason=f"launcher '{command[0]}' is not installed"
        )
    except subprocess.CalledProcessError as e:
        raise FileOperationError(
            "Failed to open", path,
            reason=f"'{command[0]}' exited with status {e.returncode}"
        )
    except OSError as e:
        raise FileOperationError.from_os_error("Failed to open", path, e)
