#!/usr/bin/env python3
"""
PyExplorer - An interactive command-line file browser

This is the main entry point for PyExplorer.

Startup sequence:
1. Load configuration (config.json beside this file, if present)
2. Initialize logging
3. Capture the working directory
4. Run the shell

Author: YSNRFD
Version: 1.0.0
"""

import os
import sys
from typing import Optional

from pyexplorer.core.config_loader import ConfigLoader, Config
from pyexplorer.exceptions import ConfigError
from pyexplorer.filesystem.explorer import FileExplorer
from pyexplorer.logger import Logger, LogLevel, get_logger
from pyexplorer.shell.shell import Shell


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.json')


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
    """
    Load the configuration, falling back to defaults.
    
    A missing file is normal; an unreadable or invalid one is reported
    on stderr and the defaults are used.
    """
    loader = ConfigLoader()
    
    if not os.path.exists(config_path):
        return loader.config
    
    try:
        return loader.load(config_path)
    except ConfigError as e:
        print(f"pyexplorer: {e}; using defaults", file=sys.stderr)
        loader.reset()
        return loader.config


def main(config_path: Optional[str] = None) -> int:
    """
    Main entry point for PyExplorer.
    
    Returns:
        Process exit status, always 0
    """
    config = load_config(config_path or DEFAULT_CONFIG_PATH)
    
    Logger.initialize(
        level=LogLevel.from_name(config.logging.level),
        log_file=config.logging.log_file,
        console_output=config.logging.console_output,
        use_colors=config.shell.use_colors,
    )
    logger = get_logger('main')
    
    try:
        shell = Shell(explorer=FileExplorer(), config=config)
        return shell.run()
    except OSError as e:
        # The working directory can vanish before we start.
        logger.error(f"Cannot start session: {e}")
        print(f"pyexplorer: cannot start session: {e}", file=sys.stderr)
        return 0
    finally:
        Logger.shutdown()


if __name__ == '__main__':
    sys.exit(main())
