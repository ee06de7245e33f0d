"""
URL opener for tfcopen.

Hands a URL to the operating system's default handler, or prints it.
"""

import subprocess
import sys
import logging
from typing import Callable, List, Optional

import typer


logger = logging.getLogger(__name__)


def get_open_command(url: str, platform: Optional[str] = None) -> List[str]:
    """
    Build the command that opens url with the default application.

    Args:
        url: URL to open
        platform: Platform identifier in sys.platform form (defaults to the running one)
    """
    platform = platform or sys.platform
    if platform == 'darwin':
        return ['open', url]
    if platform in ('win32', 'cygwin'):
        # The empty argument is the window title consumed by start
        return ['cmd', '/c', 'start', '', url]
    return ['xdg-open', url]


def open_url(url: str, platform: Optional[str] = None) -> bool:
    """
    Launch the default handler for url without waiting for it.

    Returns:
        True if the handler was started, False if it could not be launched
    """
    command = get_open_command(url, platform)
    logger.debug(f"Running: {' '.join(command)}")
    try:
        subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        logger.warning(f"Could not open {url} with {command[0]}: {e}")
        return False
    return True


def open_or_print_url(url: str, print_only: bool,
                      echo: Callable[[str], None] = typer.echo) -> bool:
    """
    Print url to standard output or open it in the default browser.

    Returns:
        False only when opening was requested and the launch failed
    """
    if print_only:
        echo(url)
        return True
    return open_url(url)
