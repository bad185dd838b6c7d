import logging
import shutil
import subprocess
from typing import Callable, Iterable, List, Optional

from ramo.core.errors import ClipboardError

ClipboardWriter = Callable[[str], None]

CLIPBOARD_COMMANDS = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


def system_clipboard_command() -> Optional[List[str]]:
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]):
            return cmd
    return None


def write_system_clipboard(text: str) -> None:
    cmd = system_clipboard_command()
    if not cmd:
        raise ClipboardError("No clipboard utility found.")

    try:
        subprocess.run(cmd, input=text, text=True, check=True, timeout=5, capture_output=True)
    except (subprocess.SubprocessError, OSError) as e:
        raise ClipboardError(f"{cmd[0]} failed: {e}") from e


def copy_with_fallback(text: str, writers: Iterable[ClipboardWriter]) -> bool:
    """Tries each writer in turn. Returns False only when all of them failed."""
    for writer in writers:
        name = getattr(writer, "__name__", repr(writer))
        try:
            writer(text)
            logging.info(f"Copied {len(text)} chars with {name}")
            return True
        except Exception as e:
            logging.error(f"Clipboard writer {name} failed: {e}")
    return False
