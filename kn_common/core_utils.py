import os
import platform
import sys
import traceback
from datetime import datetime


def is_platform_windows() -> bool:
    return platform.system() == "Windows"


def LOG(*values: object, sep: str = " ", end: str = "\n", file=None, highlight: bool = False, show_time=True, show_traceback: bool = False, flush: bool = True) -> None:
    # Prepare the message
    message = sep.join(str(value) for value in values)

    if show_time:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        message = f"[{timestamp}] {message}"

    if show_traceback:
        max_frames = 5
        tb = traceback.format_stack()[-max_frames:]
        message = f"{message}\nBacktrace:\n" + "".join(tb)

    if highlight:
        HIGHLIGHT_COLOR = "\033[92m"  # green
        BOLD = "\033[1m"
        RESET = "\033[0m"
        print(f"{BOLD}{HIGHLIGHT_COLOR}", end="", file=file, flush=flush)
        print(message, end="", file=file, flush=flush)
        print(f"{RESET}", end=end, file=file, flush=flush)
    else:
        print(message, end=end, file=file, flush=flush)


def LOG_TO_STDERR(message: str) -> None:
    """Sink for engine traces. stdout is reserved for the path the shell cds into."""
    LOG(message, file=sys.stderr)


def LOG_EXCEPTION(exception: BaseException, msg=None, exit: bool = True):
    """Log error with essential info to stderr."""

    LOG(f"{type(exception).__name__}: {exception}", file=sys.stderr, highlight=True)
    if msg:
        LOG(f"- Context: {msg}", file=sys.stderr, highlight=True)

    location = getattr(exception, "location", None)
    if location:
        LOG(f"- Location: {location}", file=sys.stderr)
    state = getattr(exception, "state", None)
    if state is not None:
        LOG(f"- State: {state!r}", file=sys.stderr)

    if isinstance(exception, (FileNotFoundError, PermissionError, OSError)):
        if getattr(exception, 'filename', None):
            LOG(f"File: {exception.filename}", file=sys.stderr)

    # Show traceback, highlighting frames that belong to this project
    tb = traceback.extract_tb(exception.__traceback__)
    if tb:
        LOG("- Call stack:", file=sys.stderr)

        project_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        for frame in tb:
            is_local = frame.filename.startswith(project_dir)
            prefix = "  →" if is_local else "   "
            display_filename = frame.filename
            if is_local:
                display_filename = os.path.relpath(frame.filename, project_dir)

            LOG(f"{prefix} {display_filename}:{frame.lineno} in {frame.name}()",
                file=sys.stderr, highlight=is_local)

    if exit:
        sys.exit(1)
