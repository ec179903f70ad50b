import os
import sys
import time
from datetime import datetime, timedelta

from pathlib import Path

# Compute project root (top-level folder)
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def short_path(p):
    if not p:
        return p
    p = Path(p)
    try:
        return str(p.relative_to(PROJECT_ROOT))
    except ValueError:
        return p.name  # last component only


def _shorten_path_in_msg(msg: str) -> str:
    """
    If message ends with a path (after ': '), shorten it relative to the
    project root. Anything else is returned unchanged.
    """
    if not isinstance(msg, str):
        return msg

    head, sep, tail = msg.rpartition(': ')
    if sep and (('\\' in tail) or ('/' in tail)):
        return f"{head}{sep}{short_path(tail)}"

    return msg


# ============================================================================
# CONFIG
# ============================================================================
ENABLE_COLORS = os.environ.get("REVENUE_STORY_LOG_COLORS", "1") != "0"
ENABLE_FILE_LOG = False       # Save logs to file
LOG_FILE = "logs/revenue_story.log"

COLORS = {
    "INFO":  "\033[94m",   # Blue
    "DONE":  "\033[92m",   # Green
    "SKIP":  "\033[90m",   # Grey
    "WARN":  "\033[95m",   # Magenta
    "FAIL":  "\033[91m",   # Red
    "RESET": "\033[0m",
}

# ============================================================================
# HELPERS
# ============================================================================

def fmt_sec(sec):
    """Return a clean human-readable time string."""
    if sec < 1:
        return f"{sec*1000:.0f}ms"
    if sec < 60:
        return f"{sec:.1f}s"
    return str(timedelta(seconds=int(sec)))


def _line(level, msg):
    """ Standard log line formatter. """
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    if ENABLE_COLORS:
        color = COLORS.get(level, "")
        reset = COLORS["RESET"]
        level_str = f"{color}{level:<5}{reset}"
    else:
        level_str = f"{level:<5}"

    return f"{ts} | {level_str} | {msg}"


def _flush(line):
    # stderr keeps stdout clean for JSON output
    print(line, file=sys.stderr, flush=True)

    if ENABLE_FILE_LOG:
        os.makedirs(os.path.dirname(LOG_FILE), exist_ok=True)
        with open(LOG_FILE, "a", encoding="utf-8") as f:
            f.write(line + "\n")


# ============================================================================
# BASIC LOG LEVEL FUNCTIONS
# ============================================================================
def info(msg):
    msg = _shorten_path_in_msg(msg)
    _flush(_line("INFO", msg))


def warn(msg):
    _flush(_line("WARN", msg))


def fail(msg):
    _flush(_line("FAIL", msg))


def skip(msg):
    _flush(_line("SKIP", msg))


def done(msg):
    msg = _shorten_path_in_msg(msg)
    _flush(_line("DONE", msg))


# ============================================================================
# STAGE CONTEXT MANAGER (Auto-timed)
# ============================================================================
class stage:
    """Logs a stage start and its elapsed time on exit."""

    def __init__(self, msg):
        self.msg = msg
        self.start = None

    def __enter__(self):
        self.start = time.time()
        info(self.msg)
        return self

    def __exit__(self, exc_type, exc, tb):
        elapsed = fmt_sec(time.time() - self.start)
        if exc_type is None:
            done(f"{self.msg} completed in {elapsed}")
        else:
            fail(f"{self.msg} failed after {elapsed}: {exc}")
        return False
