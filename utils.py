# --- utils.py ---

import time
from colorama import Fore, Style, init

init()

# Diagnostic levels passed to a sink
WARNING = 'WARN'
ERROR = 'ERROR'

LEVEL_COLORS = {
    WARNING: Fore.YELLOW,
    ERROR:   Fore.RED,
}

VERBOSE = False
start_time = None

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)

def console_sink(level, msg):
    """Default diagnostics sink: timestamped, coloured by level."""
    log_with_time(f"{level}: {msg}", color=LEVEL_COLORS.get(level, Fore.WHITE))

def resolve_sink(sink):
    return console_sink if sink is None else sink

def is_word_list(words):
    """True for a non-empty list or tuple whose items are all strings."""
    return (
        isinstance(words, (list, tuple))
        and len(words) > 0
        and all(isinstance(w, str) for w in words)
    )
