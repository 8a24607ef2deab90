import sys
from datetime import datetime

SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")
PLACEHOLDER = "-"

_verbose = False


def set_verbose(enabled):
    global _verbose
    _verbose = bool(enabled)


def log(msg, level="INFO"):
    """Timestamped log line; DEBUG only shows up in verbose mode"""
    if level == "DEBUG" and not _verbose:
        return
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    stream = sys.stderr if level in ("WARN", "ERROR") else sys.stdout
    print(f"[{timestamp}] [{level}] {msg}", file=stream)


def format_size(size):
    """Human-readable binary size: integer for bytes, one decimal above"""
    if size is None:
        return PLACEHOLDER
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(SIZE_UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{int(value)} {SIZE_UNITS[unit]}"
    return f"{value:.1f} {SIZE_UNITS[unit]}"


def format_mtime(modified):
    if modified is None:
        return PLACEHOLDER
    return modified.strftime("%Y-%m-%d %H:%M:%S")
