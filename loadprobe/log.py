import sys

from .settings import settings

def debug(msg: str) -> None:
    """Tagged diagnostic on stderr; silent unless LOADPROBE_VERBOSE is on."""
    if settings.verbose:
        print(f"[loadprobe] {msg}", file=sys.stderr)
