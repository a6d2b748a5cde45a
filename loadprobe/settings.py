from typing import Optional
from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()

def _truthy(v: Optional[str], default: bool = False) -> bool:
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")

def _int(v: Optional[str], default: int) -> int:
    try:
        return int(v) if v is not None else default
    except ValueError:
        return default

def _float(v: Optional[str], default: float) -> float:
    try:
        return float(v) if v is not None else default
    except ValueError:
        return default

class Settings(BaseModel):
    # CLI defaults
    default_number: int = _int(os.getenv("LOADPROBE_NUMBER"), 10)
    default_concurrency: int = _int(os.getenv("LOADPROBE_CONCURRENCY"), 1)

    # Transport
    timeout_s: float = _float(os.getenv("LOADPROBE_TIMEOUT"), 30.0)
    follow_redirects: bool = _truthy(os.getenv("LOADPROBE_FOLLOW_REDIRECTS"), True)

    # Diagnostics on stderr
    verbose: bool = _truthy(os.getenv("LOADPROBE_VERBOSE"), False)

settings = Settings()
