"""
Application settings read from the environment (and an optional .env file)
"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from models import LoadingState

# Load environment variables from .env file
load_dotenv()

DEFAULT_DOCUMENTS_DIR = Path.home() / ".bucketlist" / "Documents"
MESSAGE_FILENAME = "message.txt"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    documents_dir: Path
    loading_state: LoadingState
    navigate_on_tap: bool


def _parse_loading_state(raw: str) -> LoadingState:
    try:
        return LoadingState(raw.strip().lower())
    except ValueError:
        print(f"Unknown BUCKETLIST_LOADING_STATE '{raw}'. Using 'loading'.")
        return LoadingState.LOADING


def _parse_bool(name: str, raw: str, default: bool) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    print(f"Invalid boolean for {name}: '{raw}'. Using {default}.")
    return default


def load_settings() -> Settings:
    """
    Build Settings from environment variables

    Recognised variables:
        BUCKETLIST_DOCUMENTS_DIR: private documents directory for saved files
        BUCKETLIST_LOADING_STATE: loading, success or failed
        BUCKETLIST_NAVIGATE_ON_TAP: open the detail view when a map marker is tapped

    Bad values fall back to the defaults.
    """
    documents_dir = os.getenv("BUCKETLIST_DOCUMENTS_DIR")
    return Settings(
        documents_dir=Path(documents_dir).expanduser() if documents_dir else DEFAULT_DOCUMENTS_DIR,
        loading_state=_parse_loading_state(os.getenv("BUCKETLIST_LOADING_STATE", "loading")),
        navigate_on_tap=_parse_bool(
            "BUCKETLIST_NAVIGATE_ON_TAP", os.getenv("BUCKETLIST_NAVIGATE_ON_TAP", "true"), True
        ),
    )
