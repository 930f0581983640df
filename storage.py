"""
Text file persistence in the app's private documents directory
"""
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from config import MESSAGE_FILENAME, load_settings

DEFAULT_MESSAGE = "Test Message"


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def get_documents_directory() -> Path:
    """Return the private documents directory, creating it if needed"""
    documents_dir = load_settings().documents_dir
    documents_dir.mkdir(parents=True, exist_ok=True)
    return documents_dir


def write_text_atomically(path: Union[str, Path], text: str, encoding: str = "utf-8") -> None:
    """
    Write text to path so readers never see a partially written file

    The text goes to a temporary file in the target directory first, which is
    then renamed over the target in one step.

    Args:
        path: Destination file
        text: Content to write
        encoding: Text encoding used for the file

    Raises:
        OSError: If the temporary file cannot be written or renamed
        UnicodeError: If text cannot be encoded
        LookupError: If encoding is unknown
    """
    target = Path(path)
    fd, temp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    os.close(fd)
    try:
        with open(temp_name, 'w', encoding=encoding) as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates the file as 0600, give it normal file permissions
        os.chmod(temp_name, 0o666 & ~_current_umask())
        os.replace(temp_name, target)
    except BaseException:
        # Drop the half-written temp file, the target is untouched
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        raise


def read_text(path: Union[str, Path], encoding: str = "utf-8") -> str:
    with open(path, 'r', encoding=encoding) as f:
        return f.read()


def save_and_load_message(message: str = DEFAULT_MESSAGE, directory: Optional[Union[str, Path]] = None) -> Optional[str]:
    """
    Save message to message.txt, read it straight back and print it

    Returns the text read back, or None if the write or read failed. Failures
    are printed to the console only.
    """
    try:
        documents_dir = Path(directory) if directory is not None else get_documents_directory()
        url = documents_dir / MESSAGE_FILENAME

        write_text_atomically(url, message)

        contents = read_text(url)
        print(contents)
        return contents
    except (OSError, UnicodeError) as e:
        print(f"Error saving message: {e}")
        return None
