# /hms/storage/files.py
import os
import tempfile
import logging

from hms.exceptions import StorageError

logger = logging.getLogger(__name__)


def read_lines(path):
    """Returns the file's lines without newlines, or None when the file is absent."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return [line.rstrip('\r\n') for line in f]
    except FileNotFoundError:
        return None
    except OSError as e:
        logger.error(f"Could not read {path}: {e}")
        raise StorageError("Could not open file", path) from e


def append_line(path, line):
    _ensure_parent(path)
    try:
        with open(path, 'a', encoding='utf-8') as f:
            f.write(line + '\n')
    except OSError as e:
        logger.error(f"Could not append to {path}: {e}")
        raise StorageError("Could not open file", path) from e


def rewrite_lines(path, lines):
    """Replaces the file's contents atomically.

    The lines are written to a temporary file in the same directory which then
    replaces ``path``, so a failure mid-write leaves the old contents intact.
    """
    directory = _ensure_parent(path)
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix='.tmp-', dir=directory)
        try:
            f = os.fdopen(fd, 'w', encoding='utf-8')
        except OSError:
            os.close(fd)
            raise
        with f:
            for line in lines:
                f.write(line + '\n')
        os.replace(tmp_path, path)
    except OSError as e:
        logger.error(f"Could not rewrite {path}: {e}")
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise StorageError("Could not write file", path) from e


def _ensure_parent(path):
    directory = os.path.dirname(os.path.abspath(path))
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise StorageError("Could not create directory", directory) from e
    return directory
