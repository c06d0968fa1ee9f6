"""File operation utilities"""

import hashlib
import shutil
from pathlib import Path
from typing import Union


def calculate_file_checksum(file_path: Path,
                            algorithm: str = "sha256",
                            chunk_size: int = 8192) -> str:
    """
    Calculate file checksum

    Args:
        file_path: Path to file
        algorithm: Hash algorithm (sha256, md5, sha1)
        chunk_size: Read chunk size

    Returns:
        Hex digest string
    """
    hash_func = hashlib.new(algorithm)

    with open(file_path, 'rb') as f:
        while chunk := f.read(chunk_size):
            hash_func.update(chunk)

    return hash_func.hexdigest()


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def remove_path(path: Union[str, Path]) -> bool:
    """
    Remove a file or directory tree if it exists

    Args:
        path: Path to remove

    Returns:
        True if something was removed
    """
    path = Path(path)

    if path.is_symlink() or path.is_file():
        path.unlink()
        return True
    if path.is_dir():
        shutil.rmtree(path)
        return True
    return False


def reset_directory(path: Union[str, Path]) -> Path:
    """
    Remove a directory and recreate it empty

    Args:
        path: Directory path

    Returns:
        The recreated directory
    """
    path = Path(path)
    remove_path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def merge_tree(src: Path, dst: Path) -> int:
    """
    Copy the contents of src into dst, merging with existing content

    Existing files in dst with the same relative path are overwritten.

    Args:
        src: Source directory
        dst: Destination directory (created if missing)

    Returns:
        Number of files copied
    """
    src = Path(src)
    dst = Path(dst)

    if not src.is_dir():
        raise NotADirectoryError(f"Not a directory: {src}")

    shutil.copytree(src, dst, dirs_exist_ok=True)
    return sum(1 for p in src.rglob('*') if p.is_file())
