"""Deterministic zip archive creation for function packages"""

import fnmatch
import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..constants import (
    ARCHIVE_EXCLUDE_PATTERNS,
    ARCHIVE_FIXED_DATE_TIME,
    ARCHIVE_FILE_MODE,
    ARCHIVE_EXEC_MODE,
)
from ..utils.file_utils import calculate_file_checksum

logger = logging.getLogger(__name__)


@dataclass
class ArchiveStats:
    """Statistics of a created archive"""
    path: Path
    file_count: int
    total_size: int
    archive_size: int
    checksum: str

    @property
    def compression_ratio(self) -> float:
        if self.total_size == 0:
            return 0.0
        return 1 - self.archive_size / self.total_size


class ZipArchiver:
    """Create zip archives whose bytes depend only on file names and contents

    Entries are written in sorted order with a fixed timestamp and
    normalized permissions, so packaging unchanged inputs twice yields
    byte-identical archives.
    """

    def __init__(self,
                 exclude_patterns: Optional[List[str]] = None,
                 compression: int = zipfile.ZIP_DEFLATED,
                 compresslevel: int = 6):
        self.exclude_patterns = (
            list(exclude_patterns) if exclude_patterns is not None else list(ARCHIVE_EXCLUDE_PATTERNS)
        )
        self.compression = compression
        self.compresslevel = compresslevel

    def is_excluded(self, relative_path: Path) -> bool:
        """Check whether any component of the path matches an exclude pattern"""
        return any(
            fnmatch.fnmatch(part, pattern)
            for part in relative_path.parts
            for pattern in self.exclude_patterns
        )

    def collect(self, source_dir: Path) -> List[Path]:
        """List files to archive, relative to source_dir, in sorted order"""
        files = []
        for path in source_dir.rglob('*'):
            if not path.is_file():
                continue
            relative_path = path.relative_to(source_dir)
            if self.is_excluded(relative_path):
                continue
            files.append(relative_path)

        return sorted(files, key=lambda p: p.as_posix())

    def _make_info(self, arcname: str, mode: int) -> zipfile.ZipInfo:
        info = zipfile.ZipInfo(arcname, date_time=ARCHIVE_FIXED_DATE_TIME)
        info.create_system = 3  # unix, so external_attr carries permissions
        info.external_attr = (mode & 0xFFFF) << 16
        info.compress_type = self.compression
        return info

    def build(self, source_dir: Path, output_path: Path) -> ArchiveStats:
        """Compress source_dir into output_path

        Args:
            source_dir: Package directory to compress
            output_path: Destination zip file, replaced if it exists

        Returns:
            ArchiveStats for the new archive
        """
        source_dir = Path(source_dir)
        output_path = Path(output_path)

        if not source_dir.is_dir():
            raise NotADirectoryError(f"Not a directory: {source_dir}")

        files = self.collect(source_dir)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if output_path.exists():
            output_path.unlink()

        total_size = 0
        with zipfile.ZipFile(output_path, 'w', compression=self.compression) as zf:
            for relative_path in files:
                file_path = source_dir / relative_path
                # Keep the executable bit, drop everything else
                mode = ARCHIVE_FILE_MODE
                if file_path.stat().st_mode & 0o111:
                    mode = ARCHIVE_EXEC_MODE
                info = self._make_info(relative_path.as_posix(), 0o100000 | mode)
                data = file_path.read_bytes()
                total_size += len(data)
                zf.writestr(info, data, compresslevel=self.compresslevel)

        stats = ArchiveStats(
            path=output_path,
            file_count=len(files),
            total_size=total_size,
            archive_size=output_path.stat().st_size,
            checksum=calculate_file_checksum(output_path),
        )
        logger.debug(
            f"Created {output_path.name}: {stats.file_count} files, "
            f"{stats.archive_size} bytes ({stats.compression_ratio:.0%} saved), sha256={stats.checksum}"
        )
        return stats
