"""Entries collected while listing a directory."""

import stat
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path, PurePosixPath

from static_listing.util import format_mtime, format_size


@dataclass
class DirectoryEntry:
    """One child of a listed directory.

    Attributes:
        path: Absolute path in the input tree
        rel: Path relative to the input root, slash-separated
        name: Base name shown in the listing
        is_dir: True for directories (symlinks are followed)
        modified: Last modification time, None if it could not be read
        size: Size in bytes for files, None for directories
    """

    path: Path
    rel: PurePosixPath
    name: str
    is_dir: bool
    modified: datetime | None = None
    size: int | None = None

    @classmethod
    def from_path(cls, path: Path, root: Path) -> "DirectoryEntry | None":
        """Stat ``path`` and build its entry.

        Returns None when the path is neither a directory nor a regular file.

        Raises:
            OSError: if the metadata cannot be read
        """
        st = path.stat()
        is_dir = stat.S_ISDIR(st.st_mode)
        if not is_dir and not stat.S_ISREG(st.st_mode):
            return None
        try:
            modified = datetime.fromtimestamp(st.st_mtime)
        except (OverflowError, OSError, ValueError):
            modified = None
        return cls(
            path=path,
            rel=PurePosixPath(path.relative_to(root).as_posix()),
            name=path.name,
            is_dir=is_dir,
            modified=modified,
            size=None if is_dir else st.st_size,
        )

    @property
    def modified_display(self) -> str:
        return format_mtime(self.modified)

    @property
    def size_display(self) -> str:
        return format_size(self.size)
