import os
import shutil
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from static_listing.errors import BuildError
from static_listing.models import DirectoryEntry
from static_listing.render import render_page
from static_listing.util import log, set_verbose

INDEX_FILE = "index.html"


@dataclass
class BuildStats:
    directories: int = 0
    files: int = 0
    linked: int = 0
    copied: int = 0


def remove_output(output_dir):
    """Delete a previous output tree; a missing one is fine"""
    try:
        shutil.rmtree(output_dir)
        log(f"Removed previous output {output_dir}", "DEBUG")
    except FileNotFoundError:
        pass
    except OSError as e:
        raise BuildError("remove output directory", output_dir, cause=e) from e


def ensure_dir(path):
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise BuildError("create directory", path, cause=e) from e


def try_link(src, dst):
    """Hard-link src to dst. Returns the failure instead of raising it."""
    try:
        os.link(src, dst)
    except OSError as e:
        return e
    return None


def copy_file(src, dst):
    try:
        shutil.copy2(src, dst)
    except OSError as e:
        raise BuildError("copy file", src, dst, cause=e) from e


def place_file(src, dst):
    """Link dst to src, falling back to a full copy"""
    failure = try_link(src, dst)
    if failure is None:
        log(f"Linked {dst}", "DEBUG")
        return "linked"

    log(f"Hard link unavailable for {src} ({failure}), copying", "DEBUG")
    copy_file(src, dst)
    return "copied"


class Builder:
    """Mirrors config.input_dir into config.output_dir, one directory at a time"""

    def __init__(self, config):
        self.config = config
        self.stats = BuildStats()

    def should_skip(self, path: Path) -> bool:
        rel = PurePosixPath(path.relative_to(self.config.input_dir).as_posix())
        if self.config.is_hidden(path.name):
            log(f"Excluding hidden: {rel}", "DEBUG")
            return True
        if self.config.is_ignored(rel):
            log(f"Excluding ignored: {rel}", "DEBUG")
            return True
        return False

    def list_entries(self, directory: Path) -> list[DirectoryEntry]:
        """Filtered children of directory, sorted by full path"""
        try:
            children = list(directory.iterdir())
        except OSError as e:
            log(f"Cannot list {directory}: {e}", "WARN")
            return []

        entries = []
        for child in children:
            if self.should_skip(child):
                continue
            try:
                entry = DirectoryEntry.from_path(child, self.config.input_dir)
            except OSError as e:
                log(f"Skipping {child}: {e}", "DEBUG")
                continue
            if entry is None:
                log(f"Skipping {child}: not a regular file or directory", "DEBUG")
                continue
            entries.append(entry)

        entries.sort(key=lambda entry: str(entry.path))
        return entries

    def write_index(self, out_dir: Path, entries, rel: PurePosixPath):
        index_path = out_dir / INDEX_FILE
        page = render_page(entries, rel, self.config)
        try:
            # A mirrored input index.html may be a hard link into the input tree
            if os.path.lexists(index_path):
                log(f"Replacing mirrored {index_path} with the listing", "DEBUG")
                os.unlink(index_path)
            with open(index_path, "w", encoding="utf-8") as f:
                f.write(page)
        except OSError as e:
            raise BuildError("write index page", index_path, cause=e) from e

    def build(self, node: Path):
        out_path = self.config.output_path_for(node)

        if not node.is_dir():
            ensure_dir(out_path.parent)
            outcome = place_file(node, out_path)
            self.stats.files += 1
            if outcome == "linked":
                self.stats.linked += 1
            else:
                self.stats.copied += 1
            return

        ensure_dir(out_path)
        entries = self.list_entries(node)
        rel = PurePosixPath(node.relative_to(self.config.input_dir).as_posix())
        for entry in entries:
            if not entry.is_dir:
                self.build(entry.path)

        self.write_index(out_path, entries, rel)
        self.stats.directories += 1

        for entry in entries:
            if entry.is_dir:
                self.build(entry.path)


def build_site(config) -> BuildStats:
    """Rebuild config.output_dir from scratch"""
    set_verbose(config.verbose)
    config.validate()
    if not config.input_dir.is_dir():
        raise BuildError("read input directory", config.input_dir, cause="not a directory")

    remove_output(config.output_dir)
    ensure_dir(config.output_dir)

    log(f"Scanning '{config.input_dir}'...")
    builder = Builder(config)
    builder.build(config.input_dir)
    return builder.stats
