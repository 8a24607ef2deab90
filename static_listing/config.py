"""Build configuration, created once and passed to the builder and renderer."""

import os
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from static_listing.errors import BuildError

DEFAULT_TITLE = "Static Listing"
DEFAULT_OUTPUT = "public"
DEFAULT_BASE_URL = "/"
VCS_DIR = ".git"
HIDDEN_MARKER = "."


def _is_relative_to(path: Path, other: Path) -> bool:
    try:
        path.relative_to(other)
    except ValueError:
        return False
    return True


def normalize_base_url(value: str | None) -> str:
    """Return ``value`` with exactly one leading and one trailing slash.

    Examples:
        >>> normalize_base_url("")
        '/'
        >>> normalize_base_url("docs")
        '/docs/'
    """
    stripped = (value or "").strip().strip("/")
    if not stripped:
        return "/"
    return f"/{stripped}/"


def normalize_ignored(input_dir: Path, entry, input_arg=None) -> PurePosixPath | None:
    """Turn an ignore entry into a path relative to the input root.

    Absolute entries must lie under ``input_dir``. A relative entry that
    starts with the input directory as the user spelled it (``input_arg``)
    has that prefix stripped; any other relative entry is already relative
    to the input root. Returns None for entries that point at the root
    itself or outside of it.
    """
    raw = Path(entry)
    if raw.is_absolute():
        absolute = Path(os.path.normpath(raw))
        if not _is_relative_to(absolute, input_dir):
            return None
        relative = absolute.relative_to(input_dir)
    else:
        relative = Path(os.path.normpath(raw))
        prefix = Path(os.path.normpath(input_arg)) if input_arg is not None else None
        if (
            prefix is not None
            and not prefix.is_absolute()
            and str(prefix) != "."
            and relative != prefix
            and _is_relative_to(relative, prefix)
        ):
            relative = relative.relative_to(prefix)

    rel = PurePosixPath(relative.as_posix())
    if str(rel) in ("", ".") or rel.parts[0] == "..":
        return None
    return rel


@dataclass(frozen=True)
class BuildConfig:
    input_dir: Path
    output_dir: Path
    title: str = DEFAULT_TITLE
    ignored: frozenset = field(default_factory=frozenset)
    include_hidden: bool = False
    base_url: str = DEFAULT_BASE_URL
    verbose: bool = False

    @classmethod
    def create(
        cls,
        input_dir=".",
        output_dir=DEFAULT_OUTPUT,
        title: str = DEFAULT_TITLE,
        ignored=(),
        include_hidden: bool = False,
        base_url: str = DEFAULT_BASE_URL,
        verbose: bool = False,
    ) -> "BuildConfig":
        input_path = Path(input_dir).resolve()
        output_path = Path(output_dir).resolve()

        ignore_set = {PurePosixPath(VCS_DIR)}
        for entry in ignored:
            rel = normalize_ignored(input_path, entry, input_arg=input_dir)
            if rel is not None:
                ignore_set.add(rel)
        # Keep previous output out of the mirror, wherever it sits in the tree
        if output_path != input_path and _is_relative_to(output_path, input_path):
            ignore_set.add(PurePosixPath(output_path.relative_to(input_path).as_posix()))

        return cls(
            input_dir=input_path,
            output_dir=output_path,
            title=title,
            ignored=frozenset(ignore_set),
            include_hidden=include_hidden,
            base_url=normalize_base_url(base_url),
            verbose=verbose,
        )

    def is_ignored(self, rel: PurePosixPath) -> bool:
        return rel in self.ignored

    def is_hidden(self, name: str) -> bool:
        return not self.include_hidden and name.startswith(HIDDEN_MARKER)

    def validate(self) -> None:
        """Refuse layouts where rebuilding the output would destroy the input."""
        if self.output_dir == self.input_dir:
            raise BuildError(
                "validate output directory",
                self.output_dir,
                cause="output directory is the input directory",
            )
        if _is_relative_to(self.input_dir, self.output_dir):
            raise BuildError(
                "validate output directory",
                self.output_dir,
                cause="input directory lies inside the output directory",
            )

    def output_path_for(self, node: Path) -> Path:
        return self.output_dir / node.relative_to(self.input_dir)
