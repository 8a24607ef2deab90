"""static-listing: mirror a directory tree into a static site of index pages."""

__version__ = "0.1.0"

from static_listing.build import build_site  # noqa: E402
from static_listing.config import BuildConfig  # noqa: E402
from static_listing.errors import BuildError  # noqa: E402

__all__ = ["BuildConfig", "BuildError", "build_site", "__version__"]
