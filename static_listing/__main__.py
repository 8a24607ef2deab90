import sys

from static_listing.cli import main

sys.exit(main())
