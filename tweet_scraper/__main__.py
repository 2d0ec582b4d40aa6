"""Allow ``python -m tweet_scraper``."""

import sys

from .cli import main

sys.exit(main())
