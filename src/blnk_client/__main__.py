"""Allow ``python -m blnk_client`` to run the search CLI."""

import sys

from .cli import main

sys.exit(main())
