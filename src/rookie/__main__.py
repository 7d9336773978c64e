"""``python -m rookie``."""

import sys

from rookie.app import main

sys.exit(main())
