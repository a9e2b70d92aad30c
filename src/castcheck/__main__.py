"""python -m castcheck."""

import sys

from castcheck.presentation.cli import main

sys.exit(main())
