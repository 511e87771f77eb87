"""Allow running as `python -m bluebutton`."""

import sys

from bluebutton.cli import main

sys.exit(main())
