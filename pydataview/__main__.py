"""Allow ``python -m pydataview``."""

import sys

from .cli import main


sys.exit(main())
