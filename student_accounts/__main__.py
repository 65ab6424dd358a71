"""Allow `python -m student_accounts` to start the menu"""

import sys

from .cli import main

sys.exit(main())
