"""Allow running as: python -m log_analyzer <log_path> --laravel"""

import sys

from log_analyzer.cli import main

sys.exit(main())
