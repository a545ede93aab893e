# mkv_chain/__main__.py

import sys

from mkv_chain.cli import main

sys.exit(main())
