import sys

from servicewait.cli import main

sys.exit(main())
