import sys

from adventure.cli import main

sys.exit(main())
