import sys

from toplangs.cli import main

sys.exit(main())
