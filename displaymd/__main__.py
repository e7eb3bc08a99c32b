import sys

from displaymd.cli import main

sys.exit(main())
