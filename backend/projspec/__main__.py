import sys

from projspec.cli import main

sys.exit(main())
