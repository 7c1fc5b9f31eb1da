import sys

from typegraph.cli import main

sys.exit(main())
