import sys

from chissor.cli import main

sys.exit(main())
