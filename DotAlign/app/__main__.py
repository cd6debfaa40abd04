import sys

from DotAlign.app.cli import main

sys.exit(main())
