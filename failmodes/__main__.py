# failmodes/__main__.py
import sys

from failmodes.cli.main import main

sys.exit(main())
