import sys

from fastpaste.cli import main


sys.exit(main())
