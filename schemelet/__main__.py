import sys

from schemelet.cli import main

sys.exit(main())
