import sys

from gojira.cli.main import main

sys.exit(main())
