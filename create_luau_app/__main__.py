"""Allow ``python -m create_luau_app``."""

import sys

from create_luau_app.cli.commands import main

sys.exit(main())
