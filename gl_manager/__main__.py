import sys

from gl_manager.cli import main

sys.exit(main())
