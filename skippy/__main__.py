import sys

from skippy.repl import main

sys.exit(main())
