import sys

from print_estimator.cli import main

sys.exit(main())
