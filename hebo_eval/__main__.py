import sys

from hebo_eval.presentation.cli import main

sys.exit(main())
