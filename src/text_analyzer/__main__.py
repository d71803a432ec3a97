import sys

from text_analyzer.cli import main

sys.exit(main())
