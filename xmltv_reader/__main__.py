import sys

from xmltv_reader.cli import main

sys.exit(main())
