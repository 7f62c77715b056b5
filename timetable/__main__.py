import sys

from timetable.main import main

sys.exit(main())
