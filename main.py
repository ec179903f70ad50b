import sys

from revenue_story.cli import main

if __name__ == "__main__":
    sys.exit(main())
