import sys

from sheet_interpreter.cli import main

if __name__ == "__main__":
    sys.exit(main())
