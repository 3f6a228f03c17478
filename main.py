import sys

from morsetranslator.core.bootstrap import run


if __name__ == "__main__":
    sys.exit(run())
