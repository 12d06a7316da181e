import sys

from stepsort.app import App
from stepsort.config import Settings


def main():
    App(settings=Settings.load()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
