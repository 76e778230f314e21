"""Entry point for `python -m labwcchanger`."""

import sys


def main():
    from labwcchanger.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
