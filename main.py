"""Entry point for the context menu demo."""

import argparse

from popmenu import run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Popmenu context menu demo")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print menu commands and outcomes to the console",
    )
    parser.add_argument(
        "items",
        nargs="*",
        help="completion items to offer instead of the built-in samples",
    )
    args = parser.parse_args()
    run_pygame(items=args.items or None, debug=args.debug)


if __name__ == "__main__":
    main()
