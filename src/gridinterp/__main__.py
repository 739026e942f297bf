"""Run the example driver with ``python -m gridinterp``."""

from .driver import main as driver_main


def main() -> None:
    """Entry point for ``python -m gridinterp``."""
    driver_main()


if __name__ == "__main__":
    main()
