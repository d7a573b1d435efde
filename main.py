"""Main entry point for the buildevents webhook sink."""

from buildevents.cli import main


if __name__ == "__main__":
    main()
