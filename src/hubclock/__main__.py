"""Command-line interface."""
from hubclock.main import main

if __name__ == "__main__":
    main()
