"""Command-line interface."""
from teamskills.main import main


if __name__ == "__main__":
    main()
