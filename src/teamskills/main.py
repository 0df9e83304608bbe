"""
Application Initialization
==========================
This module constructs the Model-View-Controller pieces and starts the Qt
Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Instantiates the Group Store (the only mutable state of a run).
3. Instantiates the Main Window (View), which starts the dataset load.
"""
import argparse
import sys
from typing import Optional, Sequence

from teamskills.app.application import create_app
from teamskills.app.state import GroupStore
from teamskills.config import dataset_path
from teamskills.logging_config import setup_logging
from teamskills.view.main_window import MainWindow


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="teamskills", description="Compare self-rated skills and build teams.")
    parser.add_argument("--dataset", help="Path to the participants JSON file.")
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")
    parser.add_argument("--log-file", help="Also write the log to this file.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(debug=args.debug, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    store = GroupStore()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(store, dataset_path(args.dataset))
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
