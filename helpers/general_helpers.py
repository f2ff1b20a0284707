"""
General helpers for script state directories (XDG) and logging.

Provides XDG-compliant log locations and logging setup for any module
in the suite.
"""

from __future__ import annotations

import logging
from pathlib import Path
from xdg import BaseDirectory


# Suite name for all scripts in this repository
SUITE_NAME = "hypr-scripts"

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class ScriptConfig:
    """Manages the XDG state directory and log file of a script.

    Scripts in this suite are stateless one-shots; the state directory only
    holds their log files.
    """

    def __init__(self, module_name: str, script_name: str):
        if not isinstance(script_name, str) or not script_name.strip():
            raise ValueError("script_name must be a non-empty string")
        if not isinstance(module_name, str) or not module_name.strip():
            raise ValueError("module_name must be a non-empty string")

        self.module_name = module_name
        self.script_name = script_name

        # save_state_path creates the suite directory if missing
        self.state_dir = Path(BaseDirectory.save_state_path(SUITE_NAME)) / module_name
        self.state_dir.mkdir(parents=True, exist_ok=True)

        self.log_file = self.state_dir / f"{script_name}.log"

    def setup_logging(self, level=logging.INFO, include_console=True):
        """Setup logging to file and optionally console."""
        handlers: list[logging.Handler] = [logging.FileHandler(self.log_file)]
        if include_console:
            handlers.append(logging.StreamHandler())

        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=handlers,
            force=True,
        )

        log = logging.getLogger(self.script_name)
        log.debug("Logging initialized. Log file: %s", self.log_file)
        return log
