"""Common utilities for module scripts."""

import argparse


def create_module_parser(
    prog: str,
    description: str,
    subcommands: dict[str, dict]
) -> argparse.ArgumentParser:
    """Create a standardized argument parser for a module.

    Args:
        prog: Program name
        description: Module description
        subcommands: Dictionary mapping command names to their config:
            - 'help': Help text for the subcommand
            - 'arguments': Optional list of argument configs as tuples:
                (args, kwargs) where args are positional arguments to add_argument
                and kwargs are keyword arguments

    Example:
        parser = create_module_parser(
            "hypr",
            "Hyprland helper scripts",
            {
                "focus-or-launch": {
                    "help": "Focus a window of a class or launch it",
                    "arguments": [
                        (["-c", "--class"], {"dest": "window_class", "required": True}),
                        (["-v", "--verbose"], {"action": "store_true", "help": "Verbose output"}),
                    ]
                }
            }
        )

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(prog=prog, description=description)
    subparsers = parser.add_subparsers(dest="command", required=True)

    for cmd_name, cmd_config in subcommands.items():
        subparser = subparsers.add_parser(cmd_name, help=cmd_config.get("help", ""))

        # Add arguments if specified
        for args, kwargs in cmd_config.get("arguments", []):
            subparser.add_argument(*args, **kwargs)

    return parser
