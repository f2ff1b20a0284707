import argparse
import sys

from helpers import create_module_parser


def create_parser() -> argparse.ArgumentParser:
    return create_module_parser(
        "hypr",
        "Entrypoint for Hyprland helper scripts.",
        {
            "focus-or-launch": {
                "help": "Raise window if it exists, otherwise launch new window.",
                "arguments": [
                    (["-c", "--class"], {"dest": "window_class", "required": True, "help": "Class to focus."}),
                    (["-e", "--launch"], {"dest": "launch_command", "required": True, "help": "Command to launch."}),
                    (["-m", "--move-to-current"], {
                        "action": "store_true",
                        "help": "Move window to current workspace.",
                    }),
                    (["-n", "--move-to-nearest-empty"], {
                        "action": "store_true",
                        "help": "Move window to nearest empty workspace.",
                    }),
                    (["-v", "--verbose"], {"action": "store_true", "help": "Enable debug logging."}),
                    (["--hyprctl"], {"default": "hyprctl", "help": "hyprctl executable to use."}),
                ],
            },
        },
    )


def main(argv: list[str]) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "focus-or-launch":
        from . import focus_or_launch
        return focus_or_launch.main(
            args.window_class,
            args.launch_command,
            move_to_current=args.move_to_current,
            move_to_nearest_empty=args.move_to_nearest_empty,
            verbose=args.verbose,
            hyprctl=args.hyprctl,
        )

    # Should not reach here because subparser requires a command
    parser.print_help()
    return 2


def run() -> int:
    """Console script entry point."""
    return main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(run())
