"""Command-line interface for book identifier tools.

Usage:
    python -m scanster_identifiers check CODE ...   # Classify and convert codes
    python -m scanster_identifiers batch            # Resolve a CSV of codes
    python -m scanster_identifiers --help           # Show help
"""

import sys


def main() -> int:
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print(__doc__)
        print("Commands:")
        print("  check   Classify codes and print their ISBN/UPC/LCCN equivalents")
        print("  batch   Resolve every code in a CSV file")
        print()
        print("Run 'python -m scanster_identifiers <command> --help' for command-specific help.")
        return 0

    command = sys.argv[1]
    # Remove the command from argv so subcommand parsers work correctly
    sys.argv = [f"scanster_identifiers {command}"] + sys.argv[2:]

    if command == "check":
        from .check import main as check_main

        return check_main()
    elif command == "batch":
        from .batch import main as batch_main

        return batch_main()
    else:
        print(f"Unknown command: {command}")
        print("Run 'python -m scanster_identifiers --help' for available commands.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
