"""Key/Value CLI."""
import argparse
import sys
from logkv.core.engine import KVEngine
from logkv.core.record import SET, GET, DELETE
from logkv.utils.config import Config


class InvalidInputError(ValueError):
    """Raised when a key or value cannot be stored in the log."""
    pass


def validate_input(key, value):
    """Reject keys and values that contain the field separator."""
    sep = Config.FIELD_SEPARATOR
    if sep in key or sep in value:
        raise InvalidInputError(f"'{sep}' is not allowed in Key/Value")


def handle_set(engine, key, value):
    """Handle SET command."""
    engine.put(key, value)
    return None


def handle_get(engine, key, value):
    """Handle GET command."""
    return engine.get(key)


def handle_delete(engine, key, value):
    """Handle DELETE command."""
    engine.delete(key)
    return None


HANDLERS = {
    SET: handle_set,
    GET: handle_get,
    DELETE: handle_delete,
}


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description='logkv - append-only Key/Value store')
    parser.add_argument('--cmd', default='', help='Command to execute: SET, GET or DELETE')
    parser.add_argument('--key', default='', help='Key to operate on')
    parser.add_argument('--value', default='', help='Value to store (SET only)')
    parser.add_argument('--log-file', default=Config.LOG_FILENAME,
                        help=f'Log file path (default: {Config.LOG_FILENAME})')
    args = parser.parse_args(argv)

    command = args.cmd.upper()

    try:
        validate_input(args.key, args.value)
    except InvalidInputError as e:
        print(e)
        return 1

    handler = HANDLERS.get(command)
    if handler is None:
        print(f"Unknown command: {args.cmd}")
        return 1

    try:
        engine = KVEngine(args.log_file)
    except OSError as e:
        print(f"Error opening database: {e}", file=sys.stderr)
        return 1

    status = 0
    try:
        observed = handler(engine, args.key, args.value)
    except (OSError, ValueError) as e:
        print(f"Error executing command {command}, error: {e}", file=sys.stderr)
        status = 1

    try:
        engine.close()
    except OSError as e:
        print(f"Error closing database: {e}", file=sys.stderr)
        status = 1

    if status:
        return status

    print(f"Command executed successfully: {command},key:{args.key}")
    if command == GET:
        print(f"Observed value: {observed}")
    return 0


if __name__ == '__main__':
    exit(main())
