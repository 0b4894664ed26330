"""Command-line interface."""
import argparse
import sys
from textdb.core.store import TextDB
from textdb.core.errors import TextDBError
from textdb.utils.config import Config


def handle_set(db, key, value):
    """Handle SET command."""
    db.set(key)
    print("OK")
    return 0


def handle_exists(db, key, value):
    """Handle EXISTS command."""
    print(f"-> exists {key!r}: {db.exists(key)}")
    return 0


def handle_delete(db, key, value):
    """Handle DELETE command."""
    db.delete(key)
    print("OK")
    return 0


def handle_put(db, key, value):
    """Handle PUT command."""
    if value is None:
        print("Error: PUT requires a value", file=sys.stderr)
        return 1
    db.put(key, value.encode(sys.getfilesystemencoding(), 'surrogateescape'))
    print("OK")
    return 0


def handle_get(db, key, value):
    """Handle GET command."""
    print(f"-> {db.get(key)!r}")
    return 0


def handle_find(db, key, value):
    """Handle FIND command."""
    print(f"-> {db.find(key)!r}")
    return 0


HANDLERS = {
    'set': handle_set,
    'exists': handle_exists,
    'delete': handle_delete,
    'put': handle_put,
    'get': handle_get,
    'find': handle_find,
}


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description='TextDB')
    parser.add_argument('--db', default=Config.DB_PATH, help=f'Log file path (default: {Config.DB_PATH})')
    parser.add_argument('--fsync', action='store_true', help='Force every write to disk')
    parser.add_argument('--verbose', '-v', action='store_true', help='Print store status lines')
    parser.add_argument('command', choices=sorted(HANDLERS), help='Command to execute')
    parser.add_argument('key', help='Key')
    parser.add_argument('value', nargs='?', help='Value (for PUT)')
    args = parser.parse_args(argv)

    if args.fsync:
        Config.FSYNC_WRITES = True

    try:
        db = TextDB(args.db)
    except (TextDBError, OSError) as e:
        print(f"Error opening {args.db}: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"[TextDB] Opened {db.path} ({len(db)} keys, {db.size:,} bytes)")

    try:
        return HANDLERS[args.command](db, args.key, args.value)
    except (TextDBError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if args.verbose:
            print(f"[TextDB] Closing {db.path} ({db.size:,} bytes)")
        db.close()


if __name__ == '__main__':
    sys.exit(main())
