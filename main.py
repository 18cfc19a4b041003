import argparse
import json
import sys

from itemguard.config import GUARD_DEFAULT_MAX_ITEM_SIZE, GUARD_DEFAULT_RECURSION_DEPTH
from itemguard.core.inventory_guard import InventoryGuard
from itemguard.items.inventory import Inventory
from itemguard.player.core import Player
from itemguard.utils.logger import Logger, LogLevel
from itemguard.utils.utils import strip_format_codes

def main(argv=None):
    parser = argparse.ArgumentParser(description='Inventory guard: find and remove oversized items')
    subparsers = parser.add_subparsers(dest='command', required=True)

    scan = subparsers.add_parser('scan', help='Run the guard pass over an inventory snapshot file')
    scan.add_argument('inventory', type=str, help='Inventory snapshot (JSON)')
    scan.add_argument('--player', '-p', type=str, default='offline',
                      help='Player name used in logs and messages (default: offline)')
    scan.add_argument('--max-size', '-m', type=int, default=GUARD_DEFAULT_MAX_ITEM_SIZE,
                      help=f'Maximum allowed size in bytes (default: {GUARD_DEFAULT_MAX_ITEM_SIZE})')
    scan.add_argument('--depth', '-d', type=int, default=GUARD_DEFAULT_RECURSION_DEPTH,
                      help=f'Container recursion depth (default: {GUARD_DEFAULT_RECURSION_DEPTH})')
    scan.add_argument('--apply', action='store_true',
                      help='Remove oversized items instead of only reporting them')
    scan.add_argument('--output', '-o', type=str, default=None,
                      help='Where to write the cleaned snapshot with --apply (default: overwrite input)')
    scan.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')
    args = parser.parse_args(argv)

    if args.max_size < 0:
        parser.error("--max-size must be non-negative")

    Logger.set_level(LogLevel.DEBUG if args.verbose else LogLevel.INFO)
    return run_scan(args)

def run_scan(args) -> int:
    try:
        with open(args.inventory, 'r', encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Error reading {args.inventory}: {e}", file=sys.stderr)
        return 2

    if not isinstance(data, dict):
        print(f"Error reading {args.inventory}: expected a JSON object, got {type(data).__name__}", file=sys.stderr)
        return 2
    try:
        inventory = Inventory.from_dict(data)
    except (AttributeError, TypeError, ValueError) as e:
        print(f"Error reading {args.inventory}: malformed inventory snapshot: {e}", file=sys.stderr)
        return 2

    player = Player(args.player, inventory=inventory)
    guard = InventoryGuard(max_item_size=args.max_size, recursion_depth=args.depth)

    if not args.apply:
        outcomes = [o for o in guard.evaluate(player) if o.removed]
        for outcome in outcomes:
            kind = "container" if outcome.is_container else "item"
            print(f"Slot {outcome.slot_index}: {kind} '{outcome.label}' is {outcome.size_bytes} bytes (limit {args.max_size})")
        print(f"{len(outcomes)} oversized slot(s) found.")
        return 1 if outcomes else 0

    removed = guard.run_pass(player)
    for message in player.messages:
        print(strip_format_codes(message))

    output_path = args.output or args.inventory
    with open(output_path, 'w', encoding="utf-8") as f:
        json.dump(player.inventory.to_dict(), f, indent=2, ensure_ascii=False)
    print(f"Removed {len(removed)} slot(s). Wrote {output_path}.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
