import sys
import argparse
from .finder import MaxAverageError, format_average, max_average, parse_tokens


def run(text: str) -> str:
    """stdin text -> output line (no trailing newline)."""
    _, k, nums = parse_tokens(text)
    return format_average(max_average(nums, k))


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        prog="max-average",
        description="Maximum average over contiguous windows of length >= k. "
        "Reads 'n k a1 .. an' from stdin unless --batch is given.",
    )
    ap.add_argument("--batch", action="store_true", help="evaluate cases stored in the database")
    ap.add_argument("--limit", type=int, default=1000)
    ap.add_argument("--excel", type=str, default=None)
    ap.add_argument("--batch_size", type=int, default=200)
    args = ap.parse_args(argv)

    if args.batch:
        from . import batch

        batch.main(limit=args.limit, excel=args.excel, batch_size=args.batch_size)
        return 0

    try:
        line = run(sys.stdin.read())
    except MaxAverageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
