"""
HTTP GET load test with a fixed request count and bounded concurrency.
Example: loadprobe -u http://localhost:8000/health -n 500 -c 50
"""
import argparse, sys

from prometheus_client import generate_latest

from .errors import ConfigError
from .models import LoadResult
from .report import format_report
from .scheduler import plan_rounds, run, validate
from .settings import settings
from .stats import reduce
from .version import __version__

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="loadprobe", description=__doc__.strip().splitlines()[0])
    ap.add_argument("-u", "--url", required=True)
    ap.add_argument("-n", "--number", type=int, default=settings.default_number,
                    help="total number of requests")
    ap.add_argument("-c", "--concurrency", type=int, default=settings.default_concurrency,
                    help="requests in flight per round")
    ap.add_argument("-t", "--timeout", type=float, default=settings.timeout_s,
                    help="per-request timeout in seconds")
    ap.add_argument("--metrics", action="store_true", help="print Prometheus metrics after the report")
    ap.add_argument("-q", "--quiet", action="store_true", help="no progress output")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap

def _progress(n_rounds: int):
    def hook(i: int, size: int, result: LoadResult) -> None:
        print(f"round {i + 1}/{n_rounds}: size {size} "
              f"(ok={result.successful_count} failed={result.failed_count})", file=sys.stderr)
    return hook

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        validate(args.url, args.number, args.concurrency, args.timeout)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    hook = None
    if not args.quiet:
        hook = _progress(len(plan_rounds(args.number, args.concurrency)))
        print("Processing...", file=sys.stderr)
    result = run(args.url, args.number, args.concurrency,
                 timeout_s=args.timeout, on_round=hook)
    if not args.quiet:
        print("Done!", file=sys.stderr)

    print(format_report(reduce(result)))
    if args.metrics:
        print(generate_latest().decode("utf-8"), end="")
    return 0

if __name__ == "__main__":
    sys.exit(main())
