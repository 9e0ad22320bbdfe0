from __future__ import annotations

import argparse

from retry_algebra.encoders import JsonEncoder
from retry_algebra.options import PolicyOptions
from retry_algebra.report import tabulate_run
from retry_algebra.simulator import dry_run, total_delay

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print the decisions a retry policy would make.")
    parser.add_argument("--delay", type=float, default=300)
    parser.add_argument("--base-delay", type=float, default=200)
    parser.add_argument("--max-retries", type=int, default=5)
    parser.add_argument("--max-delay", type=float, default=2000)
    parser.add_argument("--json", action="store_true", help="print the statuses as json")

    args = parser.parse_args()
    opts = PolicyOptions(delay=args.delay, base_delay=args.base_delay, max_retries=args.max_retries, max_delay=args.max_delay)
    policy = opts.build()

    if args.json:
        print(JsonEncoder().encode(dry_run(policy)))
    else:
        print(tabulate_run(dry_run(policy)))
        print(f"total delay: {total_delay(policy):,g}")
