#!/usr/bin/env python3
"""Quick live check of the provider endpoint.

Run:
  poetry run python scripts/live_fetch.py                      # default category (PFAS)
  poetry run python scripts/live_fetch.py "Company Profile"    # one category
  poetry run python scripts/live_fetch.py all                  # every category (slow)
"""

import sys

from market_scout.categories import CategoryRegistry
from market_scout.retrieval import RetrievalClient


def main() -> None:
    registry = CategoryRegistry()
    arg = sys.argv[1] if len(sys.argv) > 1 else None
    if arg == "all":
        names = registry.names()
    else:
        names = [arg or registry.default().name]

    failures = 0
    for name in names:
        client = RetrievalClient()
        print(f"Fetching {name} from {client.endpoint}...")
        result = client.fetch_opportunities_sync(name)
        if not result.ok:
            failures += 1
            print(f"  ❌ {result.error}")
            continue
        print(f"  Got {len(result.records)} records")
        for i, r in enumerate(result.records[:5], 1):
            print(f"  {i}. [{r.kind.value}] {r.title} (date={r.raw_date or 'N/A'})")

    if failures:
        print(f"\n⚠️ {failures} of {len(names)} categories failed. Is the provider running?")
    else:
        print("\n✅ Provider responded for every category.")


if __name__ == "__main__":
    main()
