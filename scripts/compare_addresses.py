# scripts/compare_addresses.py
from __future__ import annotations

import argparse
import json
import sys

from addresscompare.domain.normalize import normalize_address
from addresscompare.schemas import CompareResponse
from addresscompare.service_layer.comparison import compare_addresses


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Compare two postal addresses and print the similarity score.")
    ap.add_argument("address1")
    ap.add_argument("address2")
    ap.add_argument("--normalized", action="store_true", help="also print both normalized forms")
    args = ap.parse_args(argv)

    if not args.address1 or not args.address2:
        print("error: both addresses are required", file=sys.stderr)
        return 2

    result = compare_addresses(args.address1, args.address2)
    out = CompareResponse(
        match=result.match,
        match_percentage=result.match_percentage,
        details=result.details,
    ).model_dump(by_alias=True)

    if args.normalized:
        out["normalized"] = [normalize_address(args.address1), normalize_address(args.address2)]

    print(json.dumps(out, indent=2))
    return 0 if result.match else 1


if __name__ == "__main__":
    raise SystemExit(main())
