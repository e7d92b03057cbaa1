from __future__ import annotations

from nft_hasher.cli.app import main

"""`python -m nft_hasher.cli INPUT.csv`"""

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
