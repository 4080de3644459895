from __future__ import annotations

from mosaic_plot.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
