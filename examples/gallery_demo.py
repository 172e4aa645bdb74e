"""
Render a flat list of image names as an HTML gallery table and as a text table.

Run without installing the package:
    python examples/gallery_demo.py [--config conf/config.yaml]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running the example without installing the package.
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_SRC_DIR = _PROJECT_ROOT / "src"
if _SRC_DIR.is_dir():
    sys.path.insert(0, str(_SRC_DIR))

from data_tabulate import Tabulator
from data_tabulate.config import load_project_config, logging_config_from
from data_tabulate.utils import log_stage, setup_logging

logger = logging.getLogger("data_tabulate.examples.gallery_demo")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--config",
        type=str,
        default=str(_PROJECT_ROOT / "conf" / "config.yaml"),
        help="Path to OmegaConf-compatible YAML config (supports `extends:`).",
    )
    parser.add_argument("--count", type=int, default=10, help="Number of images.")
    args = parser.parse_args(argv)

    cfg = load_project_config(args.config)
    setup_logging(logging_config_from(cfg))

    images = [f"img_{i:03d}.png" for i in range(1, int(args.count) + 1)]

    tabulator = Tabulator.from_config(cfg)
    tabulator.register_method_call("HTMLTable", "attributes", {"class": "gallery"})

    with log_stage(logger, "gallery"):
        html = tabulator.render("HTMLTable", data=images)
        headings = [f"col{i}" for i in range(1, int(tabulator.column_count or 0) + 1)]
        text = tabulator.render(
            "ASCIITable", data=images, calls=[("headings", headings)]
        )

    logger.info("Grid: %d rows x %d cols", tabulator.row_count, tabulator.column_count)
    print(html)
    print()
    print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
