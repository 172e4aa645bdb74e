from __future__ import annotations

import importlib.util
import logging
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def gallery_demo():
    module_spec = importlib.util.spec_from_file_location(
        "gallery_demo", ROOT / "examples" / "gallery_demo.py"
    )
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)

    lg = logging.getLogger("data_tabulate")
    saved = (list(lg.handlers), lg.level, lg.propagate)
    yield module
    for h in list(lg.handlers):
        h.close()
    lg.handlers[:] = saved[0]
    lg.setLevel(saved[1])
    lg.propagate = saved[2]


def test_gallery_demo_renders_both_tables(gallery_demo, capsys):
    assert gallery_demo.main(["--count", "5"]) == 0

    out = capsys.readouterr().out
    assert '<table class="gallery">' in out
    assert "<tr><td>img_005.png</td><td>&nbsp;</td></tr>" in out
    assert "col1        | col2" in out


def test_gallery_demo_handles_zero_images(gallery_demo, capsys):
    assert gallery_demo.main(["--count", "0"]) == 0

    assert "<table class=\"gallery\">\n</table>" in capsys.readouterr().out
