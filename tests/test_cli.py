"""
Tests for the command-line driver.
"""

import logging

import pytest

from tilings import TILINGS
from tilings.cli import main


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI attaches handlers to the package logger; drop them afterwards."""
    yield
    logger = logging.getLogger("tilings")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestMain:

    def test_writes_obj(self, tmp_path):
        out = tmp_path / "square.obj"
        main(["--tiling", "square", "--rows", "3", "--cols", "3", "--out", str(out)])
        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "o SQUARE-tiling"
        assert sum(l.startswith("f ") for l in lines) == 4

    def test_default_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main(["--tiling", "semi-regular-3", "--rows", "4", "--cols", "4"])
        assert (tmp_path / "SEMI-REGULAR-3.obj").exists()

    def test_ply_by_extension(self, tmp_path):
        out = tmp_path / "hex.ply"
        main(["--tiling", "HEXAGON", "--rows", "4", "--cols", "4", "--out", str(out)])
        assert out.read_text(encoding="utf-8").startswith("ply\n")

    def test_ply_flag(self, tmp_path):
        out = tmp_path / "hex.mesh"
        main(["--tiling", "hexagon", "--rows", "4", "--cols", "4", "--out", str(out), "--ply"])
        assert out.read_text(encoding="utf-8").startswith("ply\n")

    def test_reverse_winding(self, tmp_path):
        out = tmp_path / "square.obj"
        main(["--tiling", "square", "--rows", "2", "--cols", "2",
              "--out", str(out), "--reverse-winding"])
        assert out.read_text(encoding="utf-8").splitlines()[-1] == "f 3 4 2 1"

    def test_list(self, capsys):
        main(["--list"])
        assert capsys.readouterr().out.split() == list(TILINGS)

    def test_verbose_log_file(self, tmp_path):
        out = tmp_path / "tri.obj"
        log = tmp_path / "run.log"
        main(["--tiling", "triangle", "--rows", "2", "--cols", "2",
              "--out", str(out), "-v", "--log-file", str(log)])
        text = log.read_text(encoding="utf-8")
        assert "TRIANGLE 2x2: 4 points, 2 faces" in text
        assert "2 x 3-gon" in text


class TestErrors:
    """Bad arguments end in a usage error."""

    def test_unknown_tiling(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["--tiling", "pentagon", "--out", str(tmp_path / "x.obj")])
        assert exc.value.code == 2

    def test_negative_rows(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["--tiling", "square", "--rows", "-3", "--out", str(tmp_path / "x.obj")])
        assert exc.value.code == 2

    def test_overflow(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["--tiling", "square", "--rows", "70000", "--cols", "70000",
                  "--out", str(tmp_path / "x.obj")])
        assert exc.value.code == 2

    def test_missing_tiling(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2
