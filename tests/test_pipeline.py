# ==============================================
# Integration Tests
# ==============================================
#
# Both workflows end to end, against a local element file,
# a faked HTTP response and a temporary SQLite database.
# ==============================================

import json
from pathlib import Path

import pytest
import requests

from nuclide_explorer import pipeline as pipeline_module
from nuclide_explorer.pipeline import IsotopePipeline, SongPipeline, main


@pytest.fixture
def elements_file(tmp_path, sample_elements):
    path = tmp_path / "elements.json"
    path.write_text(json.dumps({"elements": sample_elements}), encoding="utf-8")
    return path


class TestIsotopePipeline:
    def test_run_from_file(self, app_config, elements_file):
        summary = IsotopePipeline(app_config).run(elements_file)

        assert summary["elements"] == 3
        assert summary["rows"] == 7
        assert summary["naturally_occurring"] == 4
        assert summary["artificial"] == 3
        assert Path(summary["table_path"]).exists()
        assert Path(summary["chart_path"]).exists()

    def test_run_from_url(self, app_config, monkeypatch, sample_elements):
        class Response:
            def raise_for_status(self):
                pass

            def json(self):
                return sample_elements

        monkeypatch.setattr(requests, "get", lambda url, timeout: Response())
        summary = IsotopePipeline(app_config).run()
        assert summary["rows"] == 7

    def test_saved_table_reloads(self, app_config, elements_file):
        pipeline = IsotopePipeline(app_config)
        pipeline.run(elements_file)
        rows = pipeline._store.load_rows("isotopes")
        assert [row.isotope_notation for row in rows][:3] == ["H-1", "H-2", "H-3"]


class TestSongPipeline:
    def test_run(self, app_config):
        summary = SongPipeline(app_config).run(split_year=2000)

        assert summary["songs"] == 8
        assert summary["t_test"]["n_a"] == 4
        assert summary["t_test"]["n_b"] == 4
        assert summary["variance_test"]["method"] == "levene"
        assert summary["linear_fit"]["slope"] > 0
        assert Path(summary["scatter_path"]).exists()
        assert Path(summary["histogram_path"]).exists()

    def test_missing_database(self, app_config, tmp_path):
        with pytest.raises(FileNotFoundError):
            SongPipeline(app_config).run(tmp_path / "missing.db")


class TestMain:
    @pytest.fixture(autouse=True)
    def use_test_config(self, monkeypatch, app_config):
        monkeypatch.setattr(pipeline_module, "get_config", lambda: app_config)

    def test_usage(self, capsys):
        assert main([]) == 0
        assert "Usage" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        assert main(["plot"]) == 2
        assert "Unknown command" in capsys.readouterr().out

    def test_isotopes(self, elements_file, capsys):
        assert main(["isotopes", str(elements_file)]) == 0
        assert "7 isotopes of 3 elements" in capsys.readouterr().out

    def test_songs(self, capsys):
        assert main(["songs"]) == 0
        assert "8 songs analyzed" in capsys.readouterr().out

    def test_malformed_dataset(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"symbol": "H", "number": 1, "children": [{"massNumber": 1}]}]))
        assert main(["isotopes", str(path)]) == 1
        assert "relativeMass" in capsys.readouterr().out
