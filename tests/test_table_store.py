# ==============================================
# Tests for TableStore
# ==============================================

import json

import pytest

from nuclide_explorer.normalization import RecordNormalizer
from nuclide_explorer.persistence import TableStore


@pytest.fixture
def store(tmp_path):
    return TableStore(str(tmp_path / "tables"))


@pytest.fixture
def rows(sample_elements):
    return RecordNormalizer().normalize(sample_elements)


class TestTableStore:
    def test_creates_directory(self, tmp_path):
        TableStore(str(tmp_path / "nested" / "tables"))
        assert (tmp_path / "nested" / "tables").is_dir()

    def test_save_and_load(self, store, rows):
        store.save_rows(rows, "isotopes")
        assert store.load_rows("isotopes") == rows

    def test_document_layout(self, store, rows):
        path = store.save_rows(rows, "isotopes")
        document = json.loads(path.read_text())
        assert document["row_count"] == len(rows)
        assert document["rows"][0]["isotopeNotation"] == "H-1"
        assert document["rows"][2]["isotopicComposition"] is None
        assert "saved_at" in document

    def test_load_missing(self, store):
        assert store.load_rows("nothing") == []

    def test_invalid_name(self, store, rows):
        with pytest.raises(ValueError):
            store.save_rows(rows, "../escape")

    def test_save_frame(self, store, rows):
        frame = RecordNormalizer.to_frame(rows)
        path = store.save_frame(frame, "isotopes")
        assert path.suffix == ".csv"
        assert path.read_text().splitlines()[0].startswith("isotopeSymbol,massNumber")
