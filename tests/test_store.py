"""Tests for JsonArtifactStore."""

import json
from datetime import datetime, timezone

import pytest

from grants_harvester.models.opportunity import FilteredOpportunity
from grants_harvester.models.stats import StatisticsSummary
from grants_harvester.store import JsonArtifactStore


class TestJsonArtifactStoreIds:
    """Tests for id list persistence."""

    def test_save_creates_directory(self, tmp_path) -> None:
        store = JsonArtifactStore(tmp_path / "nested" / "data")
        store.save_ids(["3", "1", "2"])
        assert store.ids_path.exists()
        assert json.loads(store.ids_path.read_text()) == ["3", "1", "2"]

    def test_load_preserves_order(self, tmp_path) -> None:
        store = JsonArtifactStore(tmp_path)
        store.save_ids(["b", "a", "c"])
        assert store.load_ids() == ["b", "a", "c"]

    def test_save_empty_list(self, tmp_path) -> None:
        store = JsonArtifactStore(tmp_path)
        store.save_ids([])
        assert store.has_ids()
        assert store.load_ids() == []

    def test_load_missing_raises(self, tmp_path) -> None:
        store = JsonArtifactStore(tmp_path)
        assert not store.has_ids()
        with pytest.raises(FileNotFoundError, match="opportunityIds.json not found"):
            store.load_ids()

    def test_load_non_array_raises(self, tmp_path) -> None:
        store = JsonArtifactStore(tmp_path)
        store.ids_path.write_text('{"ids": []}')
        with pytest.raises(ValueError, match="JSON array"):
            store.load_ids()


class TestJsonArtifactStoreOutputs:
    """Tests for results and statistics files."""

    def test_save_results_shape(self, tmp_path) -> None:
        store = JsonArtifactStore(tmp_path)
        store.save_results(
            [
                FilteredOpportunity(
                    opportunity_id="1",
                    opportunity_title="T",
                    download_path="https://d/1.pdf",
                    file_description="NOFO",
                )
            ]
        )
        assert json.loads(store.results_path.read_text()) == [
            {
                "opportunity_id": "1",
                "opportunity_title": "T",
                "download_path": "https://d/1.pdf",
                "file_description": "NOFO",
            }
        ]

    def test_save_stats_keeps_key_order(self, tmp_path) -> None:
        store = JsonArtifactStore(tmp_path)
        stats = StatisticsSummary(
            total_opportunities_processed=3,
            mime_type_counts={"pdf": 2, "docx": 1},
            attachment_count_distribution={"1": 2, "3": 1},
            generated_at=datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc),
        )
        store.save_stats(stats)
        text = store.stats_path.read_text()
        data = json.loads(text)
        assert list(data) == [
            "total_opportunities_processed",
            "mime_type_counts",
            "attachment_count_distribution",
            "generated_at",
        ]
        assert list(data["mime_type_counts"]) == ["pdf", "docx"]
        assert data["generated_at"].startswith("2026-03-01T12:00:00")
