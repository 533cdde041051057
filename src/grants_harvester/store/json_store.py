"""Flat JSON file store under a data directory."""

import json
import logging
from pathlib import Path
from typing import Any

from grants_harvester.models.opportunity import FilteredOpportunity
from grants_harvester.models.stats import StatisticsSummary
from grants_harvester.store.base import ArtifactStore

logger = logging.getLogger(__name__)


class JsonArtifactStore(ArtifactStore):
    """
    Writes pretty-printed JSON files with fixed names in data_dir.
    The directory is created on first write.
    """

    IDS_FILENAME = "opportunityIds.json"
    RESULTS_FILENAME = "opportunityDetails.json"
    STATS_FILENAME = "opportunityStats.json"

    def __init__(self, data_dir: str | Path = "data"):
        self._data_dir = Path(data_dir)

    @property
    def ids_path(self) -> Path:
        return self._data_dir / self.IDS_FILENAME

    @property
    def results_path(self) -> Path:
        return self._data_dir / self.RESULTS_FILENAME

    @property
    def stats_path(self) -> Path:
        return self._data_dir / self.STATS_FILENAME

    def _write_json(self, path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    def save_ids(self, ids: list[str]) -> None:
        self._write_json(self.ids_path, list(ids))
        logger.info("Results saved to %s", self.ids_path)

    def has_ids(self) -> bool:
        return self.ids_path.exists()

    def load_ids(self) -> list[str]:
        if not self.has_ids():
            raise FileNotFoundError(
                f"Input file {self.ids_path} not found. "
                "Run the collect stage first (grants-harvester collect)."
            )
        data = json.loads(self.ids_path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{self.ids_path} must contain a JSON array of ids")
        return [str(i) for i in data]

    def save_results(self, results: list[FilteredOpportunity]) -> None:
        self._write_json(self.results_path, [r.model_dump(mode="json") for r in results])
        logger.info("Results saved to %s", self.results_path)

    def save_stats(self, stats: StatisticsSummary) -> None:
        self._write_json(self.stats_path, stats.model_dump(mode="json"))
        logger.info("Statistics saved to %s", self.stats_path)
