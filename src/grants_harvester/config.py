"""Runtime configuration shared by the collector and the harvester."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://api.simpler.grants.gov"


class HarvesterConfig(BaseModel):
    """
    Settings passed to each stage at construction.

    page_size: results requested per search page
    collector_delay_ms: pause after each search page
    harvester_delay_ms: pause after each detail request
    base_url: API root, without trailing slash
    api_key: sent as X-API-Key; not validated locally
    data_dir: directory holding the JSON artifacts
    """

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    page_size: int = Field(default=25, ge=1)
    collector_delay_ms: int = Field(default=300, ge=0)
    harvester_delay_ms: int = Field(default=250, ge=0)
    timeout: float = Field(default=30.0, gt=0)
    data_dir: Path = Path("data")

    @classmethod
    def from_env(cls, **overrides) -> "HarvesterConfig":
        """Build config from GRANTS_GOV_* / GRANTS_HARVESTER_* env vars; kwargs win."""
        env_map = {
            "api_key": "GRANTS_GOV_API_KEY",
            "base_url": "GRANTS_GOV_BASE_URL",
            "data_dir": "GRANTS_HARVESTER_DATA_DIR",
            "page_size": "GRANTS_HARVESTER_PAGE_SIZE",
            "collector_delay_ms": "GRANTS_HARVESTER_COLLECTOR_DELAY_MS",
            "harvester_delay_ms": "GRANTS_HARVESTER_HARVESTER_DELAY_MS",
        }
        values: dict = {}
        for field_name, var in env_map.items():
            raw = os.environ.get(var)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        values.update(overrides)
        config = cls.model_validate(values)
        config.base_url = config.base_url.rstrip("/")
        return config
