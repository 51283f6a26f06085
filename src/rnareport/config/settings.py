"""Runtime settings for the report store."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from rnareport.config.constants import DEFAULT_STORAGE_DIR, STORAGE_DIR_ENV, STORAGE_KEY


def _storage_dir_from_env() -> Path:
    return Path(os.environ.get(STORAGE_DIR_ENV) or DEFAULT_STORAGE_DIR).expanduser()


@dataclass
class StoreConfig:
    """Where the customized report is persisted.

    The storage directory defaults to RNAREPORT_STORAGE_DIR (or ~/.rnareport).
    A report is persisted as <storage_dir>/<storage_key>.json.
    """

    storage_dir: Path = field(default_factory=_storage_dir_from_env)
    storage_key: str = STORAGE_KEY

    @property
    def storage_path(self) -> Path:
        return Path(self.storage_dir) / f"{self.storage_key}.json"
