"""Application state: the single active Report.

ReportStore is the only writer. load_data() replaces the report and
persists it, and reset_to_default() restores the built-in report and
deletes the persisted copy. Readers get the current Report object, which
is never mutated in place, so every read sees a consistent report.

The store is passed explicitly to whatever needs it. Dashboard sessions
keep it under SESSION_KEY (see bind_store / current_store).
"""

import json
from collections.abc import Mapping, MutableMapping
from typing import Any

from rnareport.config.debug import get_logger
from rnareport.config.settings import StoreConfig
from rnareport.data.default_report import default_report
from rnareport.errors import NotFoundError, RNAReportError
from rnareport.models.report import Report
from rnareport.upload import build_report, parse_report_text

logger = get_logger(__name__)

SESSION_KEY = "rnareport_store"


class ReportStore:
    """Holds the active report and its persisted copy.

    Example:
        >>> store = ReportStore(StoreConfig(storage_dir=tmp_path))
        >>> store.load_data(custom_report)
        >>> store.is_custom
        True
        >>> store.reset_to_default()
        >>> store.report == default_report()
        True
    """

    def __init__(self, config: StoreConfig | None = None):
        self.config = config or StoreConfig()
        self._revision = 0
        self._report, self._is_custom = self._restore()

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    @property
    def report(self) -> Report:
        return self._report

    @property
    def is_custom(self) -> bool:
        return self._is_custom

    @property
    def revision(self) -> int:
        """Incremented on every write; usable as a cache key for derived views."""
        return self._revision

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def load_data(self, data: Report | Mapping[str, Any]) -> Report:
        """Replace the active report and persist it.

        A mapping is treated as an upload document: it is validated and
        omitted sections fall back to the defaults.

        Raises:
            ReportValidationError: If a mapping fails validation.
        """
        if isinstance(data, Report):
            report = data
        else:
            report = build_report(dict(data))

        self._write(report)
        self._report = report
        self._is_custom = True
        self._revision += 1
        logger.info("Active report replaced (sample %s)", report.sample_info.sample_id)
        return report

    def reset_to_default(self) -> Report:
        """Restore the built-in report and remove the persisted copy."""
        self.config.storage_path.unlink(missing_ok=True)
        self._report = default_report()
        self._is_custom = False
        self._revision += 1
        logger.info("Active report reset to default")
        return self._report

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _write(self, report: Report) -> None:
        path = self.config.storage_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(report.to_json_dict(), indent=2), encoding="utf-8")
        logger.debug("Persisted report to %s", path)

    def _restore(self) -> tuple[Report, bool]:
        path = self.config.storage_path
        if not path.exists():
            return default_report(), False

        try:
            report = build_report(parse_report_text(path.read_bytes()))
        except (RNAReportError, OSError) as e:
            logger.warning("Ignoring unreadable persisted report %s: %s", path, e)
            return default_report(), False
        logger.debug("Restored persisted report from %s", path)
        return report, True


def bind_store(session: MutableMapping, store: ReportStore | None = None) -> ReportStore:
    """Attach a store to a session mapping (e.g. st.session_state) once."""
    if SESSION_KEY not in session:
        session[SESSION_KEY] = store or ReportStore()
    return session[SESSION_KEY]


def current_store(session: Mapping) -> ReportStore:
    """Return the store bound to a session.

    Raises:
        NotFoundError: If bind_store() was never called for this session.
    """
    store = session.get(SESSION_KEY)
    if store is None:
        raise NotFoundError("current_store() must be used after bind_store() for this session")
    return store
