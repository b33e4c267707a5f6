"""Pipeline stages: a log group plus a timed success/failure record."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator

from wpci import actions
from wpci.models import StageRecord

log = logging.getLogger(__name__)


@contextmanager
def stage(
    name: str, records: list[StageRecord] | None = None
) -> Generator[StageRecord, None, None]:
    """Context manager that groups the output of a stage and records timing and outcome."""
    record = StageRecord(name=name)
    if records is not None:
        records.append(record)
    start = time.monotonic()
    with actions.group(name):
        try:
            yield record
            record.result = "success"
        except Exception as exc:
            record.result = "failure"
            record.error = str(exc)
            raise
        finally:
            record.duration_ms = int((time.monotonic() - start) * 1000)
            log.debug("stage %r %s in %d ms", name, record.result, record.duration_ms)
