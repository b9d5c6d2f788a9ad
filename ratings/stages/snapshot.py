"""
Snapshot preparation: the validation stage every view runs first.

Drops records without a usable submission instant, attaches effective date and
normalized score, sorts deterministically, and computes the global mean once.

The public entry point is prepare_snapshot.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from ..models.config import RatingConfig, resolve_config
from ..models.record import ScoreRecord
from ..models.snapshot import PreparedSnapshot, ValidRecord
from ..utils.dates import local_date, parse_instant
from ..utils.scores import normalize_guesses

logger = logging.getLogger(__name__)


def _to_record(item: Union[Dict[str, Any], ScoreRecord]) -> Optional[ScoreRecord]:
    """ScoreRecord for a dict or model; None if the dict cannot be read as one."""
    if isinstance(item, ScoreRecord):
        return item
    try:
        return ScoreRecord.model_validate(item)
    except ValidationError as e:
        logger.debug("Excluding unreadable score record: %s", e.errors()[0].get("msg"))
        return None


def _validate(
    items: List[Union[Dict[str, Any], ScoreRecord]],
    config: RatingConfig,
) -> Tuple[List[ValidRecord], int]:
    """Return (valid records, excluded count)."""
    zone = config.zone
    valid: List[ValidRecord] = []
    excluded = 0
    for item in items:
        record = _to_record(item)
        instant = parse_instant(record.submitted_at) if record is not None else None
        if instant is None:
            excluded += 1
            continue
        try:
            played_on = local_date(instant, zone)
        except OverflowError:
            # instant parses but has no calendar date in the zone (edge of datetime range)
            excluded += 1
            continue
        valid.append(
            ValidRecord(
                record=record,
                submitted_at=instant,
                effective_date=played_on,
                score=normalize_guesses(
                    record.guesses,
                    record.dnf,
                    config.max_guesses,
                    config.dnf_score,
                ),
            )
        )
    return valid, excluded


def global_mean(records: List[ValidRecord], config: RatingConfig) -> float:
    """Mean normalized score over all valid records; neutral prior when there are none."""
    if not records:
        return config.neutral_prior
    return sum(r.score for r in records) / len(records)


def prepare_snapshot(
    items: Union[List[Union[Dict[str, Any], ScoreRecord]], PreparedSnapshot],
    config: Optional[RatingConfig] = None,
) -> PreparedSnapshot:
    """
    Validate and normalize a raw snapshot.

    Accepts dicts (as read from storage) or ScoreRecords. An already prepared
    snapshot is returned unchanged.
    """
    if isinstance(items, PreparedSnapshot):
        return items
    config = resolve_config(config)
    valid, excluded = _validate(list(items), config)
    valid.sort(key=lambda r: (r.effective_date, r.submitted_at, r.name))
    mean = global_mean(valid, config)
    if excluded:
        logger.debug("Excluded %d of %d score records without a usable submission time",
                     excluded, len(valid) + excluded)
    logger.debug("Prepared snapshot: %d valid records, global mean %.4f", len(valid), mean)
    return PreparedSnapshot(records=valid, excluded_count=excluded, global_mean=mean)
