# puppy_bowl/io.py
from __future__ import annotations
import io
import logging
from typing import Optional

import pandas as pd
from pydantic import ValidationError

from .models import Player

logger = logging.getLogger(__name__)

ROSTER_COLUMNS = ["id", "name", "breed", "status", "teamId", "imageUrl"]


def roster_to_dataframe(roster: Optional[dict]) -> pd.DataFrame:
    """Flatten a roster envelope into one row per player, in API order.

    Records that do not parse as a player are logged and left out.
    """
    try:
        records = roster["data"]["players"]
    except (KeyError, TypeError) as e:
        logger.error("Roster envelope could not be tabulated: %s", e, exc_info=True)
        return pd.DataFrame(columns=ROSTER_COLUMNS)
    rows = []
    for record in records:
        try:
            rows.append(Player.model_validate(record).model_dump(by_alias=True))
        except ValidationError as e:
            logger.error("Skipping malformed player record %r: %s", record, e)
    return pd.DataFrame(rows, columns=ROSTER_COLUMNS)


def roster_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")
