"""sqlite3 storage for the last calculator inputs a user entered."""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from investcalc.config import DEFAULT_PARAMS, STORAGE_KEY
from investcalc.models import CalculatorParams, default_params

logger = logging.getLogger(__name__)


class ParamsStore:
    """
    One JSON record per storage key.

    load() never fails on bad data: anything unreadable is logged and the
    defaults are returned. Stored fields are merged over the defaults, so a
    record missing some keys still loads.
    """

    def __init__(self, db_path: Union[str, Path], storage_key: str = STORAGE_KEY):
        self.db_path = Path(db_path)
        self.storage_key = storage_key
        self.init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                create table if not exists calculator_params (
                    storage_key text primary key,
                    payload text not null,
                    updated_at text not null
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def load(self) -> CalculatorParams:
        conn = self._connect()
        try:
            row = conn.execute(
                "select payload from calculator_params where storage_key = ?",
                (self.storage_key,),
            ).fetchone()
        finally:
            conn.close()

        if row is None:
            return default_params()

        try:
            saved = json.loads(row["payload"])
            if not isinstance(saved, dict):
                raise ValueError("stored payload is not an object")
            return CalculatorParams.model_validate({**DEFAULT_PARAMS, **saved})
        except (ValueError, ValidationError) as exc:
            logger.warning("Could not parse saved values, using defaults: %s", exc)
            return default_params()

    def save(self, params: CalculatorParams) -> CalculatorParams:
        conn = self._connect()
        try:
            conn.execute(
                """
                insert into calculator_params (storage_key, payload, updated_at)
                values (?, ?, ?)
                on conflict(storage_key) do update set
                    payload = excluded.payload,
                    updated_at = excluded.updated_at
                """,
                (
                    self.storage_key,
                    params.model_dump_json(),
                    datetime.now(timezone.utc).isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        return params

    def reset(self) -> CalculatorParams:
        conn = self._connect()
        try:
            conn.execute(
                "delete from calculator_params where storage_key = ?",
                (self.storage_key,),
            )
            conn.commit()
        finally:
            conn.close()
        return default_params()


__all__ = ["ParamsStore"]
