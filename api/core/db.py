"""
Async database access helpers (raw SQL) using aiosqlite.

`Store` owns the single SQLite connection. FastAPI opens it on startup and
closes it on shutdown (see `api/main.py`); handlers receive it through the
`get_store` dependency.

SQL parameter style:
- sqlite uses positional placeholders: ?, ?, ?, ...
"""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite
from fastapi import Request

from .errors import StoreError
from .schema import SCHEMA_SQL

DEFAULT_DB_PATH = "database/airprop.db"
MEMORY_DB = ":memory:"

logger = logging.getLogger(__name__)

# Store whose transaction scope the current task is inside, if any.
_active_transaction: ContextVar[Store | None] = ContextVar("active_transaction", default=None)


def database_path() -> str:
    return os.environ.get("AIRPROP_DB_PATH", DEFAULT_DB_PATH).strip() or DEFAULT_DB_PATH


@dataclass(frozen=True)
class ExecuteResult:
    inserted_id: int | None
    rows_affected: int


class Store:
    """
    One shared connection to the store file.

    Every statement goes through an asyncio lock so that a transaction opened
    by one request never absorbs statements issued by another. Code running
    inside `transaction()` already holds the lock and skips it.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def open(self) -> None:
        if self._conn is not None:
            return None
        if self.path != MEMORY_DB:
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)

        try:
            conn = await aiosqlite.connect(self.path, isolation_level=None)
        except aiosqlite.Error as exc:
            raise StoreError(str(exc)) from exc

        try:
            conn.row_factory = aiosqlite.Row
            await conn.execute("PRAGMA foreign_keys = ON")
            await conn.executescript(SCHEMA_SQL)
        except aiosqlite.Error as exc:
            await conn.close()
            raise StoreError(str(exc)) from exc

        self._conn = conn
        logger.info("store_opened path=%s", self.path)

    async def close(self) -> None:
        if self._conn is None:
            return None
        await self._conn.close()
        self._conn = None
        logger.info("store_closed path=%s", self.path)

    def _connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise StoreError("Store is not open. Call open() on startup.")
        return self._conn

    @asynccontextmanager
    async def _serialized(self) -> AsyncIterator[aiosqlite.Connection]:
        conn = self._connection()
        if _active_transaction.get() is self:
            yield conn
            return
        async with self._lock:
            yield conn

    async def execute(self, sql: str, *args: Any) -> ExecuteResult:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and report what it did.
        """
        async with self._serialized() as conn:
            try:
                async with conn.execute(sql, args) as cursor:
                    return ExecuteResult(inserted_id=cursor.lastrowid, rows_affected=cursor.rowcount)
            except (aiosqlite.Error, OverflowError) as exc:
                logger.warning("store_execute_failed error=%s", exc)
                raise StoreError(str(exc)) from exc

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        async with self._serialized() as conn:
            try:
                async with conn.execute(sql, args) as cursor:
                    row = await cursor.fetchone()
            except (aiosqlite.Error, OverflowError) as exc:
                logger.warning("store_fetch_failed error=%s", exc)
                raise StoreError(str(exc)) from exc
        return dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        async with self._serialized() as conn:
            try:
                rows = await conn.execute_fetchall(sql, args)
            except (aiosqlite.Error, OverflowError) as exc:
                logger.warning("store_fetch_failed error=%s", exc)
                raise StoreError(str(exc)) from exc
        return [dict(r) for r in rows]

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Store]:
        """
        Scope a check-then-act sequence: BEGIN IMMEDIATE on entry, COMMIT on
        success, ROLLBACK on any exception. Nested scopes join the outer one.
        """
        if _active_transaction.get() is self:
            yield self
            return

        conn = self._connection()
        async with self._lock:
            token = _active_transaction.set(self)
            try:
                await _run_control(conn, "BEGIN IMMEDIATE")
                try:
                    yield self
                except BaseException:
                    await _rollback(conn)
                    raise
                try:
                    await _run_control(conn, "COMMIT")
                except StoreError:
                    await _rollback(conn)
                    raise
            finally:
                _active_transaction.reset(token)


async def _run_control(conn: aiosqlite.Connection, sql: str) -> None:
    try:
        await conn.execute(sql)
    except aiosqlite.Error as exc:
        raise StoreError(str(exc)) from exc


async def _rollback(conn: aiosqlite.Connection) -> None:
    if not conn.in_transaction:
        return None
    try:
        await conn.execute("ROLLBACK")
    except aiosqlite.Error:
        logger.exception("store_rollback_failed")


def get_store(request: Request) -> Store:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreError("Store is not initialized.")
    return store
