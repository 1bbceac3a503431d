"""SQLite-backed document store holding users, categories, products and orders."""

import dataclasses
import json
import math
import secrets
import sqlite3
import threading
from pathlib import Path
from typing import Any, Iterable, Optional

from ..exceptions import (
    InvalidRecordError,
    StoreError,
    StoreUnavailable,
    UniquenessViolation,
    UnknownFieldError,
)
from ..logging_config import get_logger
from .models import ENTITIES, EntitySpec, FieldSpec, Record, entity_spec

logger = get_logger(__name__)

# Current schema version (bump when tables change).
_SCHEMA_VERSION = 1

_COLUMN_TYPES = {"text": "TEXT", "number": "REAL", "ref": "TEXT", "refs": "TEXT"}

_UNIQUE_FAILED = "UNIQUE constraint failed: "


def new_object_id() -> str:
    """Return a fresh 24-character hex identity."""
    return secrets.token_hex(12)


def resolve_database_path(uri: str) -> str:
    """Map a connection string to the path ``sqlite3.connect`` expects.

    Accepts ``sqlite:///relative.db``, ``sqlite:////absolute.db``,
    ``sqlite://:memory:``, ``:memory:`` and bare filesystem paths.
    """
    if "://" not in uri:
        return uri
    scheme, rest = uri.split("://", 1)
    if scheme != "sqlite":
        raise ValueError(f"unsupported scheme: {scheme}")
    if rest == ":memory:" or rest == "/:memory:":
        return ":memory:"
    if rest.startswith("/"):
        rest = rest[1:]
    if not rest:
        raise ValueError("missing database path")
    return rest


class DocumentStore:
    """Record collections for the four catalog entities.

    A single connection is shared by every caller and guarded by a
    re-entrant lock, so resolvers running on different threads may use the
    same store.

    Usage::

        with DocumentStore("sqlite:///catalog.db") as store:
            category = store.insert(Category(name="Tools"))
            store.find_where(Product, "category", category.id)
    """

    def __init__(self, uri: str) -> None:
        self.uri = uri
        self._lock = threading.RLock()
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def conn(self) -> sqlite3.Connection:
        """Return the active connection. Raises if not connected."""
        if self._conn is None:
            raise StoreUnavailable(self.uri, "not connected")
        return self._conn

    @property
    def connected(self) -> bool:
        return self._conn is not None

    # ── lifecycle ─────────────────────────────────────────────────

    def connect(self) -> sqlite3.Connection:
        """Open (or create) the database and create missing tables.

        Raises:
            StoreUnavailable: If the URI is malformed or the database
                cannot be opened
        """
        with self._lock:
            if self._conn is not None:
                return self._conn
            try:
                path = resolve_database_path(self.uri)
                if path != ":memory:":
                    Path(path).parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(path, check_same_thread=False)
                conn.row_factory = sqlite3.Row
                self._conn = conn
                self._migrate()
            except (ValueError, OSError, sqlite3.Error) as e:
                self._discard()
                raise StoreUnavailable(self.uri, str(e)) from e
            logger.info("Connected to store at %s", self.uri)
            return conn

    def close(self) -> None:
        """Close the connection if open."""
        with self._lock:
            self._discard()

    def _discard(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "DocumentStore":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ── migration ─────────────────────────────────────────────────

    def _migrate(self) -> None:
        """Idempotently create all tables and indexes."""
        c = self.conn

        c.execute(
            """
            CREATE TABLE IF NOT EXISTS schema_version (
                version INTEGER NOT NULL
            )
            """
        )
        row = c.execute("SELECT version FROM schema_version").fetchone()
        if row is None:
            c.execute(
                "INSERT INTO schema_version (version) VALUES (?)",
                (_SCHEMA_VERSION,),
            )

        for spec in ENTITIES.values():
            columns = ",\n".join(
                f'    "{f.name}" {_COLUMN_TYPES[f.kind]}' for f in spec.fields
            )
            # seq keeps insertion order for find_all / find_where
            c.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {spec.table} (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id  TEXT    NOT NULL UNIQUE,
                {columns}
                )
                """
            )
            for f in spec.fields:
                if f.unique:
                    c.execute(
                        f"CREATE UNIQUE INDEX IF NOT EXISTS ux_{spec.table}_{f.name} "
                        f'ON {spec.table}("{f.name}")'
                    )
                elif f.kind == "ref":
                    c.execute(
                        f"CREATE INDEX IF NOT EXISTS idx_{spec.table}_{f.name} "
                        f'ON {spec.table}("{f.name}")'
                    )

        c.commit()

    # ── reads ─────────────────────────────────────────────────────

    def find_all(self, entity: type) -> list:
        """Return every record of *entity* in insertion order."""
        spec = entity_spec(entity)
        rows = self._fetch(f"SELECT * FROM {spec.table} ORDER BY seq")
        return [_to_record(spec, row) for row in rows]

    def find_where(self, entity: type, field_name: str, value: Any) -> list:
        """Return records of *entity* whose *field_name* equals *value*.

        Raises:
            UnknownFieldError: If the field is not declared or holds a list
        """
        spec = entity_spec(entity)
        if field_name == "id":
            record = self.find_by_id(entity, value)
            return [record] if record is not None else []
        field_spec = spec.get_field(field_name)
        if field_spec is None or not field_spec.queryable:
            raise UnknownFieldError(spec.name, field_name)
        rows = self._fetch(
            f'SELECT * FROM {spec.table} WHERE "{field_name}" = ? ORDER BY seq',
            (value,),
        )
        return [_to_record(spec, row) for row in rows]

    def find_by_id(self, entity: type, identity: Optional[str]) -> Optional[Record]:
        """Return the record with *identity*, or ``None`` if absent."""
        spec = entity_spec(entity)
        if identity is None:
            return None
        rows = self._fetch(f"SELECT * FROM {spec.table} WHERE id = ?", (identity,))
        return _to_record(spec, rows[0]) if rows else None

    def find_many_by_ids(self, entity: type, identities: Iterable[str]) -> list:
        """Return one record per identity, in input order.

        Repeated identities yield repeated records; identities with no
        matching record are omitted.
        """
        spec = entity_spec(entity)
        wanted = list(identities)
        unique_ids = list(dict.fromkeys(wanted))
        if not unique_ids:
            return []
        placeholders = ", ".join("?" for _ in unique_ids)
        rows = self._fetch(
            f"SELECT * FROM {spec.table} WHERE id IN ({placeholders})",
            tuple(unique_ids),
        )
        by_id = {row["id"]: _to_record(spec, row) for row in rows}
        return [by_id[identity] for identity in wanted if identity in by_id]

    def count(self, entity: type) -> int:
        spec = entity_spec(entity)
        rows = self._fetch(f"SELECT COUNT(*) AS n FROM {spec.table}")
        return int(rows[0]["n"])

    def _fetch(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        with self._lock:
            return self.conn.execute(sql, params).fetchall()

    # ── writes ────────────────────────────────────────────────────

    def insert(self, record: Record) -> Record:
        """Store *record* and return it with its identity assigned.

        Raises:
            InvalidRecordError: If a required field is missing or a value is
                out of range
            UniquenessViolation: If a unique field (or the identity) collides
                with an existing record
        """
        spec = entity_spec(type(record))
        _validate(spec, record)

        created = record
        if created.id is None:
            created = dataclasses.replace(record, id=new_object_id())
        names = ["id"] + [f.name for f in spec.fields]
        values = [created.id] + [_to_column(f, getattr(created, f.name)) for f in spec.fields]
        columns = ", ".join(f'"{name}"' for name in names)
        placeholders = ", ".join("?" for _ in names)

        with self._lock:
            conn = self.conn
            try:
                conn.execute(
                    f"INSERT INTO {spec.table} ({columns}) VALUES ({placeholders})",
                    values,
                )
                conn.commit()
            except sqlite3.IntegrityError as e:
                conn.rollback()
                message = str(e)
                if not message.startswith(_UNIQUE_FAILED):
                    raise StoreError(f"Insert into {spec.table} failed: {message}") from e
                field_name = message[len(_UNIQUE_FAILED):].rsplit(".", 1)[-1]
                raise UniquenessViolation(
                    spec.name, field_name, getattr(created, field_name, None)
                ) from e

        logger.debug("Inserted %s %s", spec.name, created.id)
        return created


def _validate(spec: EntitySpec, record: Record) -> None:
    for f in spec.fields:
        value = getattr(record, f.name)
        if value is None:
            if f.required:
                raise InvalidRecordError(spec.name, f.name, "required")
            continue
        if f.kind == "number":
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidRecordError(spec.name, f.name, "must be a number")
            if not math.isfinite(value):
                raise InvalidRecordError(spec.name, f.name, "must be finite")
            if f.minimum is not None and value < f.minimum:
                raise InvalidRecordError(spec.name, f.name, f"must be >= {f.minimum:g}")
        elif f.kind == "refs":
            if isinstance(value, str) or not all(isinstance(v, str) for v in value):
                raise InvalidRecordError(spec.name, f.name, "must be a list of identities")


def _to_column(field_spec: FieldSpec, value: Any) -> Any:
    if field_spec.kind == "refs":
        return json.dumps(list(value or []))
    return value


def _to_record(spec: EntitySpec, row: sqlite3.Row) -> Record:
    values = {}
    for f in spec.fields:
        raw = row[f.name]
        if f.kind == "refs":
            values[f.name] = json.loads(raw) if raw else []
        else:
            values[f.name] = raw
    return spec.record_type(id=row["id"], **values)
