"""
SQL Override Store

SQLAlchemy-backed OverrideStore. Blocking ORM work runs in a worker
thread via asyncio.to_thread so the resolution engine can fan out its
three layer reads concurrently.

Every write runs in a single transaction: a failed insert or delete
leaves nothing behind. Any SQLAlchemyError is re-raised as
StoreUnavailableError.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, TypeVar
from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.schemas.standards import (
    DistrictStandard,
    DistrictStandardCreate,
    SchoolOverride,
    SchoolOverrideCreate,
    StateOverride,
    StateOverrideCreate,
)
from src.standards.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Base = declarative_base()


class StateOverrideRow(Base):
    __tablename__ = "standard_overrides"

    id = Column(String(64), primary_key=True)
    state = Column(String(32), nullable=False, index=True)
    subject = Column(String(128), nullable=False, index=True)
    replaces_standard_id = Column(String(255), nullable=False)
    new_standard_id = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    editable = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)


class DistrictStandardRow(Base):
    __tablename__ = "district_standards"

    id = Column(String(64), primary_key=True)
    district_id = Column(String(128), nullable=False, index=True)
    subject = Column(String(128), nullable=False)
    grade = Column(Integer, nullable=False)
    description = Column(Text, nullable=False)
    editable = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)


class SchoolOverrideRow(Base):
    __tablename__ = "school_standard_overrides"

    id = Column(String(64), primary_key=True)
    school_id = Column(String(128), nullable=False, index=True)
    overrides_standard_id = Column(String(255), nullable=False)
    custom_description = Column(Text, nullable=False)
    editable = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)


def build_engine(database_url: str) -> Engine:
    """Create an engine; SQLite connections are shared with worker threads."""
    connect_args: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(engine)


def _row_to_state(row: StateOverrideRow) -> StateOverride:
    return StateOverride(
        id=row.id,
        state=row.state,
        subject=row.subject,
        replaces_standard_id=row.replaces_standard_id,
        new_standard_id=row.new_standard_id,
        description=row.description,
        editable=row.editable,
        created_at=row.created_at,
    )


def _row_to_district(row: DistrictStandardRow) -> DistrictStandard:
    return DistrictStandard(
        id=row.id,
        district_id=row.district_id,
        subject=row.subject,
        grade=row.grade,
        description=row.description,
        editable=row.editable,
        created_at=row.created_at,
    )


def _row_to_school(row: SchoolOverrideRow) -> SchoolOverride:
    return SchoolOverride(
        id=row.id,
        school_id=row.school_id,
        overrides_standard_id=row.overrides_standard_id,
        custom_description=row.custom_description,
        editable=row.editable,
        created_at=row.created_at,
    )


class SqlOverrideStore:
    """OverrideStore backed by any SQLAlchemy-supported database."""

    def __init__(self, engine: Engine, create_tables: bool = True) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        if create_tables:
            init_db(engine)

    @classmethod
    def from_url(cls, database_url: str) -> "SqlOverrideStore":
        return cls(build_engine(database_url))

    async def _run(self, layer: str, func: Callable[[Session], T]) -> T:
        def work() -> T:
            try:
                with self._session_factory.begin() as session:
                    return func(session)
            except SQLAlchemyError as e:
                raise StoreUnavailableError(layer, e) from e

        return await asyncio.to_thread(work)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def query_state_overrides(self, state: str, subject: str) -> list[StateOverride]:
        stmt = (
            select(StateOverrideRow)
            .where(StateOverrideRow.state == state, StateOverrideRow.subject == subject)
            .order_by(StateOverrideRow.created_at, StateOverrideRow.id)
        )
        return await self._run(
            "state", lambda s: [_row_to_state(r) for r in s.scalars(stmt)]
        )

    async def query_district_standards(
        self, district_id: str, subject: str, grade: int
    ) -> list[DistrictStandard]:
        stmt = (
            select(DistrictStandardRow)
            .where(
                DistrictStandardRow.district_id == district_id,
                DistrictStandardRow.subject == subject,
                DistrictStandardRow.grade == grade,
            )
            .order_by(DistrictStandardRow.created_at, DistrictStandardRow.id)
        )
        return await self._run(
            "district", lambda s: [_row_to_district(r) for r in s.scalars(stmt)]
        )

    async def query_school_overrides(self, school_id: str) -> list[SchoolOverride]:
        stmt = (
            select(SchoolOverrideRow)
            .where(SchoolOverrideRow.school_id == school_id)
            .order_by(SchoolOverrideRow.created_at, SchoolOverrideRow.id)
        )
        return await self._run(
            "school", lambda s: [_row_to_school(r) for r in s.scalars(stmt)]
        )

    async def list_district_standards(self, district_id: str) -> list[DistrictStandard]:
        stmt = (
            select(DistrictStandardRow)
            .where(DistrictStandardRow.district_id == district_id)
            .order_by(DistrictStandardRow.created_at, DistrictStandardRow.id)
        )
        return await self._run(
            "district", lambda s: [_row_to_district(r) for r in s.scalars(stmt)]
        )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def insert_state_override(self, draft: StateOverrideCreate) -> StateOverride:
        row = StateOverrideRow(
            id=uuid4().hex, editable=False, created_at=datetime.now(timezone.utc), **draft.model_dump()
        )

        def insert(session: Session) -> StateOverride:
            session.add(row)
            session.flush()
            return _row_to_state(row)

        record = await self._run("state", insert)
        logger.info(f"Stored state override {record.id} ({record.state}: {record.replaces_standard_id} -> {record.new_standard_id})")
        return record

    async def insert_district_standard(self, draft: DistrictStandardCreate) -> DistrictStandard:
        row = DistrictStandardRow(
            id=uuid4().hex, editable=True, created_at=datetime.now(timezone.utc), **draft.model_dump()
        )

        def insert(session: Session) -> DistrictStandard:
            session.add(row)
            session.flush()
            return _row_to_district(row)

        return await self._run("district", insert)

    async def insert_school_override(self, draft: SchoolOverrideCreate) -> SchoolOverride:
        row = SchoolOverrideRow(
            id=uuid4().hex, editable=True, created_at=datetime.now(timezone.utc), **draft.model_dump()
        )

        def insert(session: Session) -> SchoolOverride:
            session.add(row)
            session.flush()
            return _row_to_school(row)

        return await self._run("school", insert)

    async def _delete(self, layer: str, model: type, record_id: str) -> None:
        def delete(session: Session) -> None:
            row = session.get(model, record_id)
            if row is not None:
                session.delete(row)

        await self._run(layer, delete)

    async def delete_district_standard(self, record_id: str) -> None:
        await self._delete("district", DistrictStandardRow, record_id)

    async def delete_school_override(self, record_id: str) -> None:
        await self._delete("school", SchoolOverrideRow, record_id)
