"""Title store exposing bulk writes for ingestion and read access for the API."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import selectinload
from sqlmodel import Session

from ..models import PictureRecord, TitleRecord
from ..schemas import Page, StatsModel, TitleModel
from ..utils.params import PageWindow

RecordT = TypeVar("RecordT", TitleRecord, PictureRecord)

DEFAULT_BATCH_SIZE = 100

# SQLite stores LIMIT/OFFSET as signed 64-bit integers.
MAX_SQL_OFFSET = 2**63 - 1


@dataclass(slots=True)
class TitleStore:
    """Accessor for persisted titles and their pictures."""

    engine: Engine

    def count(self) -> int:
        with Session(self.engine) as session:
            return session.exec(select(func.count()).select_from(TitleRecord)).scalar_one()

    def count_pictures(self) -> int:
        with Session(self.engine) as session:
            return session.exec(select(func.count()).select_from(PictureRecord)).scalar_one()

    def insert_batches(
        self, records: Sequence[RecordT], batch_size: int = DEFAULT_BATCH_SIZE
    ) -> int:
        """Persist ``records`` in chunks of ``batch_size`` within a single transaction.

        Each chunk is flushed as it is added; nothing is committed unless every
        chunk succeeds.
        """

        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        with Session(self.engine) as session, session.begin():
            for start in range(0, len(records), batch_size):
                session.add_all(records[start : start + batch_size])
                session.flush()
        return len(records)

    def clear(self) -> None:
        """Delete every picture and title."""

        with Session(self.engine) as session, session.begin():
            session.exec(delete(PictureRecord))
            session.exec(delete(TitleRecord))

    def list(self, *, window: PageWindow, only_with_pictures: bool, reverse: bool) -> Page[TitleModel]:
        """Return one page of titles ordered by title id."""

        count_statement = select(func.count()).select_from(TitleRecord)
        items_statement = select(TitleRecord)
        if only_with_pictures:
            matching = (
                select(TitleRecord.title_id)
                .join(PictureRecord, PictureRecord.title_id == TitleRecord.title_id)
                .group_by(TitleRecord.title_id)
            )
            count_statement = select(func.count()).select_from(matching.subquery())
            items_statement = items_statement.join(
                PictureRecord, PictureRecord.title_id == TitleRecord.title_id
            ).group_by(TitleRecord.title_id)

        order = TitleRecord.title_id.desc() if reverse else TitleRecord.title_id.asc()
        items_statement = (
            items_statement.options(selectinload(TitleRecord.pictures))
            .order_by(order)
            .offset(window.offset)
            .limit(window.limit)
        )

        with Session(self.engine) as session:
            total = session.exec(count_statement).scalar_one()
            if window.offset > MAX_SQL_OFFSET:
                records = []
            else:
                records = session.exec(items_statement).scalars().all()
            items = [_to_model(record) for record in records]

        return Page[TitleModel](
            items=items,
            total=total,
            limit=window.limit,
            offset=window.offset,
            page=window.page,
            pages=window.page_count(total),
        )

    def all_titles(self) -> list[TitleModel]:
        """Load every title with its pictures, ordered by title id."""

        with Session(self.engine) as session:
            records = session.exec(
                select(TitleRecord)
                .options(selectinload(TitleRecord.pictures))
                .order_by(TitleRecord.title_id)
            ).scalars().all()
            return [_to_model(record) for record in records]

    def get(self, title_id: str) -> TitleModel | None:
        """Return a single title with pictures if present, matching the id case-insensitively."""

        statement = (
            select(TitleRecord)
            .where(func.lower(TitleRecord.title_id) == title_id.lower())
            .options(selectinload(TitleRecord.pictures))
        )
        with Session(self.engine) as session:
            record = session.exec(statement).scalars().first()
            return _to_model(record) if record else None

    def stats(self) -> StatsModel:
        """Return aggregate counts for the catalog."""

        with Session(self.engine) as session:
            titles = session.exec(select(func.count()).select_from(TitleRecord)).scalar_one()
            pictures = session.exec(select(func.count()).select_from(PictureRecord)).scalar_one()
            titles_with_pictures = session.exec(
                select(func.count(func.distinct(PictureRecord.title_id)))
            ).scalar_one()

        return StatsModel(
            titles=titles,
            pictures=pictures,
            titles_with_pictures=titles_with_pictures,
        )


def build_pictures(title_id: str, names: Iterable[str]) -> list[PictureRecord]:
    """Create picture records for ``title_id``."""

    return [PictureRecord(title_id=title_id, name=name) for name in names]


def _to_model(record: TitleRecord) -> TitleModel:
    """Convert a title record into a response model."""

    return TitleModel.model_validate(record)
