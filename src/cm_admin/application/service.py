"""Admin reporting service: profession and client leaderboards over paid jobs.

Read-only; runs at the session's default isolation without an explicit
transaction. The optional date range is passed as bind parameters.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_admin.application.schemas import BestClientItem, BestProfessionResponse
from src.cm_admin.domain.params import DateRange
from src.cm_common.ids import MAX_SERIAL_ID

# asyncpg NULL parameter pattern: CAST(:param AS TYPE) IS NULL required for None values.
_PAYMENT_WINDOW = """
      AND (CAST(:start_at AS TIMESTAMPTZ) IS NULL
           OR j.payment_date >= CAST(:start_at AS TIMESTAMPTZ))
      AND (CAST(:end_before AS TIMESTAMPTZ) IS NULL
           OR j.payment_date < CAST(:end_before AS TIMESTAMPTZ))
"""

_BEST_PROFESSION_SQL = text(f"""
    SELECT p.profession, SUM(j.price) AS earned
    FROM jobs AS j
    JOIN contracts AS c ON c.id = j.contract_id
    JOIN profiles AS p ON p.id = c.contractor_id
    WHERE j.paid = TRUE
    {_PAYMENT_WINDOW}
    GROUP BY p.profession
    ORDER BY SUM(j.price) DESC, p.profession
    LIMIT 1
""")

_BEST_CLIENTS_SQL = text(f"""
    SELECT c.client_id AS id,
           SUM(j.price) AS paid,
           p.first_name || ' ' || p.last_name AS full_name
    FROM jobs AS j
    JOIN contracts AS c ON c.id = j.contract_id
    JOIN profiles AS p ON p.id = c.client_id
    WHERE j.paid = TRUE
    {_PAYMENT_WINDOW}
    GROUP BY c.client_id, p.first_name, p.last_name
    ORDER BY SUM(j.price) DESC, c.client_id
    LIMIT :limit
""")


def _window_params(date_range: DateRange | None) -> dict[str, object]:
    if date_range is None:
        return {"start_at": None, "end_before": None}
    return {"start_at": date_range.start_at, "end_before": date_range.end_before}


class AdminService:
    async def best_profession(
        self, db: AsyncSession, date_range: DateRange | None
    ) -> BestProfessionResponse | None:
        """Profession whose contractors earned the most; None if nothing was paid."""
        row = (
            await db.execute(_BEST_PROFESSION_SQL, _window_params(date_range))
        ).fetchone()
        if row is None:
            return None
        return BestProfessionResponse(profession=row.profession)

    async def best_clients(
        self, db: AsyncSession, date_range: DateRange | None, limit: int
    ) -> list[BestClientItem]:
        """Clients ordered by total paid, highest first, at most `limit` rows."""
        # No more clients exist than profile ids
        params = {**_window_params(date_range), "limit": min(limit, MAX_SERIAL_ID)}
        rows = (await db.execute(_BEST_CLIENTS_SQL, params)).fetchall()
        return [
            BestClientItem(id=row.id, paid=int(row.paid), full_name=row.full_name)
            for row in rows
        ]
