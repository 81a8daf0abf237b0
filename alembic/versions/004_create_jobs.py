"""004: create jobs table

Revision ID: 004
Revises: 003
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE jobs (
            id            SERIAL      PRIMARY KEY,
            description   TEXT        NOT NULL,
            price         BIGINT      NOT NULL,
            paid          BOOLEAN     NOT NULL DEFAULT FALSE,
            payment_date  TIMESTAMPTZ,
            contract_id   INTEGER     NOT NULL REFERENCES contracts (id),
            created_at    TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at    TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_jobs_price_gt_0 CHECK (price > 0),
            CONSTRAINT ck_jobs_payment_date_iff_paid CHECK (paid = (payment_date IS NOT NULL))
        );
    """)
    op.execute("CREATE INDEX idx_jobs_contract_unpaid ON jobs (contract_id) WHERE paid = FALSE;")
    op.execute("CREATE INDEX idx_jobs_payment_date ON jobs (payment_date) WHERE paid = TRUE;")
    # A paid job never changes again
    op.execute("""
        CREATE OR REPLACE FUNCTION fn_jobs_paid_immutable()
        RETURNS TRIGGER AS $$
        BEGIN
            IF OLD.paid THEN
                RAISE EXCEPTION 'job % is already paid', OLD.id;
            END IF;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)
    op.execute("""
        CREATE TRIGGER trg_jobs_paid_immutable
            BEFORE UPDATE ON jobs
            FOR EACH ROW EXECUTE FUNCTION fn_jobs_paid_immutable();
    """)
    op.execute("""
        CREATE TRIGGER trg_jobs_updated_at
            BEFORE UPDATE ON jobs
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS jobs CASCADE;")
    op.execute("DROP FUNCTION IF EXISTS fn_jobs_paid_immutable();")
