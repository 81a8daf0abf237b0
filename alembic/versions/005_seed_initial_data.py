"""005: seed initial data

Revision ID: 005
Revises: 004
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op

revision: str = "005"
down_revision: Union[str, None] = "004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        INSERT INTO profiles (id, first_name, last_name, profession, balance, type) VALUES
            (1, 'Ada',       'Lovelace',    'Mathematician', 115000, 'client'),
            (2, 'Grace',     'Hopper',      'Admiral',        23125, 'client'),
            (3, 'Alan',      'Turing',      'Cryptographer',  45100, 'client'),
            (4, 'Katherine', 'Johnson',     'Physicist',        130, 'client'),
            (5, 'Linus',     'Torvalds',    'Programmer',      6400, 'contractor'),
            (6, 'Margaret',  'Hamilton',    'Programmer',      1214, 'contractor'),
            (7, 'Tim',       'Berners-Lee', 'Physicist',         22, 'contractor'),
            (8, 'Rosalind',  'Franklin',    'Chemist',          314, 'contractor'),
            (9, 'Root',      'Admin',       'Administrator',      0, 'admin');
    """)
    op.execute("SELECT setval('profiles_id_seq', (SELECT MAX(id) FROM profiles));")

    op.execute("""
        INSERT INTO contracts (id, terms, status, client_id, contractor_id) VALUES
            (1, 'Kernel scheduler audit',        'terminated',  1, 5),
            (2, 'Guidance software review',      'in_progress', 1, 6),
            (3, 'Compiler test suite',           'in_progress', 2, 6),
            (4, 'Hypertext prototype',           'in_progress', 2, 7),
            (5, 'Crystallography consultation',  'new',         3, 8),
            (6, 'Protocol specification',        'in_progress', 3, 7),
            (7, 'Trajectory verification',       'in_progress', 4, 7),
            (8, 'Flight software port',          'in_progress', 4, 6),
            (9, 'Lab safety review',             'in_progress', 3, 8);
    """)
    op.execute("SELECT setval('contracts_id_seq', (SELECT MAX(id) FROM contracts));")

    op.execute("""
        INSERT INTO jobs (description, price, paid, payment_date, contract_id) VALUES
            ('work',  20000, FALSE, NULL, 1),
            ('work',  20100, FALSE, NULL, 2),
            ('work',    121, FALSE, NULL, 3),
            ('work',    200, FALSE, NULL, 4),
            ('work',    200, FALSE, NULL, 7),
            ('work',   2020, TRUE,  '2026-08-15T19:11:26.737Z', 7),
            ('work',    200, TRUE,  '2026-08-15T19:11:26.737Z', 2),
            ('work',    200, TRUE,  '2026-08-16T19:11:26.737Z', 3),
            ('work',    200, TRUE,  '2026-08-17T19:11:26.737Z', 1),
            ('work',    200, TRUE,  '2026-08-17T19:11:26.737Z', 5),
            ('work',  21000, TRUE,  '2026-08-10T19:11:26.737Z', 1),
            ('work',  21000, TRUE,  '2026-08-15T19:11:26.737Z', 2),
            ('work',    121, TRUE,  '2026-08-15T19:11:26.737Z', 3),
            ('work',   1200, TRUE,  '2026-08-14T23:11:26.737Z', 3);
    """)


def downgrade() -> None:
    op.execute("DELETE FROM jobs;")
    op.execute("DELETE FROM contracts;")
    op.execute("DELETE FROM profiles;")
