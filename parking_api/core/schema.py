"""
PostgreSQL DDL for the booking store.

The booking invariants live here rather than in application code:

* ``end_date_after_start_date`` rejects empty or inverted ranges.
* ``start_date_in_future`` is raised by an insert trigger, so a booking can
  still be edited after its original start has passed.
* ``bookings_overlap`` is a gist exclusion constraint over
  ``(parking_spot, [start_datetime, end_datetime))``. Concurrent writers that
  would overlap are serialized by the index and all but one are aborted.
* ``updated_at`` is stamped by a trigger on every update.

Each entry is a single statement, asyncpg prepares them one at a time.
"""
from typing import List

EMAIL_PATTERN = (
    "^[a-zA-Z0-9.!#$%&''*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    "(?:.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

UPGRADE_STATEMENTS: List[str] = [
    "CREATE EXTENSION IF NOT EXISTS citext",
    "CREATE EXTENSION IF NOT EXISTS btree_gist",
    f"""
    DO $$
    BEGIN
        IF NOT EXISTS (SELECT 1 FROM pg_type WHERE typname = 'role_type') THEN
            CREATE TYPE role_type AS ENUM ('standard', 'admin');
        END IF;
        IF NOT EXISTS (SELECT 1 FROM pg_type WHERE typname = 'email_type') THEN
            CREATE DOMAIN email_type AS citext CHECK ( value ~ '{EMAIL_PATTERN}' );
        END IF;
    END $$
    """,
    """
    CREATE TABLE IF NOT EXISTS users (
        id SERIAL PRIMARY KEY,
        first_name VARCHAR(30) NOT NULL,
        last_name VARCHAR(30) NOT NULL,
        email email_type UNIQUE NOT NULL,
        role role_type NOT NULL,
        api_token VARCHAR(32) UNIQUE NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS parking_spots (
        id SERIAL PRIMARY KEY,
        name VARCHAR(50) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS bookings (
        id SERIAL PRIMARY KEY,
        created_by INTEGER NOT NULL REFERENCES users,
        start_datetime TIMESTAMPTZ NOT NULL,
        end_datetime TIMESTAMPTZ NOT NULL,
        parking_spot INTEGER NOT NULL REFERENCES parking_spots,
        created_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMPTZ,
        CONSTRAINT end_date_after_start_date CHECK (end_datetime > start_datetime),
        CONSTRAINT bookings_overlap EXCLUDE USING gist (
            parking_spot WITH =,
            tstzrange(start_datetime, end_datetime, '[)') WITH &&
        )
    )
    """,
    """
    CREATE OR REPLACE FUNCTION reject_past_booking_start()
    RETURNS TRIGGER AS $$
    BEGIN
        IF NEW.start_datetime <= now() THEN
            RAISE EXCEPTION 'new row for relation "bookings" violates check constraint "start_date_in_future"'
                USING ERRCODE = 'check_violation',
                      CONSTRAINT = 'start_date_in_future',
                      TABLE = 'bookings';
        END IF;
        RETURN NEW;
    END;
    $$ LANGUAGE plpgsql
    """,
    "DROP TRIGGER IF EXISTS start_date_in_future_trigger ON bookings",
    """
    CREATE TRIGGER start_date_in_future_trigger
        BEFORE INSERT
        ON bookings
        FOR EACH ROW
        EXECUTE PROCEDURE reject_past_booking_start()
    """,
    """
    CREATE OR REPLACE FUNCTION set_timestamp_on_update()
    RETURNS TRIGGER AS $$
    BEGIN
        NEW.updated_at = now();
        RETURN NEW;
    END;
    $$ LANGUAGE plpgsql
    """,
    "DROP TRIGGER IF EXISTS set_timestamp_on_update_trigger ON bookings",
    """
    CREATE TRIGGER set_timestamp_on_update_trigger
        BEFORE UPDATE
        ON bookings
        FOR EACH ROW
        EXECUTE PROCEDURE set_timestamp_on_update()
    """,
    "CREATE INDEX IF NOT EXISTS bookings_id_idx ON bookings (id)",
    "CREATE INDEX IF NOT EXISTS users_id_idx ON users (id)",
    "CREATE INDEX IF NOT EXISTS parking_spots_id_idx ON parking_spots (id)",
]

DOWNGRADE_STATEMENTS: List[str] = [
    "DROP TABLE IF EXISTS bookings",
    "DROP FUNCTION IF EXISTS set_timestamp_on_update()",
    "DROP FUNCTION IF EXISTS reject_past_booking_start()",
    "DROP TABLE IF EXISTS parking_spots",
    "DROP TABLE IF EXISTS users",
    "DROP DOMAIN IF EXISTS email_type",
    "DROP TYPE IF EXISTS role_type",
    # btree_gist and citext are kept, other schemas may depend on them
]
