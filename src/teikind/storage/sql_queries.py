"""
sql_queries.py
--------------

Centralized SQL for the project tables in the `chain` schema.

All statements are defined as constants and executed by `schema.py`
(idempotent setup) and `postgres.py` (inserts). Every setup statement is
guarded so it can run on each process start.
"""

from teikind.core.models import ProjectStatus

PROJECT_STATUS_LITERALS = ", ".join(f"'{s.value}'" for s in ProjectStatus)


# =====================================================================
# SCHEMA SETUP
# =====================================================================

CREATE_PROJECT_STATUS_TYPE = f"""
DO $$ BEGIN
  IF to_regtype('chain.project_status') IS NULL THEN
    CREATE TYPE chain.project_status AS ENUM ({PROJECT_STATUS_LITERALS});
  END IF;
END $$
"""

CREATE_PROJECT_TABLE = """
CREATE TABLE IF NOT EXISTS chain.project (
  id bigint PRIMARY KEY REFERENCES chain.output (id) ON DELETE CASCADE,
  project_id varchar(64) NOT NULL,
  owner_address text NOT NULL,
  status chain.project_status NOT NULL,
  status_time timestamptz,
  milestone_reached smallint NOT NULL,
  is_staking_delegation_managed_by_protocol boolean NOT NULL
)
"""

CREATE_PROJECT_PID_INDEX = """
CREATE INDEX IF NOT EXISTS project_pid_index
  ON chain.project(project_id)
"""

CREATE_PROJECT_STATUS_INDEX = """
CREATE INDEX IF NOT EXISTS project_status_index
  ON chain.project(status)
"""

CREATE_PROJECT_DETAIL_TABLE = """
CREATE TABLE IF NOT EXISTS chain.project_detail (
  id bigint PRIMARY KEY REFERENCES chain.output (id) ON DELETE CASCADE,
  project_id varchar(64) NOT NULL,
  withdrawn_funds bigint NOT NULL,
  sponsorship_amount bigint,
  sponsorship_until timestamptz,
  information_cid text NOT NULL,
  last_announcement_cid text
)
"""

CREATE_PROJECT_DETAIL_PID_INDEX = """
CREATE INDEX IF NOT EXISTS project_detail_pid_index
  ON chain.project_detail(project_id)
"""

CREATE_PROJECT_DETAIL_INFORMATION_CID_INDEX = """
CREATE INDEX IF NOT EXISTS project_detail_information_cid_index
  ON chain.project_detail(information_cid)
"""

CREATE_PROJECT_SCRIPT_TABLE = """
CREATE TABLE IF NOT EXISTS chain.project_script (
  id bigint PRIMARY KEY REFERENCES chain.output (id) ON DELETE CASCADE,
  project_id varchar(64) NOT NULL,
  staking_key_deposit bigint NOT NULL,
  staking_script_hash varchar(56) NOT NULL
)
"""

CREATE_PROJECT_SCRIPT_PID_INDEX = """
CREATE INDEX IF NOT EXISTS project_script_pid_index
  ON chain.project_script(project_id)
"""

SETUP_STATEMENTS: tuple[str, ...] = (
    CREATE_PROJECT_STATUS_TYPE,
    CREATE_PROJECT_TABLE,
    CREATE_PROJECT_PID_INDEX,
    CREATE_PROJECT_STATUS_INDEX,
    CREATE_PROJECT_DETAIL_TABLE,
    CREATE_PROJECT_DETAIL_PID_INDEX,
    CREATE_PROJECT_DETAIL_INFORMATION_CID_INDEX,
    CREATE_PROJECT_SCRIPT_TABLE,
    CREATE_PROJECT_SCRIPT_PID_INDEX,
)


# =====================================================================
# INSERTS
# =====================================================================

INSERT_PROJECT = """
INSERT INTO chain.project (
  id, project_id, owner_address, status, status_time,
  milestone_reached, is_staking_delegation_managed_by_protocol
)
VALUES (%s, %s, %s, %s::chain.project_status, %s, %s, %s)
"""

INSERT_PROJECT_DETAIL = """
INSERT INTO chain.project_detail (
  id, project_id, withdrawn_funds, sponsorship_amount, sponsorship_until,
  information_cid, last_announcement_cid
)
VALUES (%s, %s, %s, %s, %s, %s, %s)
"""

INSERT_PROJECT_SCRIPT = """
INSERT INTO chain.project_script (
  id, project_id, staking_key_deposit, staking_script_hash
)
VALUES (%s, %s, %s, %s)
"""
