"""Unit tests for builder.dialect (driver -> SQLAlchemy dialect profile)."""

import pytest
from sqlalchemy import Integer, String, column, select, table

from sqlfacade.builder import DialectProfile, InvariantViolation, dialect, resolve_dialect
from sqlfacade.models import BuilderRequest, Driver

users = table(
    "users",
    column("id", Integer),
    column("name", String),
    column("status", String),
)


def _query():
    return (
        select(users.c.id, users.c.name)
        .where(users.c.id > 5)
        .where(users.c.status == "active")
        .order_by(users.c.name)
        .limit(10)
    )


class TestDialect:
    def test_mysql_profile(self):
        b = dialect(Driver.DRIVER_MYSQL)
        assert b.profile == DialectProfile.MYSQL
        assert b.dialect.name == "mysql"

    def test_doris_uses_mysql_profile(self):
        b = dialect(Driver.DRIVER_DORIS)
        assert b.profile == DialectProfile.MYSQL
        assert b.dialect.name == "mysql"

    def test_postgres_profile(self):
        b = dialect(Driver.DRIVER_POSTGRES)
        assert b.profile == DialectProfile.POSTGRES
        assert b.dialect.name == "postgresql"

    def test_mysql_and_doris_generate_identical_sql(self):
        mysql_sql = dialect(Driver.DRIVER_MYSQL).to_sql(_query())
        doris_sql = dialect(Driver.DRIVER_DORIS).to_sql(_query())
        assert mysql_sql == doris_sql
        assert "LIMIT 10" in mysql_sql
        assert "'active'" in mysql_sql

    def test_resolve_from_request(self):
        req = BuilderRequest(driver=Driver.DRIVER_POSTGRES)
        assert resolve_dialect(req).profile == DialectProfile.POSTGRES


class TestDialectInvariant:
    def test_unspecified_driver_aborts(self):
        with pytest.raises(InvariantViolation, match="Unsupported database driver"):
            dialect(Driver.DRIVER_UNSPECIFIED)

    def test_unknown_value_aborts(self):
        with pytest.raises(InvariantViolation):
            dialect("sqlite")

    def test_not_a_value_error(self):
        # Must not be swallowed by handlers for invalid user input.
        with pytest.raises(InvariantViolation) as exc:
            resolve_dialect(BuilderRequest())
        assert not isinstance(exc.value, ValueError)

    @pytest.mark.parametrize("driver", [["DRIVER_MYSQL"], {}, None, 3])
    def test_non_driver_value_aborts(self, driver):
        with pytest.raises(InvariantViolation, match="Unsupported database driver"):
            dialect(driver)
