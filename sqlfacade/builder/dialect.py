"""
Driver -> SQL builder profile.

DORIS speaks the MySQL protocol and dialect, so it shares the MYSQL profile.
The driver is validated when the request is accepted; reaching this module
with any other value is a programming error and raises ``InvariantViolation``
instead of a recoverable ``ValueError``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy.dialects import mysql, postgresql
from sqlalchemy.engine import Dialect
from sqlalchemy.sql.expression import ClauseElement

from sqlfacade.models import BuilderRequest, Driver

_log = logging.getLogger(__name__)


class InvariantViolation(AssertionError):
    """Unreachable state reached; not meant to be caught and recovered from."""

    pass


class DialectProfile(str, Enum):
    MYSQL = "mysql"
    POSTGRES = "postgres"


_DIALECTS: dict[DialectProfile, type[Dialect]] = {
    DialectProfile.MYSQL: mysql.dialect,
    DialectProfile.POSTGRES: postgresql.dialect,
}

_DRIVER_PROFILES: dict[Driver, DialectProfile] = {
    Driver.DRIVER_DORIS: DialectProfile.MYSQL,
    Driver.DRIVER_MYSQL: DialectProfile.MYSQL,
    Driver.DRIVER_POSTGRES: DialectProfile.POSTGRES,
}


@dataclass(frozen=True)
class Builder:
    """SQL builder bound to one dialect profile."""

    profile: DialectProfile
    dialect: Dialect

    def to_sql(self, statement: ClauseElement) -> str:
        """Compile a SQLAlchemy Core statement with literal values inlined."""
        compiled = statement.compile(
            dialect=self.dialect, compile_kwargs={"literal_binds": True}
        )
        return str(compiled)


def builder_for(profile: DialectProfile) -> Builder:
    return Builder(profile=profile, dialect=_DIALECTS[profile]())


def dialect(driver: Any) -> Builder:
    """Builder for *driver*; raises ``InvariantViolation`` for unsupported drivers."""
    profile = _DRIVER_PROFILES.get(driver) if isinstance(driver, Driver) else None
    if profile is None:
        _log.critical("Unsupported database driver reached the SQL builder: %r", driver)
        raise InvariantViolation(
            f"Unsupported database driver: {driver!r}; "
            f"expected one of {', '.join(d.value for d in _DRIVER_PROFILES)}"
        )
    return builder_for(profile)


def resolve_dialect(req: BuilderRequest) -> Builder:
    return dialect(req.driver)
