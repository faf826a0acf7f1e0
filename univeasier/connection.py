"""Opening the MySQL connection described by the configuration."""

import logging

import pymysql

logger = logging.getLogger(__name__)

_DRIVER = "mysql"


def connection_params(db_config):
    """Keyword arguments for pymysql.connect built from the database settings."""
    params = {
        "user": db_config.username,
        "password": db_config.password,
        "database": db_config.name,
    }
    if db_config.protocol == "unix":
        params["unix_socket"] = db_config.host
        return params
    params["host"] = db_config.host
    if db_config.port:
        try:
            params["port"] = int(db_config.port)
        except ValueError:
            raise ValueError(f"invalid database port: {db_config.port!r}") from None
    return params


def connection_string(db_config):
    """Data source name of the database settings."""
    return (
        f"{db_config.username}:{db_config.password}@{db_config.protocol}"
        f"({db_config.host}:{db_config.port})/{db_config.name}?parseTime=true"
    )


def init_connection(config):
    """Open and check a database connection; raise if either step fails."""
    db_config = config.db
    if db_config is None:
        raise ValueError("the configuration has no database section")
    if db_config.driver != _DRIVER:
        error = ValueError(f"sql: unknown driver {db_config.driver!r}")
        logger.error("Database connection failed info=%s", error)
        raise error
    try:
        conn = pymysql.connect(**connection_params(db_config))
    except Exception as exc:
        logger.error("Database connection failed info=%s", exc)
        raise
    try:
        conn.ping(reconnect=False)
    except Exception as exc:
        logger.error("Database ping failed info=%s", exc)
        conn.close()
        raise
    return conn