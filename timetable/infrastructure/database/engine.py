"""Engine construction for the store adapter."""

from typing import Any

from sqlalchemy import Engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import NullPool
from sqlmodel import create_engine

from timetable.core.config import normalize_database_url


def build_engine(
    database_url: str,
    connect_timeout: int = 10,
    application_name: str = "timetable",
    echo: bool = False,
) -> Engine:
    """
    Create an engine that opens a fresh connection per checkout.

    NullPool closes each connection when it is returned, so no connection
    outlives the operation that opened it.

    Args:
        database_url: Backend URL; plain PostgreSQL URLs get the psycopg driver
        connect_timeout: Seconds to wait for a PostgreSQL connection
        application_name: Name reported to PostgreSQL
        echo: Log emitted SQL

    Returns:
        Configured engine
    """
    url = normalize_database_url(database_url)
    engine_kwargs: dict[str, Any] = {"poolclass": NullPool, "echo": echo}

    if make_url(url).get_backend_name() == "postgresql":
        engine_kwargs["connect_args"] = {
            "connect_timeout": connect_timeout,
            "application_name": application_name,
        }

    return create_engine(url, **engine_kwargs)
