"""
Persistence Writer

Inserts one ImageMetadata row into the IMAGES table. The connection lives for
exactly one insert and is closed on every path.
"""

from dataclasses import dataclass

import oracledb

from config.constants import (
    CONNECT_TIMEOUT_SECONDS,
    ENV_ORACLE_PASSWORD,
    ENV_ORACLE_SERVICENAME,
    ENV_ORACLE_USERNAME,
    INSERT_IMAGE_SQL,
    REDACTED_PASSWORD,
    STATEMENT_TIMEOUT_SECONDS,
)
from functions.shared.env_utils import require_env
from functions.shared.errors import StorageError


@dataclass(frozen=True)
class ConnectString:
    """
    Oracle connect string in user/password@service form.

    `dsn` carries the real password and is only handed to the driver;
    `redacted` is the loggable copy.
    """
    dsn: str
    redacted: str

    def __repr__(self):
        return f"ConnectString({self.redacted!r})"

    __str__ = __repr__


def get_dsn(logger=None) -> ConnectString:
    """
    Build the connect string from the environment.

    Raises:
        MissingConfiguration: if the username, password or service name is not configured
    """
    username = require_env(ENV_ORACLE_USERNAME, logger)
    password = require_env(ENV_ORACLE_PASSWORD, logger)
    service_name = require_env(ENV_ORACLE_SERVICENAME, logger)

    connect = ConnectString(
        dsn=f"{username}/{password}@{service_name}",
        redacted=f"{username}/{REDACTED_PASSWORD}@{service_name}",
    )

    if logger is not None:
        logger.info(f"Generated connect:{connect.redacted}")

    return connect


def save_image_metadata(image, logger=None) -> None:
    """
    Persist one metadata record.

    No connection is attempted when the connect string cannot be built.

    Raises:
        MissingConfiguration: from get_dsn
        StorageError: if the connection cannot be opened or the insert fails
    """
    connect = get_dsn(logger)

    try:
        connection = oracledb.connect(dsn=connect.dsn, tcp_connect_timeout=CONNECT_TIMEOUT_SECONDS)
    except oracledb.Error as e:
        err = StorageError(f"could not connect to {connect.redacted}: {e}")
        if logger is not None:
            logger.error(str(err))
        raise err from e

    with connection:
        insert_metadata(connection, image, logger)


def insert_metadata(connection, image, logger=None) -> None:
    """
    Execute the IMAGES insert on an open connection and commit it.

    The statement runs under a call timeout of STATEMENT_TIMEOUT_SECONDS.

    Raises:
        StorageError: if the statement or commit fails or times out
    """
    connection.call_timeout = STATEMENT_TIMEOUT_SECONDS * 1000
    try:
        with connection.cursor() as cursor:
            cursor.execute(INSERT_IMAGE_SQL, list(image.as_row()))
        connection.commit()
    except oracledb.Error as e:
        err = StorageError(f"could not insert metadata for image {image.id}: {e}")
        if logger is not None:
            logger.error(str(err))
        raise err from e

    if logger is not None:
        logger.info("Successful. Insert Metadata", extra={'image_id': image.id})
