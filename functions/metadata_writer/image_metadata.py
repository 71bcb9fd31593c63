"""
Metadata Builder and URL Composer

Builds the IMAGES row for an object from its name and the bucket settings in
the environment. Nothing here touches the network.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Tuple

from config.constants import (
    CREATE_DATE_LOG_FORMAT,
    CREATE_DATE_UTC_OFFSET_HOURS,
    CREATE_DATE_ZONE_NAME,
    DELETED_ACTIVE,
    ENV_BUCKET_NAME,
    ENV_SOURCE_REGION,
    ENV_TENANCY_NAME,
    OBJECT_URL_TEMPLATE,
)
from functions.shared.env_utils import require_env

# Fixed offset, not a tz database lookup, so every host stamps the same zone
CREATE_DATE_ZONE = timezone(timedelta(hours=CREATE_DATE_UTC_OFFSET_HOURS), CREATE_DATE_ZONE_NAME)


@dataclass(frozen=True)
class ImageMetadata:
    id: str
    image_name: str
    detail: str
    image_url: str
    owner: str
    create_date: datetime
    deleted: int  # 0: active, 1: deleted

    def as_row(self) -> Tuple:
        """Values in IMAGES column order"""
        return (
            self.id,
            self.image_name,
            self.detail,
            self.image_url,
            self.owner,
            self.create_date,
            self.deleted,
        )


def get_image_url(image_name: str, logger=None) -> str:
    """
    Compose the public object storage URL for an object.

    The object name is used verbatim, without URL-encoding.

    Raises:
        MissingConfiguration: if the region, tenancy or bucket is not configured
    """
    region_name = require_env(ENV_SOURCE_REGION, logger)
    tenancy_name = require_env(ENV_TENANCY_NAME, logger)
    bucket_name = require_env(ENV_BUCKET_NAME, logger)

    url = OBJECT_URL_TEMPLATE.format(
        region=region_name,
        tenancy=tenancy_name,
        bucket=bucket_name,
        object_name=image_name,
    )

    if logger is not None:
        logger.info(f"Generated ImageURL:{url}")

    return url


def get_image_metadata(image_name: str, logger=None) -> ImageMetadata:
    """
    Build a new active metadata record for an object.

    Args:
        image_name: object name taken from the event
        logger: invocation logger

    Returns:
        ImageMetadata with a fresh UUID4 id and the current time in UTC+9

    Raises:
        MissingConfiguration: propagated from get_image_url
    """
    image_url = get_image_url(image_name, logger)

    image = ImageMetadata(
        id=str(uuid.uuid4()),
        image_name=image_name,
        detail="",
        image_url=image_url,
        owner="",
        create_date=datetime.now(CREATE_DATE_ZONE),
        deleted=DELETED_ACTIVE,
    )

    if logger is not None:
        logger.info(
            f"Generated ImageMetadata. ID:{image.id} ImageName:{image.image_name} "
            f"ImageURL:{image.image_url} CreateDate:{image.create_date.strftime(CREATE_DATE_LOG_FORMAT)}"
        )

    return image
