"""
Shared constants for the image metadata function
"""

# Required environment variables
ENV_BUCKET_NAME = "OCI_BUCKETNAME"
ENV_SOURCE_REGION = "OCI_SOURCE_REGION"
ENV_TENANCY_NAME = "OCI_TENANCY_NAME"
ENV_ORACLE_USERNAME = "ORACLE_USERNAME"
ENV_ORACLE_PASSWORD = "ORACLE_PASSWORD"
ENV_ORACLE_SERVICENAME = "ORACLE_SERVICENAME"

# Optional environment variables
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_SERVICE_NAME = "POWERTOOLS_SERVICE_NAME"
ENV_STRICT_EVENT_DECODE = "STRICT_EVENT_DECODE"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SERVICE_NAME = "image-metadata"

# Object storage event types
ACTION_TYPE_CREATE = "com.oraclecloud.objectstorage.createobject"
ACTION_TYPE_UPDATE = "com.oraclecloud.objectstorage.updateobject"
ACTION_TYPE_DELETE = "com.oraclecloud.objectstorage.deleteobject"

ACTIONS = {
    ACTION_TYPE_CREATE: 'create',
    ACTION_TYPE_UPDATE: 'update',
    ACTION_TYPE_DELETE: 'delete',
}

# Public object URL
OBJECT_URL_TEMPLATE = "https://objectstorage.{region}.oraclecloud.com/n/{tenancy}/b/{bucket}/o/{object_name}"

# Image metadata
CREATE_DATE_UTC_OFFSET_HOURS = 9
CREATE_DATE_ZONE_NAME = "Asia/Tokyo"
CREATE_DATE_LOG_FORMAT = "%Y%m%d-%H%M"
DELETED_ACTIVE = 0

# Database
REDACTED_PASSWORD = "secret"
STATEMENT_TIMEOUT_SECONDS = 55
CONNECT_TIMEOUT_SECONDS = 20

INSERT_IMAGE_SQL = (
    "INSERT INTO IMAGES (id, ImageName, Detail, ImageURL, UserName, CREATE_DATE, DELETED) "
    "values (:1, :2, :3, :4, :5, :6, :7)"
)
