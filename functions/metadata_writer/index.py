"""
Image Metadata Writer

Triggered by an object storage event rule.
- Decodes the create/update/delete notification
- Builds the IMAGES record and the object's public URL
- Inserts the record into the Oracle database
- Logs and returns on any failure; nothing is retried
"""

import io
from enum import Enum

from fdk import response

from config.constants import ENV_STRICT_EVENT_DECODE
from functions.metadata_writer.events import decode_event
from functions.metadata_writer.image_metadata import get_image_metadata
from functions.metadata_writer.persistence import save_image_metadata
from functions.shared.env_utils import get_bool
from functions.shared.errors import ImageMetadataError
from functions.shared.log_utils import invocation_logger


class InvocationState(str, Enum):
    START = 'START'
    DECODED = 'DECODED'
    METADATA_BUILT = 'METADATA_BUILT'
    PERSISTED = 'PERSISTED'
    DONE = 'DONE'
    ABORTED = 'ABORTED'


def handler(ctx, data: io.BytesIO = None):
    """
    Main handler for the Image Metadata Writer function

    Args:
        ctx: invocation context from the function platform
        data: raw event body

    Returns:
        Empty response; the outcome is only visible in the logs
    """
    with invocation_logger() as logger:
        state = run(data, logger)
        logger.info(f"Invocation finished: {state.value}")

    return response.Response(
        ctx,
        response_data="",
        headers={"Content-Type": "application/json"},
    )


def run(stream, logger) -> InvocationState:
    """
    Drive one event through decode, build and persist.

    Returns:
        DONE when the row was inserted, ABORTED otherwise
    """
    state = InvocationState.START
    try:
        event, anomaly = decode_event(stream, logger)
        if anomaly is not None and get_bool(ENV_STRICT_EVENT_DECODE):
            raise anomaly
        state = InvocationState.DECODED
        logger.info(
            "Decoded event",
            extra={
                'event_id': event.event_id,
                'event_type': event.event_type,
                'action': event.action,
                'resource_name': event.resource_name,
            },
        )

        image = get_image_metadata(event.resource_name, logger)
        state = InvocationState.METADATA_BUILT

        save_image_metadata(image, logger)
        state = InvocationState.PERSISTED
    except ImageMetadataError as e:
        logger.error(f"Aborted in state {state.value}: {e}")
        return InvocationState.ABORTED

    return InvocationState.DONE
