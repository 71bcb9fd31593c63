"""
Event Decoder

Turns the object storage notification delivered on the invocation's input
stream into a StorageEvent. Decoding never raises: fields that are missing or
of the wrong type fall back to empty values and the problem is reported as a
DecodeAnomaly next to the event.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from config.constants import ACTIONS
from functions.shared.errors import DecodeAnomaly


@dataclass(frozen=True)
class AdditionalDetails:
    namespace: str = ""
    public_access_type: str = ""
    etag: str = ""


@dataclass(frozen=True)
class EventData:
    compartment_id: str = ""
    compartment_name: str = ""
    resource_name: str = ""
    resource_id: str = ""
    availability_domain: str = ""
    department: str = ""
    cost_center: str = ""
    additional_details: AdditionalDetails = field(default_factory=AdditionalDetails)


@dataclass(frozen=True)
class StorageEvent:
    cloud_events_version: str = ""
    event_id: str = ""
    event_type: str = ""
    source: str = ""
    event_type_version: str = ""
    event_time: Optional[datetime] = None
    schema_url: Any = None
    content_type: str = ""
    compartment_id: str = ""
    data: EventData = field(default_factory=EventData)

    @property
    def resource_name(self) -> str:
        return self.data.resource_name

    @property
    def action(self) -> str:
        """create, update or delete; empty for event types this function does not know"""
        return ACTIONS.get(self.event_type, "")

    def to_dict(self) -> Dict[str, Any]:
        """Re-serialize to the wire shape the event arrived in"""
        details = self.data.additional_details
        return {
            'cloudEventsVersion': self.cloud_events_version,
            'eventID': self.event_id,
            'eventType': self.event_type,
            'source': self.source,
            'eventTypeVersion': self.event_type_version,
            'eventTime': self.event_time.isoformat() if self.event_time else None,
            'schemaURL': self.schema_url,
            'contentType': self.content_type,
            'extensions': {'compartmentId': self.compartment_id},
            'data': {
                'compartmentId': self.data.compartment_id,
                'compartmentName': self.data.compartment_name,
                'resourceName': self.data.resource_name,
                'resourceId': self.data.resource_id,
                'availabilityDomain': self.data.availability_domain,
                'freeFormTags': {'Department': self.data.department},
                'definedTags': {'Operations': {'CostCenter': self.data.cost_center}},
                'additionalDetails': {
                    'namespace': details.namespace,
                    'publicAccessType': details.public_access_type,
                    'eTag': details.etag,
                },
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def decode_event(stream, logger=None) -> Tuple[StorageEvent, Optional[DecodeAnomaly]]:
    """
    Decode one JSON event from the input stream.

    Args:
        stream: file-like object, bytes, str or None
        logger: invocation logger

    Returns:
        (event, anomaly) where anomaly is None when the input decoded cleanly
    """
    problems: List[str] = []

    payload = _load_json(stream, problems)
    event = _build_event(payload, problems)

    # Diagnostic dump of what was actually understood
    print(event.to_json())

    anomaly = DecodeAnomaly("; ".join(problems)) if problems else None
    if anomaly is not None and logger is not None:
        logger.warning(str(anomaly))

    return event, anomaly


def _load_json(stream, problems: List[str]) -> Dict[str, Any]:
    if stream is None:
        problems.append("no input")
        return {}

    raw = stream.read() if hasattr(stream, 'read') else stream
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            problems.append(f"input is not utf-8: {e}")
            return {}

    if not raw or not raw.strip():
        problems.append("empty input")
        return {}

    # Only the first JSON value is the event; anything after it is ignored
    text = raw.lstrip()
    try:
        payload, end = json.JSONDecoder().raw_decode(text)
    except ValueError as e:
        problems.append(f"invalid JSON: {e}")
        return {}
    except RecursionError:
        problems.append("invalid JSON: nested too deeply")
        return {}

    if text[end:].strip():
        problems.append(f"unexpected data after the event at offset {end}")

    if not isinstance(payload, dict):
        problems.append(f"expected a JSON object, got {type(payload).__name__}")
        return {}

    return payload


def _build_event(payload: Dict[str, Any], problems: List[str]) -> StorageEvent:
    extensions = _obj(payload, 'extensions', problems)
    data = _obj(payload, 'data', problems)
    details = _obj(data, 'additionalDetails', problems)
    free_form_tags = _obj(data, 'freeFormTags', problems)
    defined_tags = _obj(data, 'definedTags', problems)
    operations = _obj(defined_tags, 'Operations', problems)

    return StorageEvent(
        cloud_events_version=_str(payload, 'cloudEventsVersion', problems),
        event_id=_str(payload, 'eventID', problems),
        event_type=_str(payload, 'eventType', problems),
        source=_str(payload, 'source', problems),
        event_type_version=_str(payload, 'eventTypeVersion', problems),
        event_time=_time(payload, 'eventTime', problems),
        schema_url=payload.get('schemaURL'),
        content_type=_str(payload, 'contentType', problems),
        compartment_id=_str(extensions, 'compartmentId', problems),
        data=EventData(
            compartment_id=_str(data, 'compartmentId', problems),
            compartment_name=_str(data, 'compartmentName', problems),
            resource_name=_str(data, 'resourceName', problems),
            resource_id=_str(data, 'resourceId', problems),
            availability_domain=_str(data, 'availabilityDomain', problems),
            department=_str(free_form_tags, 'Department', problems),
            cost_center=_str(operations, 'CostCenter', problems),
            additional_details=AdditionalDetails(
                namespace=_str(details, 'namespace', problems),
                public_access_type=_str(details, 'publicAccessType', problems),
                etag=_str(details, 'eTag', problems),
            ),
        ),
    )


def _obj(parent: Dict[str, Any], key: str, problems: List[str]) -> Dict[str, Any]:
    value = parent.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        problems.append(f"field {key} is not an object")
        return {}
    return value


def _str(parent: Dict[str, Any], key: str, problems: List[str]) -> str:
    value = parent.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        problems.append(f"field {key} is not a string")
        return ""
    return value


def _time(parent: Dict[str, Any], key: str, problems: List[str]) -> Optional[datetime]:
    value = parent.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        problems.append(f"field {key} is not a string")
        return None
    try:
        # fromisoformat only accepts a trailing Z from 3.11 on
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        problems.append(f"field {key} is not an RFC 3339 timestamp: {value}")
        return None
