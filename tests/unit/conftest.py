"""
Shared fixtures for the image metadata function tests
"""

import json

import pytest

from config.constants import (
    ENV_BUCKET_NAME,
    ENV_ORACLE_PASSWORD,
    ENV_ORACLE_SERVICENAME,
    ENV_ORACLE_USERNAME,
    ENV_SOURCE_REGION,
    ENV_STRICT_EVENT_DECODE,
    ENV_TENANCY_NAME,
)

ALL_ENV = [
    ENV_BUCKET_NAME,
    ENV_SOURCE_REGION,
    ENV_TENANCY_NAME,
    ENV_ORACLE_USERNAME,
    ENV_ORACLE_PASSWORD,
    ENV_ORACLE_SERVICENAME,
    ENV_STRICT_EVENT_DECODE,
]


@pytest.fixture
def clean_env(monkeypatch):
    """No function configuration at all"""
    for name in ALL_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def bucket_env(clean_env):
    clean_env.setenv(ENV_SOURCE_REGION, 'us-ashburn-1')
    clean_env.setenv(ENV_TENANCY_NAME, 'acme')
    clean_env.setenv(ENV_BUCKET_NAME, 'images')
    return clean_env


@pytest.fixture
def oracle_env(clean_env):
    clean_env.setenv(ENV_ORACLE_USERNAME, 'admin')
    clean_env.setenv(ENV_ORACLE_PASSWORD, 'Sup3r-S3cret')
    clean_env.setenv(ENV_ORACLE_SERVICENAME, 'imagesdb_high')
    return clean_env


@pytest.fixture
def full_env(bucket_env, oracle_env):
    return bucket_env


@pytest.fixture
def sample_event():
    return {
        'cloudEventsVersion': '0.1',
        'eventID': 'unique-id-1234',
        'eventType': 'com.oraclecloud.objectstorage.createobject',
        'source': 'objectstorage',
        'eventTypeVersion': '1.0',
        'eventTime': '2019-01-10T21:19:24.000Z',
        'schemaURL': None,
        'contentType': 'application/json',
        'extensions': {'compartmentId': 'ocid1.compartment.oc1..example'},
        'data': {
            'compartmentId': 'ocid1.compartment.oc1..example',
            'compartmentName': 'example_name',
            'resourceName': 'photo1.png',
            'resourceId': '/n/acme/b/images/o/photo1.png',
            'availabilityDomain': 'all',
            'freeFormTags': {'Department': 'Finance'},
            'definedTags': {'Operations': {'CostCenter': '42'}},
            'additionalDetails': {
                'namespace': 'acme',
                'publicAccessType': 'ObjectRead',
                'eTag': 'f8ffb6e9-f602-460f-a6c0-00b5abfa24c7',
            },
        },
    }


@pytest.fixture
def sample_event_bytes(sample_event):
    return json.dumps(sample_event).encode('utf-8')
