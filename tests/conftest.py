"""Shared fixtures for the bifrost test suite."""
import os

import boto3
import pytest
from moto import mock_aws

from bifrost import BridgeConfig
from tests.consts import TEST_ACCESS_KEY, TEST_BUCKET_NAME, TEST_FILE_SIZE, TEST_REGION, TEST_SECRET_KEY


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can ever reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)


@pytest.fixture
def mocked_aws(aws_credentials):
    """In-process S3 with the test bucket already created."""
    with mock_aws():
        s3_client = boto3.client("s3", region_name=TEST_REGION)
        s3_client.create_bucket(Bucket=TEST_BUCKET_NAME)
        yield s3_client


@pytest.fixture
def s3_config():
    return BridgeConfig(
        provider="s3",
        default_bucket=TEST_BUCKET_NAME,
        region=TEST_REGION,
        access_key=TEST_ACCESS_KEY,
        secret_key=TEST_SECRET_KEY,
    )


@pytest.fixture
def photo(tmp_path):
    """A local file of TEST_FILE_SIZE bytes."""
    path = tmp_path / "photo.png"
    path.write_bytes(os.urandom(TEST_FILE_SIZE))
    return str(path)
