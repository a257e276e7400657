"""Pytest configuration and fixtures"""

import json

import httpx
import pytest
from unittest.mock import Mock

from seidl.models.image import Image
from seidl.services.cloudinfo_client import CloudInfoClient
from seidl.services.image_service import ImageService


@pytest.fixture
def sample_images():
    """Active images from several providers and regions"""
    return [
        Image(name="suse-sles-15-sp2-v20200603", id="ami-0001", region="us-east-1", state="active"),
        Image(name="suse-sles-15-sp2-sapcal-v20200603", id="ami-0002", region="eu-west-1", state="active"),
        Image(name="suse-sles-12-sp5-v20200101", id="ami-0003", region="us-east-1", state="inactive"),
        Image(name="openSUSE-Leap-15-2-v20200702", id="ami-0004", region="us-east-1", state="active"),
    ]


@pytest.fixture
def images_payload():
    """An images.json payload including deprecated and deleted images"""
    return {
        "images": [
            {
                "name": "suse-sles-15-sp2-v20200603",
                "project": "suse-cloud",
                "state": "active",
                "urn": "SUSE:sles-15-sp2:gen1:2020.06.03",
                "id": "ami-0001",
                "region": "us-east-1",
                "publishedon": "20200603",
                "deprecatedon": "",
                "deletedon": "",
                "changeinfo": "https://publiccloudimagechangeinfo.suse.com/google/sles-15-sp2/",
            },
            {
                "name": "suse-sles-12-sp5-v20200101",
                "project": "suse-cloud",
                "state": "active",
                "id": "ami-0003",
                "region": "eu-west-1",
                "deprecatedon": "",
                "deletedon": "",
            },
            {
                "name": "suse-sles-15-sp1-v20190101",
                "project": "suse-cloud",
                "state": "deprecated",
                "deprecatedon": "20200601",
                "deletedon": "",
            },
            {
                "name": "suse-sles-15-v20180101",
                "project": "suse-cloud",
                "state": "deleted",
                "deprecatedon": "20190101",
                "deletedon": "20190801",
            },
        ]
    }


@pytest.fixture
def regions_payload():
    """A regions.json payload"""
    return {"regions": [{"name": "us-east-1"}, {"name": "eu-west-1"}]}


def make_transport(routes: dict) -> httpx.MockTransport:
    """Build a mock transport answering JSON for known paths and 404 otherwise"""
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path in routes:
            body = routes[request.url.path]
            if isinstance(body, (bytes, str)):
                return httpx.Response(200, content=body)
            return httpx.Response(200, content=json.dumps(body))
        return httpx.Response(404)
    return httpx.MockTransport(handler)


@pytest.fixture
def client_factory():
    """Create CloudInfoClients backed by a mock transport"""
    clients = []

    def factory(routes: dict) -> CloudInfoClient:
        client = CloudInfoClient("https://cloudinfo.test", transport=make_transport(routes))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def mock_image_service(sample_images):
    """Create a mock image service"""
    service = Mock(spec=ImageService)
    service.get_images.return_value = list(sample_images)
    return service
