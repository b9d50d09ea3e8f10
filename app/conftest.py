"""Pytest 配置文件"""

import pytest

from libs.http_client.codec import JsonCodec
from libs.http_client.pipeline import JsonHttpPipeline


@pytest.fixture
def codec():
    return JsonCodec()


@pytest.fixture
def pipeline(codec):
    return JsonHttpPipeline(codec)
