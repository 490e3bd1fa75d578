import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _clear_throttle_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def operator(db):
    return get_user_model().objects.create_user(username='operator', password='P@ssw0rd1')


@pytest.fixture
def api_client(operator):
    client = APIClient()
    client.force_authenticate(user=operator)
    return client
