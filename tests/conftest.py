import os

# TestClient и URLconf оба обращаются к api.urls
os.environ.setdefault("NINJA_SKIP_REGISTRY", "yes")

import pytest
import factory
from factory.django import DjangoModelFactory
from ninja.testing import TestClient

from core.logging_config import set_level
from newsbundle.api import api
from news.models import Comment, CommentStatus, Post


# Фабрики
class PostFactory(DjangoModelFactory):
    class Meta:
        model = Post

    title = factory.Sequence(lambda n: f'Test Post {n}')
    abstract = factory.Faker('sentence')
    content = factory.Faker('paragraph')
    enabled = True
    comments_enabled = True
    comments_default_status = CommentStatus.PENDING


class CommentFactory(DjangoModelFactory):
    class Meta:
        model = Comment

    post = factory.SubFactory(PostFactory)
    name = factory.Faker('name')
    email = factory.Faker('email')
    content = factory.Faker('sentence')
    status = CommentStatus.APPROVED


# Фикстуры
@pytest.fixture
def api_client():
    """API клиент Django Ninja"""
    return TestClient(api)


@pytest.fixture
def post():
    return PostFactory()


@pytest.fixture
def closed_post():
    """Статья с выключенными комментариями"""
    return PostFactory(comments_enabled=False)


@pytest.fixture
def comment(post):
    return CommentFactory(post=post)


@pytest.fixture(autouse=True)
def enable_db_access_for_all_tests(db):
    """Разрешает доступ к БД для всех тестов"""
    pass


@pytest.fixture(autouse=True)
def news_settings(settings):
    settings.NEWS_MAILER = 'news.mailer.Mailer'
    settings.NEWS_NOTIFICATION_FROM = 'news@example.com'
    settings.NEWS_NOTIFICATION_RECIPIENTS = ['editors@example.com']
    settings.NEWS_MAX_PAGE_SIZE = 50
    return settings


@pytest.fixture(autouse=True)
def setup_logging():
    """Настройка логирования для тестов"""
    set_level()


class TestHelpers:
    @staticmethod
    def assert_response_ok(response, expected_status=200):
        assert response.status_code == expected_status, response.content
        return response.json()

    @staticmethod
    def assert_response_error(response, expected_status=400, code=None):
        assert response.status_code == expected_status, response.content
        data = response.json()
        assert 'detail' in data
        if code is not None:
            assert data['code'] == code
        return data


@pytest.fixture
def helpers():
    return TestHelpers
