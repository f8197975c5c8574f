import pytest

from core.exceptions import PostNotCommentable, PostNotFound
from core.results import Found, Invalid, NotFound, Validated
from news.models import Comment, CommentStatus
from news.services import CommentService, PostService, get_comment_manager, get_mailer
from news.mailer import Mailer
from tests.conftest import CommentFactory, PostFactory


class StubMailer:
    def send_comment_notification(self, comment):
        return 0


class FailingMailer:
    def send_comment_notification(self, comment):
        raise ConnectionError("SMTP unavailable")


class TestPostService:

    def test_find_post(self, post):
        result = PostService.find_post(post.id)

        assert isinstance(result, Found)
        assert result.value == post

    def test_find_post_missing(self):
        result = PostService.find_post(404)

        assert isinstance(result, NotFound)
        assert result.message == "Post (404) not found"

    def test_get_post_missing_raises(self):
        with pytest.raises(PostNotFound) as exc_info:
            PostService.get_post(7)

        assert exc_info.value.status_code == 404
        assert exc_info.value.post_id == 7

    def test_list_posts_at_most_count(self):
        PostFactory.create_batch(7)

        assert len(PostService.list_posts(page=1, count=3)) == 3
        assert len(PostService.list_posts(page=3, count=3)) == 1
        assert PostService.list_posts(page=4, count=3) == []

    def test_list_posts_default_count(self, settings):
        settings.NEWS_DEFAULT_PAGE_SIZE = 2
        PostFactory.create_batch(3)

        assert len(PostService.list_posts()) == 2

    def test_list_post_comments(self, post):
        comments = CommentFactory.create_batch(2, post=post)

        assert list(PostService.list_post_comments(post.id)) == comments

    def test_list_post_comments_missing(self):
        with pytest.raises(PostNotFound):
            PostService.list_post_comments(123)


class TestCommentService:

    def test_create_post_comment(self, mailoutbox):
        post = PostFactory(id=42, comments_default_status=CommentStatus.PENDING)

        result = CommentService.create_post_comment(42, {"content": "hello"})

        assert isinstance(result, Validated)
        comment = result.value
        assert comment.pk is not None
        assert comment.post_id == 42
        assert comment.status == CommentStatus.PENDING
        assert Comment.objects.filter(post=post).count() == 1
        assert len(mailoutbox) == 1
        assert "hello" in mailoutbox[0].body

    def test_create_post_comment_invalid(self, post, mailoutbox):
        result = CommentService.create_post_comment(post.id, {"content": ""})

        assert isinstance(result, Invalid)
        assert result.fields == ["content"]
        assert Comment.objects.count() == 0
        assert mailoutbox == []

    def test_create_post_comment_rejects_structured_value(self, post, mailoutbox):
        result = CommentService.create_post_comment(post.id, {"content": {"a": 1}})

        assert isinstance(result, Invalid)
        assert result.errors["content"][0]["code"] == "invalid"
        assert Comment.objects.count() == 0
        assert mailoutbox == []

    def test_create_post_comment_not_commentable(self, closed_post, mailoutbox):
        with pytest.raises(PostNotCommentable) as exc_info:
            CommentService.create_post_comment(closed_post.id, {"content": "hello"})

        assert exc_info.value.status_code == 403
        assert Comment.objects.count() == 0
        assert mailoutbox == []

    def test_create_post_comment_missing_post(self, mailoutbox):
        with pytest.raises(PostNotFound):
            CommentService.create_post_comment(999, {"content": "hello"})

        assert mailoutbox == []

    def test_mailer_failure_propagates_after_save(self, post, settings):
        settings.NEWS_MAILER = 'tests.test_services.FailingMailer'

        with pytest.raises(ConnectionError):
            CommentService.create_post_comment(post.id, {"content": "hello"})

        assert Comment.objects.filter(post=post).count() == 1


class TestCollaborators:

    def test_get_mailer_default(self):
        assert isinstance(get_mailer(), Mailer)

    def test_get_mailer_from_settings(self, settings):
        settings.NEWS_MAILER = "tests.test_services.StubMailer"

        assert isinstance(get_mailer(), StubMailer)

    def test_comment_manager_wired_to_post_manager(self):
        manager = get_comment_manager()

        assert manager.get_class() is Comment
        assert manager.post_manager is not None
