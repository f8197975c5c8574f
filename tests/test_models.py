from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from news.models import Comment, CommentStatus, Post


class PostModelTest(TestCase):
    def test_slug_from_title(self):
        post = Post.objects.create(title="Hello World Again")
        self.assertEqual(post.slug, "hello-world-again")
        self.assertEqual(str(post), "Hello World Again")

    def test_explicit_slug_kept(self):
        post = Post.objects.create(title="Hello", slug="custom")
        self.assertEqual(post.slug, "custom")

    def test_is_commentable(self):
        post = Post(title="Open", enabled=True, comments_enabled=True)
        self.assertTrue(post.is_commentable)

    def test_not_commentable_when_comments_disabled(self):
        post = Post(title="Closed", comments_enabled=False)
        self.assertFalse(post.is_commentable)

    def test_not_commentable_when_disabled(self):
        post = Post(title="Hidden", enabled=False)
        self.assertFalse(post.is_commentable)

    def test_comments_close_at(self):
        closed = Post(title="Old", comments_close_at=timezone.now() - timedelta(minutes=1))
        still_open = Post(title="New", comments_close_at=timezone.now() + timedelta(hours=1))
        self.assertFalse(closed.is_commentable)
        self.assertTrue(still_open.is_commentable)


class CommentModelTest(TestCase):
    def test_defaults(self):
        post = Post.objects.create(title="Post")
        comment = Comment.objects.create(post=post, content="Some content")

        self.assertEqual(comment.status, CommentStatus.PENDING)
        self.assertFalse(comment.is_approved)
        self.assertEqual(list(post.comments.all()), [comment])
        self.assertEqual(str(comment), "Comment by anonymous on Post")
