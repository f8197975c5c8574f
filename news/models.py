from django.core.validators import MinLengthValidator
from django.db import models
from django.utils import timezone
from django.utils.text import slugify
from django.utils.translation import gettext_lazy as _


class CommentStatus(models.TextChoices):
    PENDING = 'pending', _('Pending')
    APPROVED = 'approved', _('Approved')
    SPAM = 'spam', _('Spam')


class Post(models.Model):
    """
    Модель статьи
    """

    title = models.CharField(_('title'), max_length=255)
    slug = models.SlugField(_('slug'), max_length=255, blank=True)
    abstract = models.TextField(_('abstract'), blank=True)
    content = models.TextField(_('content'), blank=True)

    enabled = models.BooleanField(_('enabled'), default=True)
    publication_date = models.DateTimeField(
        _('publication date'),
        default=timezone.now,
        db_index=True
    )

    # Комментарии
    comments_enabled = models.BooleanField(_('comments enabled'), default=True)
    comments_close_at = models.DateTimeField(
        _('comments close at'),
        blank=True,
        null=True
    )
    comments_default_status = models.CharField(
        _('comments default status'),
        max_length=20,
        choices=CommentStatus.choices,
        default=CommentStatus.PENDING
    )
    comments_count = models.PositiveIntegerField(
        _('comments count'),
        default=0,
        editable=False
    )

    created_at = models.DateTimeField(_('created at'), auto_now_add=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    class Meta:
        verbose_name = _('post')
        verbose_name_plural = _('posts')
        ordering = ['-publication_date']
        indexes = [
            models.Index(fields=['enabled', 'publication_date'], name='news_post_enabled_pubdate_idx'),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.title)[:255]
        super().save(*args, **kwargs)

    @property
    def is_commentable(self) -> bool:
        """
        Комментарии принимаются только для включённой статьи с включёнными
        комментариями, пока не наступила дата comments_close_at
        """
        if not self.comments_enabled or not self.enabled:
            return False
        if self.comments_close_at is not None:
            return self.comments_close_at > timezone.now()
        return True


class Comment(models.Model):
    """
    Модель комментария к статье
    """

    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name='comments',
        verbose_name=_('post')
    )

    name = models.CharField(_('name'), max_length=255, blank=True)
    email = models.EmailField(_('email'), blank=True)
    url = models.URLField(_('url'), blank=True)
    content = models.TextField(
        _('content'),
        validators=[
            MinLengthValidator(3, message=_('Comment must be at least 3 characters long.'))
        ]
    )

    status = models.CharField(
        _('status'),
        max_length=20,
        choices=CommentStatus.choices,
        default=CommentStatus.PENDING,
        db_index=True
    )

    created_at = models.DateTimeField(_('created at'), auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    class Meta:
        verbose_name = _('comment')
        verbose_name_plural = _('comments')
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['post', 'status', 'created_at'], name='news_comment_post_status_idx'),
        ]

    def __str__(self):
        return f"Comment by {self.name or 'anonymous'} on {self.post.title}"

    @property
    def is_approved(self) -> bool:
        return self.status == CommentStatus.APPROVED
