"""
Уведомления о новых комментариях
"""
from typing import List, Optional

import structlog
from django.core.mail import send_mail
from django.template.loader import render_to_string

from .conf import get_setting
from .models import Comment

logger = structlog.get_logger(__name__)


class Mailer:
    """Отправляет письмо-уведомление о новом комментарии"""

    template_name = 'news/emails/comment_notification.txt'

    def __init__(self, from_email: Optional[str] = None, recipients: Optional[List[str]] = None):
        self.from_email = from_email or get_setting('NEWS_NOTIFICATION_FROM')
        if recipients is None:
            recipients = get_setting('NEWS_NOTIFICATION_RECIPIENTS')
        self.recipients = list(recipients)

    def send_comment_notification(self, comment: Comment) -> int:
        if not self.recipients:
            logger.warning("comment_notification_skipped", comment_id=comment.id, reason="no recipients")
            return 0

        subject = f"New comment on \"{comment.post.title}\""
        message = render_to_string(self.template_name, {
            'comment': comment,
            'post': comment.post,
        })

        sent = send_mail(
            subject=subject,
            message=message,
            from_email=self.from_email,
            recipient_list=self.recipients,
            fail_silently=False,
        )

        logger.info(
            "comment_notification_sent",
            comment_id=comment.id,
            post_id=comment.post_id,
            recipients=len(self.recipients),
        )
        return sent
