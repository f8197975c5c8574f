import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Post',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, verbose_name='title')),
                ('slug', models.SlugField(blank=True, max_length=255, verbose_name='slug')),
                ('abstract', models.TextField(blank=True, verbose_name='abstract')),
                ('content', models.TextField(blank=True, verbose_name='content')),
                ('enabled', models.BooleanField(default=True, verbose_name='enabled')),
                ('publication_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='publication date')),
                ('comments_enabled', models.BooleanField(default=True, verbose_name='comments enabled')),
                ('comments_close_at', models.DateTimeField(blank=True, null=True, verbose_name='comments close at')),
                ('comments_default_status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('spam', 'Spam')], default='pending', max_length=20, verbose_name='comments default status')),
                ('comments_count', models.PositiveIntegerField(default=0, editable=False, verbose_name='comments count')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
            ],
            options={
                'verbose_name': 'post',
                'verbose_name_plural': 'posts',
                'ordering': ['-publication_date'],
                'indexes': [models.Index(fields=['enabled', 'publication_date'], name='news_post_enabled_pubdate_idx')],
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, max_length=255, verbose_name='name')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='email')),
                ('url', models.URLField(blank=True, verbose_name='url')),
                ('content', models.TextField(validators=[django.core.validators.MinLengthValidator(3, message='Comment must be at least 3 characters long.')], verbose_name='content')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('spam', 'Spam')], db_index=True, default='pending', max_length=20, verbose_name='status')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('post', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='news.post', verbose_name='post')),
            ],
            options={
                'verbose_name': 'comment',
                'verbose_name_plural': 'comments',
                'ordering': ['created_at', 'id'],
                'indexes': [models.Index(fields=['post', 'status', 'created_at'], name='news_comment_post_status_idx')],
            },
        ),
    ]
