# models.py
from django.db import models
from django.utils.text import slugify


class Option(models.Model):
    """
    A single stored site setting, addressed by name.
    For example, 'page_on_front' holding the ID of the static front page.
    """
    name = models.CharField(max_length=191, unique=True)
    value = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Post(models.Model):
    """
    A piece of content shown in the administrative listing.
    """
    class PostType(models.TextChoices):
        POST = "post", "Post"
        PAGE = "page", "Page"

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        PENDING = "pending", "Pending Review"
        PRIVATE = "private", "Private"
        PUBLISH = "publish", "Published"

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, blank=True)
    post_type = models.CharField(
        max_length=20,
        choices=PostType.choices,
        default=PostType.POST
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT
    )
    content = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.title)[:255]
        super().save(*args, **kwargs)
