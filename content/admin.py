from django.contrib import admin
from django.utils.html import format_html, format_html_join

from .hooks import display_post_states
from .models import Option, Post


def render_post_states(post):
    """
    Collect the post's states through the hook and render them as HTML.
    """
    states = display_post_states.apply({}, post)
    if not states:
        return ""
    return format_html_join(
        ", ",
        '<span class="post-state">{}</span>',
        ((label,) for label in states.values())
    )


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ['title_with_states', 'post_type', 'status', 'updated_at']
    list_filter = ['post_type', 'status', 'created_at']
    search_fields = ['title', 'slug', 'content']
    prepopulated_fields = {'slug': ('title',)}
    readonly_fields = ['created_at', 'updated_at']
    fieldsets = (
        (None, {
            'fields': ('title', 'slug', 'post_type', 'status', 'content')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    @admin.display(description='Title', ordering='title')
    def title_with_states(self, obj):
        states = render_post_states(obj)
        if not states:
            return obj.title
        return format_html('{} &mdash; {}', obj.title, states)


@admin.register(Option)
class OptionAdmin(admin.ModelAdmin):
    list_display = ['name', 'value', 'updated_at']
    search_fields = ['name', 'value']
    ordering = ['name']
    readonly_fields = ['created_at', 'updated_at']
