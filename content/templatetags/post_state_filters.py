from django import template

from content.hooks import display_post_states

register = template.Library()


@register.filter(name="post_state_labels")
def post_state_labels(post, separator=", "):
    """
    Render the labels collected for ``post`` as plain text, e.g.
    ``{{ post|post_state_labels }}`` gives 'Front Page, Posts Page'.
    """
    if post is None:
        return ""

    states = display_post_states.apply({}, post)
    return separator.join(str(label) for label in states.values())
