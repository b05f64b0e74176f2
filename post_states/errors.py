from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class PostStateErrorCode(models.TextChoices):
    EMPTY_CONFIGURATION = "invalid_states", _("Post states configuration cannot be empty.")
    NO_VALID_ENTRIES = "invalid_states_config", _("Post states must contain valid keys and labels.")
    INVALID_KEY_OR_LABEL = "invalid_state", _("Post state key and label cannot be empty.")
    INVALID_OPTION_GETTER = "invalid_option_getter", _("The option getter must be a callable function.")
    REGISTRATION_FAILED = "post_states_registration_failed", _("Failed to register post states: %(error)s")


class PostStatesError(ValidationError):
    """
    Raised when post states cannot be registered.

    ``code`` is one of the ``PostStateErrorCode`` values and ``message`` the
    human-readable text for it.
    """

    def __init__(self, code, message=None, params=None):
        code = PostStateErrorCode(code)
        super().__init__(message or code.label, code=code.value, params=params)

    @property
    def error_message(self):
        message = self.message
        if self.params:
            message = message % self.params
        return str(message)

    def as_dict(self):
        return {'code': self.code, 'message': self.error_message}
