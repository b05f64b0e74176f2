import logging
import numbers
import re
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Optional

from django.conf import settings
from django.utils.module_loading import import_string

from .errors import PostStateErrorCode, PostStatesError

logger = logging.getLogger(__name__)

DEFAULT_OPTION_GETTER = 'content.options.get_option'
DEFAULT_HOOK = 'content.hooks.display_post_states'

_LEADING_INTEGER = re.compile(r'\s*([+-]?\d+)')


def coerce_post_id(value):
    """
    Loosely convert a stored option value to a post ID.

    Integers pass through, floats are truncated and strings are read up to the
    first non-digit ("42", " 42 ", "42abc" all give 42). Anything without
    digits gives None rather than 0, so it can never match a post.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return None
    if isinstance(value, bytes):
        value = value.decode('utf-8', errors='ignore')
    if isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # Longer than the interpreter's int conversion limit.
                return None
    return None


def _is_valid_key(key):
    return isinstance(key, str) and key != ""


def _is_valid_label(label):
    return label is not None and str(label) != ""


@dataclass(frozen=True)
class StateEntry:
    key: str
    label: Any
    # None means the registry's default getter is used at display time.
    option_getter: Optional[Callable[[str], Any]] = None


class PostStates:
    """
    Registry of post states.

    Each state maps an option key to a label. When the admin listing renders a
    post, the option is looked up and, if it holds that post's ID, the label is
    added to the post's states. Creating an instance subscribes it to the
    ``display_post_states`` hook unless ``subscribe=False`` is given.
    """

    def __init__(self, option_getter=None, hook=None, subscribe=True):
        self._lock = threading.RLock()
        self._states = {}
        self._option_getter = None
        self._hook = hook
        self._subscribed = False

        if option_getter is not None:
            self.set_option_getter(option_getter)
        if subscribe:
            self.subscribe()

    def __repr__(self):
        return f"<PostStates: {', '.join(self._states) or 'empty'}>"

    def __len__(self):
        return len(self._states)

    def __contains__(self, key):
        return key in self._states

    def __iter__(self):
        return iter(list(self._states))

    @property
    def hook(self):
        if self._hook is None:
            self._hook = import_string(getattr(settings, 'POST_STATES_HOOK', DEFAULT_HOOK))
        return self._hook

    @property
    def is_subscribed(self):
        return self._subscribed

    def subscribe(self):
        """
        Attach ``display_post_states`` to the hook. Safe to call repeatedly.
        """
        with self._lock:
            if self._subscribed:
                return False
            self.hook.subscribe(self.display_post_states)
            self._subscribed = True
            return True

    def unsubscribe(self):
        with self._lock:
            if not self._subscribed:
                return False
            self.hook.unsubscribe(self.display_post_states)
            self._subscribed = False
            return True

    def get_option_getter(self):
        if self._option_getter is not None:
            return self._option_getter
        return import_string(getattr(settings, 'POST_STATES_OPTION_GETTER', DEFAULT_OPTION_GETTER))

    def set_option_getter(self, option_getter):
        """
        Replace the getter used by states registered without one of their own.
        """
        if not callable(option_getter):
            raise PostStatesError(PostStateErrorCode.INVALID_OPTION_GETTER)
        with self._lock:
            self._option_getter = option_getter

    def _build_entries(self, states, option_getter):
        if not states:
            raise PostStatesError(PostStateErrorCode.EMPTY_CONFIGURATION)

        if option_getter is not None and not callable(option_getter):
            raise PostStatesError(PostStateErrorCode.INVALID_OPTION_GETTER)

        try:
            states = dict(states)
        except (TypeError, ValueError) as exc:
            raise PostStatesError(PostStateErrorCode.NO_VALID_ENTRIES) from exc

        entries = {
            key: StateEntry(key, label, option_getter)
            for key, label in states.items()
            if _is_valid_key(key) and _is_valid_label(label)
        }
        if not entries:
            raise PostStatesError(PostStateErrorCode.NO_VALID_ENTRIES)
        return entries

    def register(self, states, option_getter=None):
        """
        Add several states at once from a ``{option_key: label}`` mapping.

        Pairs with an empty key or label are skipped; an error is raised only
        when the mapping is empty or none of its pairs are usable.
        """
        entries = self._build_entries(states, option_getter)
        with self._lock:
            merged = dict(self._states)
            merged.update(entries)
            self._states = merged

        logger.debug(f"Registered {len(entries)} post states")
        return True

    def set_states(self, states, option_getter=None):
        """
        Same as ``register`` but replaces every existing state.
        """
        entries = self._build_entries(states, option_getter)
        with self._lock:
            self._states = entries

        logger.debug(f"Registered {len(entries)} post states")
        return True

    def add_state(self, key, label, option_getter=None):
        if not _is_valid_key(key) or not _is_valid_label(label):
            raise PostStatesError(PostStateErrorCode.INVALID_KEY_OR_LABEL)

        if option_getter is not None and not callable(option_getter):
            raise PostStatesError(PostStateErrorCode.INVALID_OPTION_GETTER)

        with self._lock:
            states = dict(self._states)
            states[key] = StateEntry(key, label, option_getter)
            self._states = states

        logger.debug(f"Added post state: {key}")
        return True

    def get_state(self, key):
        return self._states.get(key)

    def get_states(self):
        return {key: entry.label for key, entry in self._states.items()}

    def resolve(self, key):
        """
        Return the post ID currently stored for ``key``, or None.
        """
        entry = self._states.get(key)
        if entry is None:
            return None
        getter = entry.option_getter or self.get_option_getter()
        return coerce_post_id(getter(entry.key))

    def display_post_states(self, post_states, post):
        """
        Hook callback: add the label of every state whose option holds ``post``'s ID.

        Returns a new mapping; ``post_states`` itself is left untouched. A
        getter that raises only drops its own state.
        """
        post_states = dict(post_states or {})
        post_id = coerce_post_id(getattr(post, 'pk', None))
        if post_id is None:
            return post_states

        for entry in list(self._states.values()):
            try:
                getter = entry.option_getter or self.get_option_getter()
                matched = coerce_post_id(getter(entry.key)) == post_id
            except Exception:
                logger.warning(f"Could not read option {entry.key} for post states", exc_info=True)
                continue

            if matched:
                post_states[entry.key] = entry.label
                logger.debug(f"Displayed state {entry.key} for post {post_id}")

        return post_states
