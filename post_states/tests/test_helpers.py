"""
Test cases for the process-wide post states helpers
"""
from types import SimpleNamespace
from unittest import mock

from django.apps import apps
from django.test import SimpleTestCase, override_settings

from content.hooks import FilterHook
from post_states.errors import PostStatesError
from post_states.helpers import (
    add_post_state, post_states, register_post_states, reset_post_states
)
from post_states.registry import PostStates

# Stand-in for the content listing hook while these tests run.
listing_hook = FilterHook('display_post_states')

STORED_OPTIONS = {'page_on_front': '42', 'page_for_posts': '7'}


def stored_option(key):
    return STORED_OPTIONS.get(key)


@override_settings(
    POST_STATES_HOOK='post_states.tests.test_helpers.listing_hook',
    POST_STATES_OPTION_GETTER='post_states.tests.test_helpers.stored_option',
)
class ProcessWideRegistryTest(SimpleTestCase):
    """Test the lazily created, process-wide registry"""

    def setUp(self):
        """Start every test without a process-wide registry"""
        reset_post_states()

    def tearDown(self):
        reset_post_states()

    def test_accessor_returns_same_instance(self):
        """Test that post_states() creates the registry once"""
        first = post_states()
        second = post_states()

        self.assertIs(first, second)
        self.assertIsInstance(first, PostStates)
        self.assertEqual(listing_hook.subscriber_count(), 1)

    def test_second_registration_reuses_instance_and_subscription(self):
        """Test that registering twice keeps a single subscription"""
        calls = []

        def getter(key):
            calls.append(key)
            return 42

        first = register_post_states({'page_on_front': 'Front Page'}, getter)
        second = register_post_states({'page_on_front': 'Front Page'}, getter)

        self.assertIs(first, second)
        self.assertEqual(listing_hook.subscriber_count(), 1)

        result = listing_hook.apply({}, SimpleNamespace(pk=42))

        self.assertEqual(result, {'page_on_front': 'Front Page'})
        self.assertEqual(calls, ['page_on_front'])

    def test_registration_replaces_previous_states(self):
        """Test that a new mapping replaces the earlier one wholesale"""
        register_post_states({'page_on_front': 'Front Page'})
        registry = register_post_states({'page_for_posts': 'Posts Page'})

        self.assertEqual(registry.get_states(), {'page_for_posts': 'Posts Page'})

    def test_default_getter_from_settings(self):
        """Test that states without a getter use POST_STATES_OPTION_GETTER"""
        register_post_states({'page_on_front': 'Front Page', 'page_for_posts': 'Posts Page'})

        self.assertEqual(
            listing_hook.apply({}, SimpleNamespace(pk=7)),
            {'page_for_posts': 'Posts Page'}
        )

    def test_validation_errors_keep_their_code(self):
        """Test that validation failures are raised with their own code"""
        with self.assertRaises(PostStatesError) as ctx:
            register_post_states({})
        self.assertEqual(ctx.exception.code, 'invalid_states')

        with self.assertRaises(PostStatesError) as ctx:
            register_post_states({'': 'Front Page', 'page_on_front': ''})
        self.assertEqual(ctx.exception.code, 'invalid_states_config')

    def test_unexpected_failure_is_wrapped(self):
        """Test that other exceptions come back as a registration failure"""
        with mock.patch.object(PostStates, 'set_states', side_effect=RuntimeError('boom')):
            with self.assertLogs('post_states.helpers', level='ERROR'):
                with self.assertRaises(PostStatesError) as ctx:
                    register_post_states({'page_on_front': 'Front Page'})

        self.assertEqual(ctx.exception.code, 'post_states_registration_failed')
        self.assertEqual(ctx.exception.error_message, 'Failed to register post states: boom')
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_add_post_state(self):
        """Test incremental additions on top of a bulk registration"""
        register_post_states({'page_on_front': 'Front Page'})
        registry = add_post_state('page_for_posts', 'Posts Page')

        self.assertEqual(registry.get_states(), {
            'page_on_front': 'Front Page',
            'page_for_posts': 'Posts Page',
        })

        for key, label in [('', 'x'), ('x', ''), ('', '')]:
            with self.subTest(key=key, label=label):
                with self.assertRaises(PostStatesError) as ctx:
                    add_post_state(key, label)
                self.assertEqual(ctx.exception.code, 'invalid_state')

    def test_reset_unsubscribes(self):
        post_states()
        reset_post_states()

        self.assertFalse(listing_hook.has_subscribers())

    @override_settings(POST_STATES={'page_on_front': 'Front Page'})
    def test_app_ready_registers_configured_states(self):
        """Test that POST_STATES is registered when the app starts"""
        apps.get_app_config('post_states').ready()

        self.assertEqual(post_states().get_states(), {'page_on_front': 'Front Page'})

    @override_settings(POST_STATES={'': ''})
    def test_app_ready_logs_invalid_configuration(self):
        """Test that an unusable POST_STATES setting is logged, not raised"""
        with self.assertLogs('post_states.apps', level='ERROR') as logs:
            apps.get_app_config('post_states').ready()

        self.assertIn('Post states must contain valid keys and labels.', logs.output[0])
