import importlib
import os
from unittest import mock

from django.test import SimpleTestCase

from post_states_backend import settings as project_settings


class EnvironmentSettingsTest(SimpleTestCase):
    """Test settings read from the environment"""

    def tearDown(self):
        importlib.reload(project_settings)

    def reload_with_env(self, **env):
        with mock.patch.dict(os.environ, env, clear=True), mock.patch('dotenv.load_dotenv'):
            return importlib.reload(project_settings)

    def test_debug_is_off_by_default(self):
        """Test that DEBUG stays off unless DJANGO_DEBUG turns it on"""
        module = self.reload_with_env()

        self.assertFalse(module.DEBUG)
        self.assertEqual(module.LOGGING['loggers']['post_states']['level'], 'INFO')

    def test_debug_from_environment(self):
        module = self.reload_with_env(DJANGO_DEBUG='True')

        self.assertTrue(module.DEBUG)
        self.assertEqual(module.LOGGING['loggers']['post_states']['level'], 'DEBUG')

    def test_env_bool(self):
        with mock.patch.dict(os.environ, {'FLAG': ' yes '}, clear=True):
            self.assertTrue(project_settings.env_bool('FLAG'))
            self.assertFalse(project_settings.env_bool('MISSING'))
            self.assertTrue(project_settings.env_bool('MISSING', True))
