"""
Tests for configuration loading and logging setup
"""

import io
import json
import logging
import os
import shutil
import tempfile
import unittest

from netshare.config import NetshareConfig
from netshare.exceptions import ConfigurationException
from netshare.utils.logger import setup_logging
from netshare.utils.validators import validate_volume_name, parse_bool


class TestNetshareConfig(unittest.TestCase):
    """Test config precedence: env var > config file > default"""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = os.path.join(self.temp_dir, 'netshare.conf')

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _write_config(self, content):
        with open(self.config_file, 'w') as f:
            f.write(content)

    def test_defaults_when_file_missing(self):
        """Test defaults apply without a config file"""
        config = NetshareConfig.load_config(self.config_file, environ={})

        self.assertEqual(config.root, NetshareConfig.DEFAULT_ROOT)
        self.assertEqual(config.meta_dir, '.meta')
        self.assertEqual(config.log_level, 'INFO')
        self.assertFalse(config.log_json)
        self.assertEqual(config.meta_path, os.path.join(NetshareConfig.DEFAULT_ROOT, '.meta'))

    def test_file_values(self):
        """Test values are read from the [netshare] section"""
        self._write_config(
            "[DEFAULT]\n"
            "log_level = WARNING\n"
            "\n"
            "[netshare]\n"
            "root = /srv/volumes\n"
            "log_level = DEBUG\n"
            "log_json = yes\n"
            "log_format = %(levelname)s %(message)s\n"
        )

        config = NetshareConfig.load_config(self.config_file, environ={})

        self.assertEqual(config.root, '/srv/volumes')
        self.assertEqual(config.log_level, 'DEBUG')
        self.assertTrue(config.log_json)
        self.assertEqual(config.log_format, '%(levelname)s %(message)s')

    def test_env_overrides_file(self):
        """Test environment variables win over the file"""
        self._write_config("[netshare]\nroot = /srv/volumes\nmeta_dir = .state\n")

        config = NetshareConfig.load_config(self.config_file, environ={
            'NETSHARE_ROOT': '/mnt/other',
            'NETSHARE_LOG_JSON': 'TRUE',
        })

        self.assertEqual(config.root, '/mnt/other')
        self.assertEqual(config.meta_dir, '.state')
        self.assertTrue(config.log_json)

    def test_unparseable_file(self):
        """Test a broken config file raises ConfigurationException"""
        self._write_config("root = /no/section/header\n")

        with self.assertRaises(ConfigurationException):
            NetshareConfig.load_config(self.config_file, environ={})

    def test_validate(self):
        """Test validation of root, meta_dir and log level"""
        NetshareConfig(root='/srv/volumes').validate()

        for kwargs in [
            {'root': 'relative/path'},
            {'root': '/srv', 'meta_dir': 'a/b'},
            {'root': '/srv', 'meta_dir': '..'},
            {'root': '/srv', 'log_level': 'LOUD'},
        ]:
            with self.subTest(**kwargs):
                with self.assertRaises(ConfigurationException):
                    NetshareConfig(**kwargs).validate()

    def test_to_dict(self):
        config = NetshareConfig(root='/srv/volumes', log_json=True)

        self.assertEqual(config.to_dict()['root'], '/srv/volumes')
        self.assertTrue(config.to_dict()['log_json'])


class TestValidators(unittest.TestCase):

    def test_volume_names(self):
        for name in ['share1', 'tenantA/share1', 'a/b/c', '.hidden', 'a..b', 'v.tmp']:
            with self.subTest(name=name):
                self.assertTrue(validate_volume_name(name))

        for name in ['', None, '/abs', '..', 'a/../b', './a', 'a//b', 'a/', 'a\\b', 'a\x00b',
                     '.x.tmp', 'a/.b.tmp']:
            with self.subTest(name=name):
                self.assertFalse(validate_volume_name(name))

    def test_parse_bool(self):
        self.assertTrue(parse_bool('yes'))
        self.assertTrue(parse_bool('True'))
        self.assertFalse(parse_bool('1'))
        self.assertFalse(parse_bool(None))


class TestLogging(unittest.TestCase):
    """Test logger configuration"""

    def tearDown(self):
        logger = logging.getLogger('netshare')
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_plain_format(self):
        stream = io.StringIO()
        setup_logging('INFO', '%(levelname)s %(name)s %(message)s', stream=stream)

        logging.getLogger('netshare.drivers.mounts').info('hello')
        logging.getLogger('netshare.drivers.mounts').debug('hidden')

        self.assertEqual(stream.getvalue(), 'INFO netshare.drivers.mounts hello\n')

    def test_json_format(self):
        stream = io.StringIO()
        setup_logging('DEBUG', json_format=True, stream=stream)

        logging.getLogger('netshare.drivers.mount_store').debug('reading metadata')

        record = json.loads(stream.getvalue().strip())
        self.assertEqual(record['message'], 'reading metadata')
        self.assertEqual(record['levelname'], 'DEBUG')
        self.assertEqual(record['name'], 'netshare.drivers.mount_store')

    def test_reconfigure_replaces_handler(self):
        setup_logging('INFO', stream=io.StringIO())
        setup_logging('INFO', stream=io.StringIO())

        self.assertEqual(len(logging.getLogger('netshare').handlers), 1)


if __name__ == '__main__':
    unittest.main()
