"""
Settings used by the test suite: in-memory SQLite and a fixed secret key.
"""

import os

os.environ.setdefault('DJANGO_SECRET_KEY', 'test-secret-key')

from config.settings import *  # noqa: E402,F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

API_KEYS = []
