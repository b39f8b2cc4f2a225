"""Settings used by the pytest-django test suite."""

from .dev import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

# Tests rely on the stock booking rules regardless of the environment.
WORKING_HOURS = {
    'START': '08:00',
    'END': '18:00',
    'WORKING_DAYS': [1, 2, 3, 4, 5],
    'MIN_DURATION_MINUTES': 30,
    'MAX_DURATION_MINUTES': 480,
}
