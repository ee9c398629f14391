"""Settings for the test suite.

Supplies a throwaway ``SECRET_KEY`` before the base settings read it,
and pins the cache to local memory regardless of ``REDIS_URL``.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

from config.settings import *  # noqa: E402,F401,F403

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
