"""
Shared test configuration.

The application reads its settings at import time, so the environment has to
be seeded before any test module imports ``api.main``.
"""

import os

os.environ.setdefault('JWT_SECRET', 'test-secret')
os.environ.setdefault('FIXERIO_API_KEY', 'test_key')
# Lowest bcrypt cost keeps the login tests fast
os.environ.setdefault('BCRYPT_ROUNDS', '4')

