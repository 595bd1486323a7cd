"""Test environment: settings must be in place before lostfound is imported."""

import atexit
import os
import shutil
import tempfile

_upload_dir = tempfile.mkdtemp(prefix="lostfound-uploads-")
atexit.register(shutil.rmtree, _upload_dir, ignore_errors=True)

os.environ["JWT_SECRET"] = "test-secret-not-for-production-0123456789abcdef"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["APP_ENV"] = "dev"
os.environ["UPLOAD_DIR"] = _upload_dir
