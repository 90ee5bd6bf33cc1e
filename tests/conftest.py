"""Test environment: in-memory SQLite and cheap bcrypt, set before any app import."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["JWT_SECRET"] = "test-signing-secret-not-for-production-use"
os.environ["APP_ENV"] = "dev"
