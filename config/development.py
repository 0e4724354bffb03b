import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Name of the class loaded on startup (defaults to the built-in batch)
SEED_CLASS_NAME = os.getenv("SEED_CLASS_NAME")
