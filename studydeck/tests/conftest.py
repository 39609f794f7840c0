import os

# Importing studydeck.app builds a client from the environment.
os.environ.pop("DATABASE_URL", None)
