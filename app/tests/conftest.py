import os

# Must happen before triedex is imported; it configures logging at import time.
os.environ.setdefault("FLASK_ENV", "test")
