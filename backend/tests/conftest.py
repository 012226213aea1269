import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Pin the scoring rules so a developer's environment cannot change expected scores
os.environ["BOWLING_ENFORCE_FRAME_OVERFLOW"] = "true"
os.environ["BOWLING_TENTH_FRAME_ALWAYS_THREE_ROLLS"] = "true"
# Tests must never report to a real Sentry project
os.environ.pop("SENTRY_DSN", None)
