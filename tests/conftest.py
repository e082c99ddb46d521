import sys
import os

# Ensure repo root on sys.path for imports like `leetsync...`
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Settings are read at import time; keep tests off any real project.
os.environ.setdefault("SUPABASE_URL", "http://supabase.test")
os.environ.setdefault("SUPABASE_KEY", "test-key")
os.environ.setdefault("GITHUB_API_URL", "https://api.github.test")
os.environ.pop("GITHUB_TOKEN", None)
os.environ.pop("LEETCODE_SESSION", None)
