import os
import logging
from pathlib import Path

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_bool_env(name: str, default: bool) -> bool:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw.strip().lower() in ("1", "true", "yes", "on")


USER_AGENT = get_str_env("TERMCRAWL_USER_AGENT", "termcrawl/0.1")
LOG_LEVEL = get_str_env("TERMCRAWL_LOG_LEVEL", "WARNING")
VERIFY_TLS = get_bool_env("TERMCRAWL_VERIFY_TLS", False)
