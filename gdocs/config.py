import os
import logging
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# .env files are looked up next to the server script first, then in the cwd
PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TRANSPORT = "stdio"


def load_environment(base_dir: str = PROJECT_DIR) -> Optional[str]:
    """Load the first .env file found; returns its path, or None."""
    for directory in (base_dir, os.getcwd()):
        env_path = os.path.join(directory, '.env')
        if os.path.exists(env_path):
            load_dotenv(env_path)
            logger.info(f"Loaded environment variables from: {env_path}")
            return env_path
    logger.warning(f".env file not found in {base_dir} or {os.getcwd()}")
    return None


def get_env(var: str) -> str:
    """Fetch environment variable or raise error if missing."""
    value = os.getenv(var)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {var}")
    return value


def get_optional_env(var: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(var)
    return value if value else default


def resolve_path(path: str, base_dir: str = PROJECT_DIR) -> str:
    """Make paths relative to the project directory if they're not absolute."""
    if os.path.isabs(path):
        return path
    return os.path.join(base_dir, path)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging on stderr; stdout is reserved for the stdio transport."""
    level_name = (level or get_optional_env("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_transport() -> str:
    return get_optional_env("MCP_TRANSPORT", DEFAULT_TRANSPORT)
