import logging
import os
from pathlib import Path

from src.rules.models import Rules

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    pass


def validate_ops_rules(rules: Rules, data_dir: Path) -> None:
    """
    Validate operational requirements before startup.

    Raises ConfigError when a required environment variable is missing or the
    data directory (home of the audit database) cannot be written.
    """
    # 1. Check Required Env
    missing = [name for name in rules.ops.required_env if name not in os.environ]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    # 2. Check Data Dir
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Data directory {data_dir} is not usable: {e}") from e
    if not os.access(data_dir, os.W_OK):
        raise ConfigError(f"Data directory {data_dir} is not writable")

    logger.info("Configuration validated (data dir %s)", data_dir)
