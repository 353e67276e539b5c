# config.py

import os
import yaml
import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_BRANCH = "main"

# Environment variable -> settings field
ENV_OVERRIDES = {
    "GH_TOKEN": "gh_token",
    "GH_OWNER": "gh_owner",
    "GH_REPO": "gh_repo",
    "WORKFLOW_FILE": "workflow_file",
    "BRANCH": "branch",
    "API_KEY": "api_key",
    "GITHUB_API_URL": "github_api_url",
    "REQUEST_TIMEOUT": "request_timeout",
    "DEBUG_MODE": "debug_mode",
    "LOG_DB_PATH": "log_db_path",
    "MAX_LOG_ENTRIES": "max_log_entries",
}

REQUIRED_FOR_DISPATCH = ("gh_token", "gh_owner", "gh_repo", "workflow_file", "api_key")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    gh_token: str = ""
    gh_owner: str = ""
    gh_repo: str = ""
    workflow_file: str = ""
    branch: str = DEFAULT_BRANCH
    api_key: str = ""

    github_api_url: str = "https://api.github.com"
    request_timeout: Optional[float] = None
    debug_mode: bool = False
    log_db_path: str = "logs.db"
    max_log_entries: int = 10000

    @property
    def ref(self) -> str:
        return self.branch or DEFAULT_BRANCH

    def missing_fields(self) -> List[str]:
        return [name for name in REQUIRED_FOR_DISPATCH if not getattr(self, name)]


def read_config_file(config_path: Optional[str] = None, environ=None) -> dict:
    """
    Load the YAML file named by `config_path`, the CONFIG_PATH environment variable,
    or the default path.

    The default file is optional. A path given explicitly must exist.

    Returns:
        dict: Parsed configuration dictionary (empty when no file is used).
    """
    environ = os.environ if environ is None else environ
    explicit = config_path or environ.get("CONFIG_PATH")
    path = explicit or DEFAULT_CONFIG_PATH

    if not os.path.exists(path):
        if explicit:
            logger.error(f"Configuration file '{path}' not found.")
            raise FileNotFoundError(f"Configuration file '{path}' not found.")
        logger.debug(f"No configuration file at '{path}', using environment only.")
        return {}

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file '{path}': {e}")
        raise

    if not isinstance(data, dict):
        logger.error(f"Configuration file '{path}' must contain a mapping.")
        raise ValueError(f"Configuration file '{path}' must contain a mapping.")

    logger.info(f"Configuration loaded successfully from '{path}'.")
    return data


def load_settings(config_path: Optional[str] = None, environ=None) -> Settings:
    """Build Settings from the YAML file, then apply environment overrides."""
    environ = os.environ if environ is None else environ
    values = {k: v for k, v in read_config_file(config_path, environ).items() if k in Settings.model_fields}

    for env_name, field in ENV_OVERRIDES.items():
        if env_name in environ:
            values[field] = environ[env_name]

    if isinstance(values.get("debug_mode"), str):
        values["debug_mode"] = values["debug_mode"].strip().lower() == "true"
    if values.get("request_timeout") in ("", None):
        values.pop("request_timeout", None)
    if values.get("branch") is None:
        values.pop("branch", None)

    settings = Settings(**values)

    # Log summary of key settings (without secrets)
    for name in settings.missing_fields():
        logger.warning(f"Setting '{name}' is not configured. Dispatch requests will fail.")
    logger.info(f"Dispatch target: {settings.gh_owner}/{settings.gh_repo} "
                f"workflow '{settings.workflow_file}' on branch '{settings.ref}'")
    return settings
