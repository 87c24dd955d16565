"""
Feature flags read from the environment.
Optional routers are only registered when their flag is on.
"""
import logging
import os
from typing import Dict, Optional

logger = logging.getLogger(__name__)

# Flag name -> environment variable. Auth has no variable and cannot be turned off.
FLAG_ENV_VARS = {
    "campaigns": "FEATURE_CAMPAIGNS",
    "characters": "FEATURE_CHARACTERS",
    "items": "FEATURE_ITEMS",
    "story_posts": "FEATURE_STORY_POSTS",
    "dm_responses": "FEATURE_DM_RESPONSES",
}
ALWAYS_ON = ("auth",)


def _read_flag(env_var: str, environ=None) -> bool:
    environ = os.environ if environ is None else environ
    value = environ.get(env_var)
    if value is None:
        return True
    return value.lower() == "true"


class FeatureFlagService:
    """Holds the on/off state of each application feature."""

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._flags: Dict[str, bool] = {name: True for name in ALWAYS_ON}
        for name, env_var in FLAG_ENV_VARS.items():
            self._flags[name] = _read_flag(env_var, environ)
        logger.info(f"[FeatureFlagService] Loaded flags: {self._flags}")

    def is_enabled(self, name: str) -> bool:
        return self._flags.get(name, False)

    def enable(self, name: str):
        self._flags[name] = True

    def disable(self, name: str):
        if name in ALWAYS_ON:
            logger.warning(f"[disable] Feature '{name}' cannot be disabled")
            return
        self._flags[name] = False

    def get_all_flags(self) -> Dict[str, bool]:
        return dict(self._flags)


feature_flags = FeatureFlagService()
