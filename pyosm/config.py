"""
Configuration for talking to the OSM editing API
"""

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class ApiConfig:
    """API endpoint and request settings"""
    base_url: str = "https://api.openstreetmap.org/api"
    api_version: str = "0.6"

    # Connect/read timeout (seconds), the same for every call
    timeout: float = 2

    user_agent: str = "pyosm/1.0 (http://github.com/iandees/pyosm)"

    @property
    def root(self) -> str:
        return "%s/%s" % (self.base_url.rstrip("/"), self.api_version)

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Build a config from PYOSM_* environment variables, falling back to the defaults"""
        defaults = cls()
        return cls(
            base_url=os.environ.get("PYOSM_API_URL", defaults.base_url),
            timeout=float(os.environ.get("PYOSM_TIMEOUT", defaults.timeout)),
            user_agent=os.environ.get("PYOSM_USER_AGENT", defaults.user_agent),
        )


# Global config instance
config = ApiConfig()


def get_config() -> ApiConfig:
    """Get global configuration"""
    return config
