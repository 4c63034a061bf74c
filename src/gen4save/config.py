"""
Runtime configuration, read from ``GEN4SAVE_*`` environment variables.
"""

import os
import secrets
from dataclasses import dataclass, field
from typing import Mapping, Optional

_TRUE = {"1", "true", "yes", "on"}


@dataclass
class EditorConfig:
    log_level:          str = "INFO"
    host:               str = "0.0.0.0"
    port:               int = 5000
    debug:              bool = False
    max_upload_bytes:   int = 1024 * 1024
    secret_key:         str = field(default_factory=lambda: secrets.token_urlsafe(32), repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'EditorConfig':
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            log_level=env.get("GEN4SAVE_LOG_LEVEL", defaults.log_level).upper(),
            host=env.get("GEN4SAVE_HOST", defaults.host),
            port=int(env.get("GEN4SAVE_PORT", defaults.port)),
            debug=env.get("GEN4SAVE_DEBUG", "false").lower() in _TRUE,
            max_upload_bytes=int(env.get("GEN4SAVE_MAX_UPLOAD_BYTES", defaults.max_upload_bytes)),
            secret_key=env.get("GEN4SAVE_SECRET_KEY", defaults.secret_key),
        )
