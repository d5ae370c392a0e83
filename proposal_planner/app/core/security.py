"""
Placeholder login check.

The browser front-end only ever compared the submitted username and
password against a fixed pair before navigating to the admin page.
That behaviour is kept as is: no session, no token, no hashing.  The
pair comes from ``Settings`` so it can at least be changed per
deployment.
"""

import hmac
from typing import Optional

from .config import Settings, settings as default_settings


def check_credentials(username: str, password: str, settings: Optional[Settings] = None) -> bool:
    """Return ``True`` when the pair matches the configured admin pair."""
    cfg = settings or default_settings
    user_ok = hmac.compare_digest(username.encode("utf-8"), cfg.admin_username.encode("utf-8"))
    pass_ok = hmac.compare_digest(password.encode("utf-8"), cfg.admin_password.encode("utf-8"))
    return user_ok and pass_ok
