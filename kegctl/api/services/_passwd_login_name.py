"""Look up a login name in the password database."""

import pwd


def _passwd_login_name(uid: int) -> str | None:
    """Return the login name for uid, or None if the password database has no entry."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None
