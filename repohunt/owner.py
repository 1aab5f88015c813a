"""Owner lookup — turn a uid into a display name via the passwd database."""

from __future__ import annotations

import pwd

from repohunt.errors import OwnerLookupError


def resolve_owner(uid: int) -> str:
    """Return the owner display name for uid.

    The GECOS full name wins, cut at the first comma (office, phone and the
    like follow it). Users without one fall back to their login name.
    """
    try:
        entry = pwd.getpwuid(uid)
    except KeyError:
        raise OwnerLookupError(uid) from None

    full_name = entry.pw_gecos.split(",", 1)[0].strip() if entry.pw_gecos else ""
    return full_name or entry.pw_name
