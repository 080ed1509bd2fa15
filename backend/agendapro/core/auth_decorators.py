"""
Authentication helpers for the controllers.

Controllers never decorate mutating routes with ``login_required``: they pass
``current_owner_id()`` (None when signed out) to the services, which refuse
mutations without an owner identity and notify the user.
"""

from typing import Optional

from flask_login import current_user


def current_owner_id() -> Optional[str]:
    """Return the id of the signed-in owner, or None."""
    if current_user and getattr(current_user, "is_authenticated", False):
        return current_user.get_id()
    return None
