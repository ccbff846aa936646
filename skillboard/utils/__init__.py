__all__ = [
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "create_user_token",
    "get_current_user",
    "oauth2_scheme",
]


def __getattr__(name):
    if name in __all__:
        from . import security as _security
        return getattr(_security, name)
    raise AttributeError(f"module 'skillboard.utils' has no attribute '{name}'")
