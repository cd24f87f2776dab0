import re

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def email_to_user_id(email: str) -> str:
    """
    Derive the user document key from an email address.

    Lowercases, then replaces every character outside [A-Za-z0-9._-] with "_".
    Client apps derive the same key, so both sides address one document.

    >>> email_to_user_id("A.User+x@Example.com")
    'a.user_x_example.com'
    """
    return _UNSAFE_KEY_CHARS.sub("_", email.lower())
