import base64


def create_basic_token(username: str, password: str) -> str:
    """
    Build the credential part of a Basic auth header from a username and
    password.
    """
    if ":" in username:
        # RFC 7617: the user-id cannot contain a colon
        raise ValueError("Username must not contain ':'")

    cred_pair = f"{username}:{password}"
    return base64.b64encode(cred_pair.encode("utf-8")).decode("ascii")
