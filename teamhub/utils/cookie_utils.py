from django.conf import settings


def get_cookie_config() -> dict:
    return {
        "path": settings.COOKIE_SETTINGS.get("COOKIE_PATH", "/"),
        "domain": settings.COOKIE_SETTINGS.get("COOKIE_DOMAIN"),
        "secure": settings.COOKIE_SETTINGS.get("COOKIE_SECURE"),
        "httponly": settings.COOKIE_SETTINGS.get("COOKIE_HTTPONLY", True),
        "samesite": settings.COOKIE_SETTINGS.get("COOKIE_SAMESITE"),
    }


def set_auth_cookies(response, tokens: dict):
    config = get_cookie_config()
    response.set_cookie(
        settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"),
        tokens["access_token"],
        max_age=tokens["expires_in"],
        **config,
    )
    response.set_cookie(
        settings.COOKIE_SETTINGS.get("REFRESH_COOKIE_NAME"),
        tokens["refresh_token"],
        max_age=tokens["refresh_expires_in"],
        **config,
    )
    return response


def clear_auth_cookies(response):
    config = get_cookie_config()
    for cookie_name in (
        settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"),
        settings.COOKIE_SETTINGS.get("REFRESH_COOKIE_NAME"),
    ):
        response.delete_cookie(
            cookie_name, path=config["path"], domain=config["domain"], samesite=config["samesite"]
        )
    return response
