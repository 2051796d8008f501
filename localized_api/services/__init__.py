from localized_api.services.forecast import ForecastGenerator
from localized_api.services.localization import (
    CultureNegotiator,
    RequestCulture,
    current_culture,
    install_localization,
    make_cookie_value,
    parse_accept_language,
    parse_cookie_value,
)

__all__ = [
    "CultureNegotiator",
    "ForecastGenerator",
    "RequestCulture",
    "current_culture",
    "install_localization",
    "make_cookie_value",
    "parse_accept_language",
    "parse_cookie_value",
]
