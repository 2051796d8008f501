from typing import List, Tuple

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_NAME: str = "localized-api"
    APP_VERSION: str = "v1"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    HTTPS_REDIRECT: bool = True

    # OpenAPI / Swagger UI
    OPENAPI_URL: str = "/openapi/v1.json"
    DOCS_URL: str = "/swagger"
    API_TITLE: str = "My new API"
    CONTACT_NAME: str = "Support"
    CONTACT_EMAIL: str = "support@email.com"
    LICENSE_NAME: str = "MIT"
    LICENSE_URL: str = "https://opensource.org/licenses/MIT"

    # Localization; set as a JSON list in the environment, e.g. '["en","it"]'
    SUPPORTED_CULTURES: List[str] = ["en", "it"]

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
        "case_sensitive": True,
    }

    @property
    def supported_cultures(self) -> Tuple[str, ...]:
        return tuple(c.strip() for c in self.SUPPORTED_CULTURES if c and c.strip())


settings = Settings()
