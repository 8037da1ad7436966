from pydantic_settings import BaseSettings, SettingsConfigDict

# Porta fixa do servidor; não é lida do ambiente.
HOST = "0.0.0.0"
PORT = 3001


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    PROJECT_NAME: str = "API calcfrete"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"


settings = Settings()
