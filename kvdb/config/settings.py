from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "KVDB"
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    class Config:
        env_prefix = "KVDB_"
        env_file = ".env"


settings = Settings()
