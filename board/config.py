from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    mount_prefix: str = "/asmt"
    comment_limit: int = 200

    # Empty means no lookup database is wired in
    users_db_path: str = ""

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"


settings = Settings()
