from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "preppy"
    env: str = "local"
    log_level: str = "INFO"

    database_dsn: str = "sqlite:///./preppy.db"
    # Key of the single persisted document (the browser build used localStorage).
    storage_key: str = "recipe"

    new_recipe_name: str = "New recipe"
    # Cooklang files carry no title, so imported documents get this name.
    imported_recipe_name: str = "Imported recipe"

    fetch_timeout_s: float = 10.0
    fetch_user_agent: str = "Mozilla/5.0 (compatible; preppy/0.1)"

    # Copy/paste/load banners are cleared after this many seconds.
    status_clear_seconds: float = 3.0

    export_filename_suffix: str = ".md"

    class Config:
        env_file = ".env"


settings = Settings()
