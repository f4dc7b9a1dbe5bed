from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    cors_origins: list[str] = []
    data_path: str = "data"  # Directory holding the codes file
    codes_filename: str = "generated_codes.json"
    code_length: int = 7
    persist_generated: bool = False  # Save generated codes to the store and reject duplicates
    max_generation_attempts: int = 10  # Retries on duplicate codes when persist_generated is enabled

    model_config = {
        "env_file": [".env"],
        "env_prefix": "RAFFLECODE_",
        "extra": "ignore",
    }
