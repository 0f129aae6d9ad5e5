from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Short Link Generator"
    BASE_URL: str = "http://localhost:8080"
    LOG_LEVEL: str = "INFO"

    # Redis backs rate limiting and the generated-codes counter; the service
    # keeps answering when it is unreachable.
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379

    RATE_LIMIT_LIMIT: int = 100
    RATE_LIMIT_WINDOW: int = 60

    MAX_BATCH_SIZE: int = 100
    MAX_CODE_LENGTH: int = 64

    class Config:
        env_file = ".env"

settings = Settings()
