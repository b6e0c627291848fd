from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://calisthenics_user:calisthenics_password@db:5432/calisthenics_db"
    SECRET_KEY: str = "SECRET_KEY_FOR_CALISTHENICS_COACH"
    ALGORITHM: str = "HS256"
    # При продакшн/обычной разработке лучше не пересоздавать БД на каждом старте
    RESET_DATABASE: bool = False
    # Загружать паттерны движений и стартовый каталог упражнений при старте
    SEED_REFERENCE_DATA: bool = True
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # Параметры генератора программ
    RECENT_EXERCISE_DAYS: int = 14
    # Возраст пока не вычисляется из даты рождения
    DEFAULT_ATHLETE_AGE: int = 30

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
