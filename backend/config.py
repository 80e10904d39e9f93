import json

from pydantic_settings import BaseSettings


def parse_cors_origins(raw: str) -> list[str]:
    """Parse a CORS origins value given as comma-separated string or JSON list."""
    raw = raw.strip()
    if not raw:
        return []
    if raw.startswith("["):
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    max_upload_size_mb: int = 10
    max_cv_chars: int = 50000
    # Kept as a raw string so both "a,b" and '["a", "b"]' are accepted from env
    cors_origins: str = "http://localhost:5173,http://localhost:3000"
    debug: bool = False

    # Completion service
    analysis_model: str = "gemini-2.5-flash"
    max_output_tokens: int = 2000
    temperature: float = 0.7  # lower values make malformed JSON less likely
    request_timeout_s: float = 60.0

    analyze_rate_limit: str = "10/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def cors_origin_list(self) -> list[str]:
        return parse_cors_origins(self.cors_origins)


settings = Settings()
