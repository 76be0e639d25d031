from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any, Dict, List, Optional
import json

NULL_SENTINELS = {"null", "none", "undefined", "false"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # DB: inventory (psycopg2, one connection per request)
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASS: Optional[str] = None
    DB_NAME: str = "inventory"
    DB_CONNECT_TIMEOUT: int = 5
    DB_SSLMODE: str = "prefer"
    DB_INIT_SCHEMA: bool = True

    # HTTP listener
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS – keep env parsing simple: store raw string, parse in allowed_origins()
    ALLOW_ORIGINS: Optional[str] = "*"

    LOG_LEVEL: str = "INFO"

    # Export rendering
    EXPORT_CURRENCY_SYMBOL: str = "$"
    EXPORT_TITLE: str = "Inventory Report"

    @field_validator("EXPORT_CURRENCY_SYMBOL", "EXPORT_TITLE")
    @classmethod
    def _fits_pdf_font(cls, value: str) -> str:
        # Helvetica in the PDF export only has WinAnsi (cp1252) glyphs
        try:
            value.encode("cp1252")
        except UnicodeEncodeError:
            raise ValueError(f"{value!r} cannot be drawn with the PDF font (cp1252 only)")
        return value

    def connect_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for psycopg2.connect()."""
        kwargs: Dict[str, Any] = {
            "host": self.DB_HOST,
            "port": self.DB_PORT,
            "user": self.DB_USER,
            "dbname": self.DB_NAME,
            # Keep requests snappy when the DB is slow/unreachable
            "connect_timeout": self.DB_CONNECT_TIMEOUT,
            "sslmode": self.DB_SSLMODE,
        }
        if self.DB_PASS:
            kwargs["password"] = self.DB_PASS
        return kwargs

    def allowed_origins(self) -> List[str]:
        """
        Accepts:
          - JSON array: '["https://a.com","https://b.com"]'
          - Comma-separated string: 'https://a.com,https://b.com'
          - Empty / missing -> []
        """
        raw = (self.ALLOW_ORIGINS or "").strip()
        if not raw:
            return []

        values: List[Any]
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                parsed = None
            values = parsed if isinstance(parsed, list) else raw.strip("[]").split(",")
        else:
            values = raw.split(",")

        origins = []
        for value in values:
            origin = str(value).strip().strip('"').strip("'").rstrip("/")
            if origin and origin.lower() not in NULL_SENTINELS:
                origins.append(origin)
        return origins
