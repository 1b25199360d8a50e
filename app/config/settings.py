from pydantic import Field, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.ccr import CcrCredentials

DEFAULT_CCR_TOKEN_URL = "https://servicios.correos.go.cr:442/Token/authenticate"


class Settings(BaseSettings):
    """
    Configuración de la aplicación utilizando Pydantic BaseSettings.
    Carga automáticamente las variables de entorno.
    """

    # API Configuration
    PROJECT_NAME: str = "CCR Gateway"
    PROJECT_DESCRIPTION: str = "API JSON para el servicio SOAP de Correos de Costa Rica"
    VERSION: str = "0.1.0"

    # CCR SOAP service
    CCR_USERNAME: str = Field(..., description="Usuario del servicio CCR")
    CCR_PASSWORD: str = Field(..., description="Contraseña del servicio CCR")
    CCR_USER_ID: str = Field(..., description="ID de usuario asignado por CCR")
    CCR_SERVICE_ID: str = Field(..., description="ID de servicio asignado por CCR")
    CCR_CLIENT_CODE: str = Field(..., description="Código de cliente asignado por CCR")
    CCR_SOAP_URL: str = Field(..., description="URL del WSDL del servicio CCR")
    CCR_SYSTEM: str = Field(..., description="Identificador de sistema para la autenticación")
    CCR_TOKEN_URL: str = Field(DEFAULT_CCR_TOKEN_URL, description="Endpoint emisor de tokens CCR")
    CCR_TOKEN_WINDOW_SECONDS: float = Field(
        260, description="Segundos que el token se considera válido (el servidor lo vence a los 5 minutos)"
    )
    CCR_REQUEST_TIMEOUT: float = Field(30, description="Timeout para requests a CCR en segundos")

    # Inbound authentication
    API_ACCESS_TOKEN: str = Field(..., description="Token estático requerido en el header Authorization")

    # Server
    SERVER_HOST: str | None = Field(None, description="Host de escucha (por defecto, la IP local)")
    SERVER_PORT: int = Field(8080, description="Puerto de escucha")
    ENABLE_HTTPS: bool = Field(False, description="Servir la API sobre TLS")
    SSL_PRIVATE_KEY_PATH: str | None = Field(None, description="Ruta de la clave privada TLS")
    SSL_PUBLIC_CERT_PATH: str | None = Field(None, description="Ruta del certificado TLS")

    # Application Settings
    DEBUG: bool = Field(False, description="Modo de depuración")
    ENVIRONMENT: str = Field("production", description="Entorno de ejecución")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Nivel mínimo de log")
    LOG_FORMAT: str = Field("colored", description="Formato de consola: colored, json o plain")
    LOG_DIR: str | None = Field("logs", description="Directorio de archivos de log (vacío para desactivar)")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignorar campos extras en lugar de generar un error
    )

    @field_validator("CCR_TOKEN_WINDOW_SECONDS", "CCR_REQUEST_TIMEOUT")
    @classmethod
    def validate_positive(cls, v):
        if v <= 0:
            raise ValueError("must be greater than 0")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in {"colored", "json", "plain"}:
            raise ValueError("LOG_FORMAT must be colored, json or plain")
        return v

    @field_validator("LOG_DIR", "SERVER_HOST", mode="before")
    @classmethod
    def empty_as_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def validate_https(self):
        if self.ENABLE_HTTPS and not (self.SSL_PRIVATE_KEY_PATH and self.SSL_PUBLIC_CERT_PATH):
            raise ValueError("ENABLE_HTTPS requires SSL_PRIVATE_KEY_PATH and SSL_PUBLIC_CERT_PATH")
        return self

    @computed_field
    @property
    def is_development(self) -> bool:
        """Determina si está en modo desarrollo"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]

    @property
    def ccr_credentials(self) -> CcrCredentials:
        """Credenciales inmutables para el cliente CCR"""
        return CcrCredentials(
            username=self.CCR_USERNAME,
            password=self.CCR_PASSWORD,
            user_id=self.CCR_USER_ID,
            service_id=self.CCR_SERVICE_ID,
            client_code=self.CCR_CLIENT_CODE,
            soap_url=self.CCR_SOAP_URL,
            system_id=self.CCR_SYSTEM,
            token_url=self.CCR_TOKEN_URL,
        )


# Singleton para configuración
_settings_instance = None


def get_settings() -> Settings:
    """
    Retorna una instancia cacheada de la configuración.
    Esto evita cargar las variables de entorno múltiples veces.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
