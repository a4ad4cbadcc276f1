from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Internship Offers Scraper"

    # {page} is replaced with the 1-based index page number
    index_url_template: str = "https://practicas.example.org/ofertas/pagina/{page}"
    pagination_selector: str = "ul.pagination a[href]"
    page_segment_index: int = -1
    listing_selector: str = "#listado-ofertas a[href]"

    keyword: str = "datos masivos"

    output_path: str = "ofertas.csv"
    filtered_output_path: str = "ofertas_datos_masivos.csv"
    separator: str = ";"

    http_timeout: int = 30
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    )
    skip_failed_pages: bool = False

    log_level: str = "INFO"


settings = Settings()
