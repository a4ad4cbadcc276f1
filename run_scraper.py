from __future__ import annotations
import logging

from internships.core.config import settings
from internships.services.scrape_service import run_scrape


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    # Every page is fetched sequentially; a full run can take several minutes.
    result = run_scrape(settings)
    print(result.model_dump_json(indent=2))
