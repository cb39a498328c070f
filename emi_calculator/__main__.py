"""Run the calculator service: python -m emi_calculator"""

import uvicorn

from emi_calculator.config import settings


def main() -> None:
    from emi_calculator.api.main import app

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the JSON handler installed by setup_logging
    )


if __name__ == "__main__":
    main()
