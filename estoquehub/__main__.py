"""Run the API with uvicorn: python -m estoquehub"""

# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("estoquehub.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
