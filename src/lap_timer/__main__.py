import logging

from textual.logging import TextualHandler

from .config import Settings
from .UI import UI

def main() -> None:
    settings = Settings.fromEnv()
    logging.basicConfig(
        level=settings.log_level,
        handlers=[TextualHandler()],
    )
    UI(timer_settings=settings).run()

if __name__ == "__main__":
    main()
