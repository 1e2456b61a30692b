"""
Interactive phonebook: text menu + ContactStore + file storage.
Run: python -m phonebook_menu (with .env or PHONEBOOK_* env vars set).
"""
import logging

from phonebook.application import ContactStore
from phonebook.config import get_config
from phonebook.infrastructure import FileContactRepository, codec_for
from phonebook_menu.menu import Menu

logger = logging.getLogger(__name__)


def main() -> None:
    config = get_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.log_level_value,
    )
    repo = FileContactRepository(config.file, codec_for(config.format))
    store = ContactStore(repo)
    logger.info("Phonebook running on %s (%d contacts)", repo.path, len(store))
    Menu(store, default_region=config.default_region).run()


if __name__ == "__main__":
    main()
