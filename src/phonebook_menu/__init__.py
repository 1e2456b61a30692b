"""Interactive text menu for the phonebook. Run: python -m phonebook_menu"""

from phonebook_menu.menu import Menu

__all__ = ["Menu"]
