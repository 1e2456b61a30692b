"""Text menu over a ContactStore. Validates raw input before calling the store."""

from collections.abc import Callable

from phonebook.application import ContactStore, Saved, SaveFailed
from phonebook.domain import Contact
from phonebook.infrastructure.phone import format_phone, has_digit

ReadLine = Callable[[str], str | None]
Write = Callable[[str], None]

YES = ("y", "yes")
RECENT_COUNT = 3

MENU_TEXT = """
========================================
MAIN MENU
========================================
1. Add contact
2. List contacts
3. Search contacts
4. Delete contact
5. Statistics
6. Exit
----------------------------------------"""


def _read_stdin(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


class Menu:
    """One interactive session. read_line returns None at end of input, which ends the session."""

    def __init__(
        self,
        store: ContactStore,
        *,
        read_line: ReadLine = _read_stdin,
        write: Write = print,
        default_region: str | None = None,
    ) -> None:
        self._store = store
        self._read_line = read_line
        self._write = write
        self._default_region = default_region
        self._running = False
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_contact,
            "2": self.show_all,
            "3": self.search_contacts,
            "4": self.delete_contact,
            "5": self.show_stats,
            "6": self.exit,
        }

    def run(self) -> None:
        self._write("PHONEBOOK")
        self._running = True
        while self._running:
            self._write(MENU_TEXT)
            choice = self._ask("Choose an action (1-6): ")
            if choice is None:
                self.exit()
                break
            action = self._actions.get(choice)
            if action is None:
                self._error("Unknown choice. Try again.")
                continue
            action()

    def add_contact(self) -> None:
        name = self._ask("Name: ") or ""
        if not name:
            self._error("Name must not be empty.")
            return
        phone = self._ask("Phone: ") or ""
        if not has_digit(phone):
            self._error("Phone number must contain at least one digit.")
            return
        contact = self._store.add(name, phone)
        self._report_save("Contact added.")
        self._show_details(contact)

    def show_all(self) -> None:
        self._show_contacts(self._store.list_all())

    def search_contacts(self) -> None:
        query = self._ask("Name or number to search for: ") or ""
        if not query:
            self._error("Search query must not be empty.")
            return
        results = self._store.search(query)
        if not results:
            self._write("No contacts found.")
            return
        self._write(f"Found {len(results)} contact(s).")
        self._show_contacts(results)
        if len(results) == 1 and self._confirm("Show contact details?"):
            self._show_details(results[0])

    def delete_contact(self) -> None:
        raw_id = self._ask("Id of the contact to delete: ") or ""
        if not raw_id.isdecimal():
            self._error("Id must be a number.")
            return
        contact = self._store.get(int(raw_id))
        if contact is None:
            self._error(f"No contact with id {raw_id}.")
            return
        self._show_details(contact)
        if not self._confirm("Delete this contact?"):
            self._write("Deletion cancelled.")
            return
        if self._store.delete(contact.id):
            self._report_save("Contact deleted.")
        else:
            self._error("Could not delete contact.")

    def show_stats(self) -> None:
        contacts = self._store.list_all()
        self._write(f"Total contacts: {len(contacts)}")
        if contacts:
            self._write(f"Last {RECENT_COUNT} contacts:")
            for contact in contacts[-RECENT_COUNT:]:
                self._write(f"  {contact.id}. {contact.name}")

    def exit(self) -> None:
        self._running = False
        if isinstance(self._store.last_save, SaveFailed):
            self._report_save("Contacts saved.", self._store.save())
        self._write("Goodbye.")

    def _ask(self, prompt: str) -> str | None:
        line = self._read_line(prompt)
        return None if line is None else line.strip()

    def _confirm(self, question: str) -> bool:
        answer = self._ask(f"{question} (y/n): ") or ""
        return answer.lower() in YES

    def _error(self, message: str) -> None:
        self._write(f"Error: {message}")

    def _report_save(self, message: str, result: Saved | SaveFailed | None = None) -> None:
        if result is None:
            result = self._store.last_save
        if isinstance(result, SaveFailed):
            self._write(f"Warning: changes are not saved to disk ({result.reason}).")
        else:
            self._write(message)

    def _show_contacts(self, contacts: list[Contact]) -> None:
        if not contacts:
            self._write("The phonebook is empty.")
            return
        self._write(f"CONTACTS ({len(contacts)}):")
        for contact in contacts:
            phone = format_phone(contact.phone, self._default_region)
            self._write(f"  {contact.id}. {contact.name:<15} | {phone}")

    def _show_details(self, contact: Contact) -> None:
        self._write(f"  Id:    {contact.id}")
        self._write(f"  Name:  {contact.name}")
        self._write(f"  Phone: {format_phone(contact.phone, self._default_region)}")
