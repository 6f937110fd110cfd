"""User role."""

from enum import Enum


class UserRole(str, Enum):
    MANAGER = "MANAGER"
    PICKER = "PICKER"
    RECEIVER = "RECEIVER"
    CONTROLLER = "CONTROLLER"

    @property
    def icon(self) -> str:
        return _ROLE_DISPLAY[self][0]

    @property
    def display_name(self) -> str:
        return _ROLE_DISPLAY[self][1]

    def formatted(self) -> str:
        """Icon and display name, e.g. for menus and listings."""
        return f"{self.icon} {self.display_name}"


_ROLE_DISPLAY = {
    UserRole.MANAGER: ("👔", "Manager"),
    UserRole.PICKER: ("📦", "Picker"),
    UserRole.RECEIVER: ("📥", "Receiver"),
    UserRole.CONTROLLER: ("📊", "Controller"),
}
