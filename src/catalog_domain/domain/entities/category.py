"""Category entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A product category. ``active`` is the soft-delete flag."""

    id: int
    name: str
    description: str | None = None
    active: bool = True

    def __post_init__(self) -> None:
        if self.name is None or not self.name.strip():
            raise ValueError("Category name cannot be empty.")

    @classmethod
    def new(cls, name: str, description: str | None = None, active: bool = True) -> "Category":
        """Builds an unsaved category; the database assigns the id."""
        return cls(id=0, name=name, description=description, active=active)
