"""Category taxonomy shown by the frontend."""

from app.configs import ALL_CATEGORIES
from app.schemas.category import Category

CATEGORY_TAXONOMY: tuple[Category, ...] = (
    Category(id=ALL_CATEGORIES, name="All Topics", color="gray"),
    Category(id="healthcare", name="Healthcare IT", color="red"),
    Category(id="ai", name="Artificial Intelligence", color="purple"),
    Category(id="cloud", name="Cloud Infrastructure", color="cyan"),
    Category(id="security", name="Cybersecurity", color="orange"),
    Category(id="data", name="Data Analytics", color="green"),
    Category(id="quantum", name="Quantum Computing", color="indigo"),
)


def available_categories(stored: set[str]) -> list[Category]:
    """Taxonomy entries present in ``stored``, in taxonomy order; "all" is always kept."""
    return [c for c in CATEGORY_TAXONOMY if c.id == ALL_CATEGORIES or c.id in stored]
