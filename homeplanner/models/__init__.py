from homeplanner.models.base import Base
from homeplanner.models.budget_settings import BudgetSettings
from homeplanner.models.category import Category
from homeplanner.models.item import Item
from homeplanner.models.item_link import ItemLink
from homeplanner.models.item_suggestion import ItemSuggestion
from homeplanner.models.tag import Tag, item_tags
from homeplanner.models.user import User

__all__ = [
    "Base",
    "BudgetSettings",
    "Category",
    "Item",
    "ItemLink",
    "ItemSuggestion",
    "Tag",
    "User",
    "item_tags",
]
