# Models package: importing it registers every table on Base.metadata
from bookmarks.models.bookmark import Bookmark
from bookmarks.models.category_order import CategoryOrder
from bookmarks.models.setting import SiteSetting

__all__ = ["Bookmark", "CategoryOrder", "SiteSetting"]
