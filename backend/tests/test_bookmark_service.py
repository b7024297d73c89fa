"""
Bookmarks Backend: Bookmark Service Tests
=========================================

What:  BookmarkService CRUD and order maintenance against a real (in-memory
       SQLite) database.

What we test:
    ✅ create appends to the end of its category (max + 1)
    ✅ delete and category moves close order gaps
    ✅ partial updates keep omitted fields
    ✅ reorder assigns positions and appends unmentioned bookmarks
    ✅ listing follows category order, unlisted categories last
    ✅ orders stay 0..n-1 per category after mixed operations
"""

from typing import Dict, List

import pytest

from bookmarks.exceptions import NotFoundError, ValidationError
from bookmarks.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from bookmarks.services.bookmark_service import BookmarkService, normalize_category, sanitize_url
from bookmarks.services.category_service import CategoryService


def orders_by_category(bookmarks: List[BookmarkResponse]) -> Dict[str, List[int]]:
    grouped: Dict[str, List[int]] = {}
    for bookmark in bookmarks:
        grouped.setdefault(bookmark.category, []).append(bookmark.order)
    return {category: sorted(orders) for category, orders in grouped.items()}


def assert_contiguous(bookmarks: List[BookmarkResponse]) -> None:
    for category, orders in orders_by_category(bookmarks).items():
        assert orders == list(range(len(orders))), f"gap in category {category!r}: {orders}"


class TestHelpers:

    def test_normalize_category(self):
        assert normalize_category(None) == ""
        assert normalize_category("   ") == ""
        assert normalize_category("  dev ") == "dev"

    def test_sanitize_url_adds_https(self):
        assert sanitize_url("example.com") == "https://example.com"
        assert sanitize_url("  example.com/path ") == "https://example.com/path"

    def test_sanitize_url_keeps_scheme(self):
        assert sanitize_url("http://example.com") == "http://example.com"
        assert sanitize_url("HTTPS://Example.com") == "HTTPS://Example.com"


class TestBookmarkCreate:

    def setup_method(self):
        self.service = BookmarkService()

    @pytest.mark.asyncio
    async def test_create_appends_within_category(self, db_session):
        """Each new bookmark gets max(order) + 1 of its own category."""
        a = await self.service.create_bookmark(db_session, BookmarkCreate(title="A", url="a.com", category="dev"))
        b = await self.service.create_bookmark(db_session, BookmarkCreate(title="B", url="b.com", category="dev"))
        c = await self.service.create_bookmark(db_session, BookmarkCreate(title="C", url="c.com", category="news"))

        assert (a.order, b.order, c.order) == (0, 1, 0)

    @pytest.mark.asyncio
    async def test_create_normalizes_fields(self, db_session):
        created = await self.service.create_bookmark(
            db_session,
            BookmarkCreate(title="  Docs ", url=" docs.python.org ", category="   ", description="  "),
        )

        assert created.title == "Docs"
        assert created.url == "https://docs.python.org"
        assert created.category == ""
        assert created.description is None
        assert created.visible is True
        assert created.id

    @pytest.mark.asyncio
    async def test_uncategorized_bookmarks_are_ordered(self, db_session):
        """Uncategorized ("") bookmarks take part in order maintenance too."""
        first = await self.service.create_bookmark(db_session, BookmarkCreate(title="A", url="a.com"))
        second = await self.service.create_bookmark(db_session, BookmarkCreate(title="B", url="b.com", category=""))

        assert (first.order, second.order) == (0, 1)

    @pytest.mark.asyncio
    async def test_create_respects_visible_false(self, db_session):
        created = await self.service.create_bookmark(
            db_session, BookmarkCreate(title="Secret", url="s.com", visible=False)
        )
        assert created.visible is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"url": "a.com"},
            {"title": "A"},
            {"title": "   ", "url": "a.com"},
            {"title": "A", "url": "  "},
        ],
    )
    async def test_create_requires_title_and_url(self, db_session, payload):
        with pytest.raises(ValidationError, match="标题和链接不能为空"):
            await self.service.create_bookmark(db_session, BookmarkCreate(**payload))


class TestBookmarkUpdate:

    def setup_method(self):
        self.service = BookmarkService()

    async def _seed(self, db_session):
        created = []
        for title, category in [("A", "dev"), ("B", "dev"), ("C", "dev"), ("X", "news")]:
            created.append(
                await self.service.create_bookmark(
                    db_session, BookmarkCreate(title=title, url=f"{title.lower()}.com", category=category)
                )
            )
        return created

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, db_session):
        a, *_ = await self._seed(db_session)

        updated = await self.service.update_bookmark(db_session, a.id, BookmarkUpdate(title="A2"))

        assert updated.title == "A2"
        assert updated.url == a.url
        assert updated.category == "dev"
        assert updated.order == 0
        assert updated.visible is True

    @pytest.mark.asyncio
    async def test_update_without_category_does_not_move(self, db_session):
        """Omitting category must not be read as 'move to uncategorized'."""
        _, b, _, _ = await self._seed(db_session)

        updated = await self.service.update_bookmark(db_session, b.id, BookmarkUpdate(visible=False))

        assert updated.category == "dev"
        assert updated.order == 1
        assert updated.visible is False

    @pytest.mark.asyncio
    async def test_category_change_moves_to_end_and_closes_gap(self, db_session):
        a, b, c, x = await self._seed(db_session)

        moved = await self.service.update_bookmark(db_session, a.id, BookmarkUpdate(category="news"))

        assert moved.category == "news"
        assert moved.order == 1  # after X

        listing = {bm.id: bm for bm in await self.service.list_bookmarks(db_session)}
        assert listing[b.id].order == 0
        assert listing[c.id].order == 1
        assert listing[x.id].order == 0
        assert_contiguous(list(listing.values()))

    @pytest.mark.asyncio
    async def test_same_category_after_trim_is_not_a_move(self, db_session):
        _, b, _, _ = await self._seed(db_session)

        updated = await self.service.update_bookmark(db_session, b.id, BookmarkUpdate(category="  dev "))

        assert updated.order == 1

    @pytest.mark.asyncio
    async def test_update_url_is_sanitized(self, db_session):
        a, *_ = await self._seed(db_session)

        updated = await self.service.update_bookmark(db_session, a.id, BookmarkUpdate(url="new.example"))

        assert updated.url == "https://new.example"

    @pytest.mark.asyncio
    async def test_update_rejects_blank_title(self, db_session):
        a, *_ = await self._seed(db_session)

        with pytest.raises(ValidationError):
            await self.service.update_bookmark(db_session, a.id, BookmarkUpdate(title="  "))

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.update_bookmark(db_session, "missing-id", BookmarkUpdate(title="x"))


class TestBookmarkDelete:

    def setup_method(self):
        self.service = BookmarkService()

    @pytest.mark.asyncio
    async def test_delete_closes_gap(self, db_session):
        created = [
            await self.service.create_bookmark(
                db_session, BookmarkCreate(title=t, url=f"{t}.com", category="dev")
            )
            for t in ("a", "b", "c", "d")
        ]

        deleted = await self.service.delete_bookmark(db_session, created[1].id)

        assert deleted.id == created[1].id
        listing = await self.service.list_bookmarks(db_session)
        assert [bm.title for bm in listing] == ["a", "c", "d"]
        assert [bm.order for bm in listing] == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_delete_only_shifts_same_category(self, db_session):
        a = await self.service.create_bookmark(db_session, BookmarkCreate(title="a", url="a.com", category="dev"))
        await self.service.create_bookmark(db_session, BookmarkCreate(title="b", url="b.com", category="dev"))
        n0 = await self.service.create_bookmark(db_session, BookmarkCreate(title="n0", url="n0.com", category="news"))
        n1 = await self.service.create_bookmark(db_session, BookmarkCreate(title="n1", url="n1.com", category="news"))

        await self.service.delete_bookmark(db_session, a.id)

        listing = {bm.id: bm for bm in await self.service.list_bookmarks(db_session)}
        assert listing[n0.id].order == 0
        assert listing[n1.id].order == 1

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.delete_bookmark(db_session, "missing-id")


class TestBookmarkReorder:

    def setup_method(self):
        self.service = BookmarkService()

    @pytest.mark.asyncio
    async def test_reorder_swaps_two(self, db_session):
        a = await self.service.create_bookmark(db_session, BookmarkCreate(title="a", url="a.com"))
        b = await self.service.create_bookmark(db_session, BookmarkCreate(title="b", url="b.com"))

        listing = await self.service.reorder_bookmarks(db_session, [b.id, a.id])

        by_id = {bm.id: bm for bm in listing}
        assert by_id[a.id].order == 1
        assert by_id[b.id].order == 0
        assert [bm.id for bm in listing] == [b.id, a.id]

    @pytest.mark.asyncio
    async def test_unmentioned_bookmarks_are_appended(self, db_session):
        a, b, c = [
            await self.service.create_bookmark(db_session, BookmarkCreate(title=t, url=f"{t}.com"))
            for t in ("a", "b", "c")
        ]

        listing = await self.service.reorder_bookmarks(db_session, [c.id])

        by_id = {bm.id: bm.order for bm in listing}
        assert by_id == {c.id: 0, a.id: 1, b.id: 2}

    @pytest.mark.asyncio
    async def test_unknown_ids_are_ignored(self, db_session):
        a = await self.service.create_bookmark(db_session, BookmarkCreate(title="a", url="a.com"))

        listing = await self.service.reorder_bookmarks(db_session, ["ghost", a.id])

        assert [(bm.id, bm.order) for bm in listing] == [(a.id, 1)]


class TestBookmarkListing:

    def setup_method(self):
        self.service = BookmarkService()
        self.categories = CategoryService()

    @pytest.mark.asyncio
    async def test_listing_follows_category_order(self, db_session):
        for title, category in [("d1", "dev"), ("n1", "news"), ("t1", "tools"), ("d2", "dev")]:
            await self.service.create_bookmark(
                db_session, BookmarkCreate(title=title, url=f"{title}.com", category=category)
            )
        await self.categories.reorder_categories(db_session, ["news", "dev"])

        listing = await self.service.list_bookmarks(db_session)

        # "tools" is unlisted and sorts after the listed categories
        assert [bm.title for bm in listing] == ["n1", "d1", "d2", "t1"]

    @pytest.mark.asyncio
    async def test_hidden_bookmarks_filtered_on_request(self, db_session):
        await self.service.create_bookmark(db_session, BookmarkCreate(title="shown", url="a.com"))
        await self.service.create_bookmark(db_session, BookmarkCreate(title="hidden", url="b.com", visible=False))

        public = await self.service.list_bookmarks(db_session, include_hidden=False)
        everything = await self.service.list_bookmarks(db_session)

        assert [bm.title for bm in public] == ["shown"]
        assert {bm.title for bm in everything} == {"shown", "hidden"}

    @pytest.mark.asyncio
    async def test_orders_stay_contiguous_after_mixed_operations(self, db_session):
        ids = {}
        for title, category in [
            ("a", "dev"), ("b", "dev"), ("c", "dev"),
            ("x", "news"), ("y", "news"),
            ("u", ""),
        ]:
            created = await self.service.create_bookmark(
                db_session, BookmarkCreate(title=title, url=f"{title}.com", category=category)
            )
            ids[title] = created.id

        await self.service.update_bookmark(db_session, ids["b"], BookmarkUpdate(category="news"))
        await self.service.delete_bookmark(db_session, ids["x"])
        await self.service.update_bookmark(db_session, ids["u"], BookmarkUpdate(category="dev"))
        await self.service.update_bookmark(db_session, ids["a"], BookmarkUpdate(category=""))
        await self.service.delete_bookmark(db_session, ids["c"])
        await self.service.create_bookmark(db_session, BookmarkCreate(title="z", url="z.com", category="news"))

        listing = await self.service.list_bookmarks(db_session)

        assert_contiguous(listing)
        assert orders_by_category(listing) == {"dev": [0], "news": [0, 1, 2], "": [0]}
