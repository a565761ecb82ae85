"""Unit tests for app.services.resource_store: CRUD, missing ids, unenforced category references."""

import threading
import unittest

from sqlalchemy import text

from app.core.database import Database, StoreError
from app.models import Category, Product
from app.services.resource_store import ResourceStore


class ResourceStoreTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = Database("sqlite://")
        self.db.create_all()
        self.categories = ResourceStore(self.db, Category)
        self.products = ResourceStore(self.db, Product)

    def tearDown(self) -> None:
        self.db.dispose()


class TestCategoryCrud(ResourceStoreTestCase):
    def test_empty_list(self) -> None:
        self.assertEqual(self.categories.list(), [])

    def test_create_assigns_increasing_ids(self) -> None:
        first = self.categories.create(name="Tools")
        second = self.categories.create(name="Garden")
        self.assertGreater(second.id, first.id)
        self.assertEqual([c.name for c in self.categories.list()], ["Tools", "Garden"])

    def test_get(self) -> None:
        created = self.categories.create(name="Tools")
        fetched = self.categories.get(created.id)
        self.assertEqual(fetched.name, "Tools")

    def test_get_missing_returns_none(self) -> None:
        self.assertIsNone(self.categories.get(999))

    def test_update(self) -> None:
        created = self.categories.create(name="Tools")
        self.assertEqual(self.categories.update(created.id, name="Hardware"), 1)
        self.assertEqual(self.categories.get(created.id).name, "Hardware")

    def test_update_missing_affects_zero_rows(self) -> None:
        self.assertEqual(self.categories.update(999, name="Nothing"), 0)

    def test_delete(self) -> None:
        created = self.categories.create(name="Tools")
        self.assertEqual(self.categories.delete(created.id), 1)
        self.assertIsNone(self.categories.get(created.id))

    def test_delete_missing_affects_zero_rows(self) -> None:
        self.assertEqual(self.categories.delete(999), 0)


class TestProductCategoryReference(ResourceStoreTestCase):
    """Product.category_id is declared as a foreign key but never enforced."""

    def test_create_with_unknown_category_succeeds(self) -> None:
        product = self.products.create(name="Hammer", price=9.5, category_id=4242)
        self.assertEqual(self.products.get(product.id).category_id, 4242)

    def test_update_to_unknown_category_succeeds(self) -> None:
        category = self.categories.create(name="Tools")
        product = self.products.create(name="Hammer", price=9.5, category_id=category.id)
        self.assertEqual(
            self.products.update(product.id, name="Hammer", price=10.0, category_id=777), 1
        )
        fetched = self.products.get(product.id)
        self.assertEqual(fetched.category_id, 777)
        self.assertEqual(fetched.price, 10.0)

    def test_deleting_referenced_category_leaves_dangling_product(self) -> None:
        category = self.categories.create(name="Tools")
        product = self.products.create(name="Hammer", price=9.5, category_id=category.id)
        self.assertEqual(self.categories.delete(category.id), 1)

        self.assertIsNone(self.categories.get(category.id))
        fetched = self.products.get(product.id)
        self.assertEqual(fetched.category_id, category.id)
        self.assertEqual([p.id for p in self.products.list()], [product.id])


class TestStoreErrors(ResourceStoreTestCase):
    def test_database_failure_raises_store_error(self) -> None:
        with self.db.engine.begin() as conn:
            conn.execute(text("DROP TABLE categories"))
        with self.assertRaises(StoreError) as ctx:
            self.categories.list()
        self.assertIn("no such table", ctx.exception.message)

    def test_integer_overflow_raises_store_error(self) -> None:
        with self.assertRaises(StoreError):
            self.products.create(name="Hammer", price=1.0, category_id=2**64)
        self.assertEqual(self.products.list(), [])

    def test_failed_write_is_rolled_back(self) -> None:
        with self.assertRaises(StoreError):
            self.categories.create(name=None)
        self.assertEqual(self.categories.list(), [])


class TestConcurrentWrites(ResourceStoreTestCase):
    def test_parallel_creates_get_distinct_ids(self) -> None:
        ids: list[int] = []
        ids_lock = threading.Lock()

        def worker(n: int) -> None:
            for i in range(10):
                row = self.categories.create(name=f"c-{n}-{i}")
                with ids_lock:
                    ids.append(row.id)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(ids), 80)
        self.assertEqual(len(set(ids)), 80)
        self.assertEqual(len(self.categories.list()), 80)


if __name__ == "__main__":
    unittest.main()
