# storefront_admin/tests/test_render.py

from django.test import SimpleTestCase

from storefront_admin.defaults import default_state
from storefront_admin.persistence import MemorySlots
from storefront_admin.carousel import CarouselScheduler
from storefront_admin.render import (
    PROJECTIONS,
    SORT_PRICE_ASC,
    SORT_PRICE_DESC,
    RenderSynchronizer,
    ViewControls,
    filter_products,
    project_messages_admin,
    project_products,
    project_products_admin,
    project_shop_info,
)
from storefront_admin.store import StateStore
from storefront_admin.tests.test_carousel import FakeTimer


def _product(title, price, category="pc", desc=""):
    return {"id": title, "title": title, "price": price, "category": category, "desc": desc}


class ProductFilterTests(SimpleTestCase):
    """
    GUARANTEES:
    - category match is exact and case-insensitive; "all" passes everything
    - search is a substring of title + description
    - price-desc is the exact reverse of price-asc
    """

    def setUp(self):
        self.products = default_state()["products"]

    def test_category_filter_ignores_case(self):
        listed = filter_products(self.products, ViewControls(category="PARTS"))
        self.assertEqual([p["category"] for p in listed], ["parts"])

    def test_all_passes_through_in_order(self):
        self.assertEqual(filter_products(self.products, ViewControls()), self.products)

    def test_search_spans_title_and_description(self):
        by_desc = filter_products(self.products, ViewControls(search="WORKSTATION"))
        self.assertEqual(len(by_desc), 1)
        self.assertIn("Studio", by_desc[0]["title"])

        by_title = filter_products(self.products, ViewControls(search="rtx"))
        self.assertEqual(len(by_title), 1)

    def test_sort_by_extracted_price(self):
        listed = filter_products(self.products, ViewControls(sort=SORT_PRICE_ASC))
        self.assertEqual([p["price"] for p in listed], ["USD 899", "USD 1,350", "USD 2,450"])

    def test_desc_is_reverse_of_asc(self):
        products = [
            _product("a", "USD 10"),
            _product("b", "free"),
            _product("c", "USD 10"),
            _product("d", "5"),
            _product("e", ""),
        ]
        for category in ("all", "pc", "none"):
            asc = filter_products(products, ViewControls(category=category, sort=SORT_PRICE_ASC))
            desc = filter_products(products, ViewControls(category=category, sort=SORT_PRICE_DESC))
            self.assertEqual(desc, list(reversed(asc)))

    def test_unparsable_prices_sort_as_zero(self):
        products = [_product("x", "USD 5"), _product("y", "call us")]
        listed = filter_products(products, ViewControls(sort=SORT_PRICE_ASC))
        self.assertEqual([p["title"] for p in listed], ["y", "x"])

    def test_search_to_zero_results_shows_empty_state(self):
        state = default_state()
        one = filter_products(state["products"], ViewControls(category="parts"))
        self.assertEqual(len(one), 1)

        view = project_products(state, ViewControls(category="parts", search="keyboard"))
        self.assertEqual(view, {"cards": [], "empty": True})


class ProjectionTests(SimpleTestCase):

    def test_shop_info_fallbacks(self):
        view = project_shop_info({"shopInfo": {"title": "", "tagline": ""}})
        self.assertEqual(view["site_title"], "MSA Tech Store")
        self.assertTrue(view["hero_headline"])

    def test_messages_newest_first(self):
        state = {
            "messages": [
                {"id": "m1", "name": "", "message": "first", "time": ""},
                {"id": "m2", "name": "Layla", "message": "Hello", "time": "2025-01-02T10:00:00+00:00"},
            ]
        }
        view = project_messages_admin(state)
        self.assertEqual(view[0]["name"], "Layla")
        self.assertEqual(view[1]["name"], "Anonymous")
        self.assertTrue(view[0]["time"])

    def test_every_projection_handles_the_seed(self):
        state = default_state()
        for region, project in PROJECTIONS.items():
            self.assertIsNotNone(project(state, ViewControls()), region)

    def test_imported_values_that_are_not_text(self):
        state = default_state()
        state["products"].append({"id": "p_x", "title": 123, "category": 7, "price": 10})
        state["products"].append("not a record")
        state["slider"].append(None)
        state["categories"].append(7)
        state["shopInfo"] = ["broken"]

        controls = ViewControls(category="7")
        cards = project_products(state, controls)["cards"]
        self.assertEqual([c["thumb"]["text"] for c in cards], ["123"])
        self.assertEqual(project_products_admin(state)[-1]["thumb"]["text"], "123")
        self.assertEqual(len(PROJECTIONS["carousel"](state, ViewControls())["slides"]), 3)
        self.assertEqual(project_shop_info(state)["site_title"], "MSA Tech Store")
        for region, project in PROJECTIONS.items():
            self.assertIsNotNone(project(state, ViewControls()), region)


class RenderSynchronizerTests(SimpleTestCase):

    def setUp(self):
        self.store = StateStore(MemorySlots())
        self.store.load()

    def test_unmounted_regions_are_skipped(self):
        sync = RenderSynchronizer(self.store, mounted={"faq"})
        sync.render("faq", "services")

        self.assertEqual(list(sync.drain()), ["faq"])
        self.assertNotIn("services", sync.views)

    def test_unknown_region_does_not_fail_the_pass(self):
        sync = RenderSynchronizer(self.store)
        with self.assertLogs("storefront_admin.render", level="WARNING"):
            sync.render("nope", "blog")
        self.assertIn("blog", sync.drain())

    def test_full_render_projects_everything(self):
        sync = RenderSynchronizer(self.store)
        sync.full_render()
        self.assertEqual(set(sync.drain()), set(PROJECTIONS))
        self.assertEqual(sync.drain(), {})

    def test_render_rebuilds_from_current_state(self):
        sync = RenderSynchronizer(self.store)
        sync.render("services")
        self.store.state["services"] = []
        sync.render("services")

        self.assertEqual(sync.views["services"], [])

    def test_controls_drive_product_region(self):
        sync = RenderSynchronizer(self.store)
        sync.set_controls(category="parts")
        sync.render("products")

        self.assertEqual(len(sync.views["products"]["cards"]), 1)


class CarouselRenderTests(SimpleTestCase):
    """
    GUARANTEES:
    - rendering the carousel reads the scheduler; it never resets or restarts it
    - only a slide count the scheduler has not seen yet is adopted on render
    """

    def setUp(self):
        self.store = StateStore(MemorySlots())
        self.store.load()
        self.timers = []
        self.scheduler = CarouselScheduler(interval=4.2, timer_factory=self._timer)
        self.sync = RenderSynchronizer(self.store, scheduler=self.scheduler)

    def _timer(self, interval, function):
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer

    def test_first_render_adopts_count_and_starts(self):
        self.sync.render("carousel")
        self.assertEqual(self.scheduler.slide_count, 3)
        self.assertTrue(self.scheduler.running)
        self.assertEqual(len(self.timers), 1)

    def test_render_keeps_index_and_pause(self):
        self.sync.render("carousel")
        self.scheduler.select(2)
        self.scheduler.pointer_enter()
        timers = len(self.timers)

        self.sync.render("carousel")
        self.sync.full_render()

        self.assertEqual(self.scheduler.index, 2)
        self.assertFalse(self.scheduler.running)
        self.assertEqual(len(self.timers), timers)
        self.assertEqual(self.sync.views["carousel"]["active"], 2)

    def test_render_does_not_restart_a_running_tick(self):
        self.sync.render("carousel")
        self.timers[-1].fire()
        live = self.timers[-1]

        self.sync.render("carousel")

        self.assertEqual(self.scheduler.index, 1)
        self.assertFalse(live.cancelled)
        self.assertEqual(self.sync.views["carousel"]["active"], 1)

    def test_reload_carousel_restarts_from_first_slide(self):
        self.sync.render("carousel")
        self.scheduler.select(2)
        self.store.state["slider"].pop()

        self.sync.reload_carousel()

        self.assertEqual(self.scheduler.slide_count, 2)
        self.assertEqual(self.scheduler.index, 0)
        self.assertTrue(self.scheduler.running)
