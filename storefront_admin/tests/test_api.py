# storefront_admin/tests/test_api.py

import json

from django.conf import settings
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from storefront_admin.carousel import get_scheduler
from storefront_admin.models import StoreSlot
from storefront_admin.render import PROJECTIONS
from storefront_admin.tests.test_images import _png_bytes

PASSWORD = settings.STOREFRONT["DEFAULT_ADMIN_PASSWORD"]


class StorefrontAPITestCase(TestCase):

    def setUp(self):
        self.client = APIClient()

    def tearDown(self):
        get_scheduler().stop()

    def admin_post(self, url, data=None, **kwargs):
        kwargs.setdefault("format", "json")
        return self.client.post(url, data or {}, HTTP_X_ADMIN_PASSWORD=PASSWORD, **kwargs)

    def admin_get(self, url, params=None):
        return self.client.get(url, params or {}, HTTP_X_ADMIN_PASSWORD=PASSWORD)

    def stored(self):
        return json.loads(StoreSlot.objects.get(key=settings.STOREFRONT["STORE_SLOT"]).value)


class RenderAPITests(StorefrontAPITestCase):

    def test_page_load_renders_every_region(self):
        res = self.client.get("/api/render/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(set(res.data["regions"]), set(PROJECTIONS))
        self.assertEqual(len(self.stored()["products"]), 3)

    def test_filtered_products_region(self):
        res = self.client.get("/api/render/products/", {"category": "parts", "search": "nothing-here"})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["view"], {"cards": [], "empty": True})

    def test_unknown_region(self):
        self.assertEqual(self.client.get("/api/render/sidebar/").status_code, status.HTTP_404_NOT_FOUND)

    def test_show_products_sorted(self):
        res = self.client.get("/api/show-products/", {"sort": "price-desc"})
        prices = [c["price"] for c in res.data["regions"]["products"]["cards"]]
        self.assertEqual(prices, ["USD 2,450", "USD 1,350", "USD 899"])


class AdminGateAPITests(StorefrontAPITestCase):

    def test_gated_endpoint_needs_exact_secret(self):
        res = self.client.post("/api/save-category/", {"name": "x"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

        res = self.client.post(
            "/api/save-category/", {"name": "x"}, format="json",
            HTTP_X_ADMIN_PASSWORD=PASSWORD.swapcase(),
        )
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

        res = self.admin_post("/api/save-category/", {"name": "x"})
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

    def test_login(self):
        res = self.client.post("/api/admin/login/", {"password": "wrong"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(res.data, {"error": "Incorrect password (demo).", "blocking": True})

        res = self.client.post("/api/admin/login/", {"password": PASSWORD, "remember": True}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertTrue(res.data["unlocked"])
        self.assertTrue(res.data["last_login"])
        self.assertEqual(res.data["notices"], ["Admin unlocked"])
        self.assertIn("messages_admin", res.data["regions"])

    def test_change_and_reset_password(self):
        res = self.admin_post("/api/admin/change-password/", {"new_password": ""})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

        res = self.admin_post("/api/admin/change-password/", {"new_password": "n3w"})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(self.admin_post("/api/save-category/", {"name": "x"}).status_code, 403)

        res = self.client.post(
            "/api/admin/reset-password/", {"confirm": True}, format="json", HTTP_X_ADMIN_PASSWORD="n3w"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(self.admin_post("/api/save-category/", {"name": "y"}).status_code, 201)


class CollectionAPITests(StorefrontAPITestCase):

    def test_product_lifecycle(self):
        res = self.admin_post("/api/save-product/", {"title": "Webcam", "price": "USD 60", "category": "accessories"})
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["notices"], ["Product added"])
        product_id = res.data["item"]["id"]
        self.assertEqual(self.stored()["products"][-1]["id"], product_id)

        res = self.admin_post("/api/edit-product/", {"id": product_id, "price": "USD 55"})
        self.assertEqual(res.data["item"]["price"], "USD 55")
        self.assertEqual(res.data["item"]["title"], "Webcam")

        res = self.admin_post("/api/delete-product/", {"id": product_id})
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(res.data["prompt"], "Delete product?")
        self.assertEqual(self.stored()["products"][-1]["id"], product_id)

        res = self.admin_post("/api/delete-product/", {"id": product_id, "confirm": True})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertNotIn(product_id, [p["id"] for p in self.stored()["products"]])

    def test_missing_title_is_a_notice(self):
        res = self.admin_post("/api/save-product/", {"title": ""})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data, {"error": "Product title required", "notice": True})

    def test_numeric_title_is_saved_as_text(self):
        res = self.admin_post("/api/save-product/", {"title": 123, "price": 45})
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(self.stored()["products"][-1]["title"], "123")

        res = self.client.get("/api/render/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["regions"]["products_admin"][-1]["thumb"]["text"], "123")

    def test_structured_title_is_a_notice(self):
        self.client.get("/api/show-slides/")
        before = self.stored()
        res = self.admin_post("/api/save-product/", {"title": {"en": "Webcam"}})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"], "Product title must be text")
        self.assertEqual(self.stored(), before)

    def test_edit_unknown_id(self):
        res = self.admin_post("/api/edit-services/", {"id": "sv_nope", "title": "x"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"], "Service not found")

    def test_product_image_upload(self):
        upload = SimpleUploadedFile("p.png", _png_bytes(), content_type="image/png")
        res = self.admin_post("/api/save-product/", {"title": "Pic", "image": upload}, format="multipart")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertTrue(res.data["item"]["img"].startswith("data:image/png;base64,"))

    def test_rejected_image_aborts_save(self):
        upload = SimpleUploadedFile("a.txt", b"text", content_type="text/plain")
        res = self.admin_post("/api/save-product/", {"title": "Pic", "image": upload}, format="multipart")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(len(self.stored()["products"]), 3)

    def test_generic_faq_endpoints(self):
        res = self.admin_post("/api/save-faq/", {"q": "Warranty?", "a": "One year."})
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

        res = self.client.get("/api/show-faq/")
        self.assertEqual(res.data["regions"]["faq"][-1], {"id": res.data["items"][-1]["id"], "question": "Warranty?", "answer": "One year."})

    def test_move_first_up_is_noop(self):
        self.client.get("/api/show-slides/")
        before = [s["id"] for s in self.stored()["slider"]]
        res = self.admin_post("/api/move-slide/", {"index": 0, "direction": "up"})
        self.assertFalse(res.data["moved"])
        self.assertEqual([s["id"] for s in self.stored()["slider"]], before)

        res = self.admin_post("/api/move-slide/", {"index": 0, "direction": "down"})
        self.assertTrue(res.data["moved"])

    def test_clear_slides_needs_confirmation(self):
        res = self.admin_post("/api/clear-slides/")
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(res.data["prompt"], "Clear all slides?")

        self.admin_post("/api/clear-slides/", {"confirm": True})
        self.assertEqual(self.stored()["slider"], [])

    def test_category_delete_keeps_product_category(self):
        res = self.admin_post("/api/delete-category/", {"name": "parts"})
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(
            res.data["prompt"], 'Delete category "parts"? Existing products will keep their category.'
        )

        res = self.admin_post("/api/delete-category/", {"name": "parts", "confirm": True})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        state = self.stored()
        self.assertNotIn("parts", state["categories"])
        self.assertIn("parts", [p["category"] for p in state["products"]])


class ContactAPITests(StorefrontAPITestCase):

    def test_message_shows_first_in_inbox(self):
        self.client.post("/api/save-message/", {"name": "Omar", "message": "Earlier"}, format="json")
        res = self.client.post("/api/save-message/", {"name": "Layla", "message": "Hello"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["notices"], ["Message received (stored in local admin inbox)"])

        res = self.admin_get("/api/show-messages/")
        first = res.data["regions"]["messages_admin"][0]
        self.assertEqual((first["name"], first["message"]), ("Layla", "Hello"))

    def test_inbox_is_gated(self):
        self.assertEqual(self.client.get("/api/show-messages/").status_code, status.HTTP_403_FORBIDDEN)

    def test_export_messages(self):
        self.client.post("/api/save-message/", {"name": "Layla", "message": "Hello"}, format="json")
        res = self.admin_get("/api/export-messages/")
        self.assertIn('filename="msa-messages.json"', res["Content-Disposition"])
        self.assertEqual(json.loads(res.content)[0]["name"], "Layla")


class BackupAPITests(StorefrontAPITestCase):

    def test_export_then_import_round_trip(self):
        self.admin_post("/api/save-category/", {"name": "monitors"})
        res = self.admin_get("/api/export-store/")
        self.assertIn('filename="msa-store-backup.json"', res["Content-Disposition"])
        before = self.stored()

        upload = SimpleUploadedFile("msa-store-backup.json", res.content, content_type="application/json")
        res = self.admin_post("/api/import-store/", {"file": upload, "confirm": "true"}, format="multipart")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(self.stored(), before)

    def test_import_without_messages_key(self):
        self.client.post("/api/save-message/", {"name": "Layla", "message": "Hello"}, format="json")
        res = self.admin_post("/api/import-store/", {"document": {"categories": ["pc"]}, "confirm": True})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(self.stored()["messages"], [])

    def test_invalid_import_is_blocking(self):
        self.admin_post("/api/save-category/", {"name": "monitors"})
        res = self.admin_post("/api/import-store/", {"document": "{oops", "confirm": True})
        self.assertEqual(res.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertIn("monitors", self.stored()["categories"])

    def test_wipe(self):
        self.admin_post("/api/save-category/", {"name": "monitors"})
        self.assertEqual(self.admin_post("/api/wipe-store/").status_code, status.HTTP_409_CONFLICT)

        res = self.admin_post("/api/wipe-store/", {"confirm": True})
        self.assertEqual(res.data["notices"], ["Local store reset"])
        self.assertNotIn("monitors", self.stored()["categories"])


class CarouselAPITests(StorefrontAPITestCase):

    def test_events(self):
        self.client.get("/api/render/carousel/")

        res = self.client.post("/api/carousel/", {"event": "select", "index": 5}, format="json")
        self.assertEqual(res.data["index"], 2)

        res = self.client.post("/api/carousel/", {"event": "pointer", "inside": True}, format="json")
        self.assertFalse(res.data["running"])

        res = self.client.post("/api/carousel/", {"event": "visibility", "hidden": False}, format="json")
        self.assertTrue(res.data["running"])

        res = self.client.post("/api/carousel/", {"event": "bogus"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
