from django.urls import path

from .category import (
    DeleteCategoryAPIView,
    SaveCategoryAPIView,
    ShowCategoryAPIView,
    UpdateCategoryOrderAPIView,
)
from .contact import ClearMessagesAPIView, ExportMessagesAPIView, SaveMessageAPIView, ShowMessagesAPIView
from .content import (
    DeleteContentAPIView,
    EditContentAPIView,
    MoveContentAPIView,
    SaveContentAPIView,
    ShowContentAPIView,
)
from .home_page import (
    CarouselStateAPIView,
    ClearSlidesAPIView,
    DeleteSlideAPIView,
    EditSlideAPIView,
    MoveSlideAPIView,
    SaveSlideAPIView,
    ShowSlidesAPIView,
    SlideImageAPIView,
)
from .product import (
    AddToCartAPIView,
    DeleteProductAPIView,
    EditProductAPIView,
    SaveProductAPIView,
    ShowProductsAPIView,
    ShowSpecificProductAPIView,
    UpdateProductOrderAPIView,
)
from .site_details import DeleteLogoAPIView, SaveLogoAPIView, SaveShopInfoAPIView, ShowShopInfoAPIView
from .views import (
    DebugDumpAPIView,
    ExportStoreAPIView,
    ImportStoreAPIView,
    ShowRegionAPIView,
    ShowRegionsAPIView,
    WipeStoreAPIView,
)

# services, deals, faq, blog and laptops share the generic collection views
CONTENT = "<str:collection>"

urlpatterns = [
    # Rendering
    path("render/", ShowRegionsAPIView.as_view(), name="render"),
    path("render/<str:region>/", ShowRegionAPIView.as_view(), name="render_region"),

    # Shop info
    path("show-shop-info/", ShowShopInfoAPIView.as_view(), name="show_shop_info"),
    path("save-shop-info/", SaveShopInfoAPIView.as_view(), name="save_shop_info"),
    path("save-logo/", SaveLogoAPIView.as_view(), name="save_logo"),
    path("delete-logo/", DeleteLogoAPIView.as_view(), name="delete_logo"),

    # Hero carousel
    path("show-slides/", ShowSlidesAPIView.as_view(), name="show_slides"),
    path("save-slide/", SaveSlideAPIView.as_view(), name="save_slide"),
    path("edit-slide/", EditSlideAPIView.as_view(), name="edit_slide"),
    path("delete-slide/", DeleteSlideAPIView.as_view(), name="delete_slide"),
    path("move-slide/", MoveSlideAPIView.as_view(), name="move_slide"),
    path("slide-image/", SlideImageAPIView.as_view(), name="slide_image"),
    path("clear-slides/", ClearSlidesAPIView.as_view(), name="clear_slides"),
    path("carousel/", CarouselStateAPIView.as_view(), name="carousel"),

    # Categories
    path("show-categories/", ShowCategoryAPIView.as_view(), name="show_categories"),
    path("save-category/", SaveCategoryAPIView.as_view(), name="save_category"),
    path("delete-category/", DeleteCategoryAPIView.as_view(), name="delete_category"),
    path("move-category/", UpdateCategoryOrderAPIView.as_view(), name="move_category"),

    # Products
    path("show-products/", ShowProductsAPIView.as_view(), name="show_products"),
    path("show-product/", ShowSpecificProductAPIView.as_view(), name="show_product"),
    path("add-to-cart/", AddToCartAPIView.as_view(), name="add_to_cart"),
    path("save-product/", SaveProductAPIView.as_view(), name="save_product"),
    path("edit-product/", EditProductAPIView.as_view(), name="edit_product"),
    path("delete-product/", DeleteProductAPIView.as_view(), name="delete_product"),
    path("move-product/", UpdateProductOrderAPIView.as_view(), name="move_product"),

    # Contact messages
    path("save-message/", SaveMessageAPIView.as_view(), name="save_message"),
    path("show-messages/", ShowMessagesAPIView.as_view(), name="show_messages"),
    path("clear-messages/", ClearMessagesAPIView.as_view(), name="clear_messages"),
    path("export-messages/", ExportMessagesAPIView.as_view(), name="export_messages"),

    # Backup / restore / reset
    path("export-store/", ExportStoreAPIView.as_view(), name="export_store"),
    path("import-store/", ImportStoreAPIView.as_view(), name="import_store"),
    path("wipe-store/", WipeStoreAPIView.as_view(), name="wipe_store"),
    path("debug-dump/", DebugDumpAPIView.as_view(), name="debug_dump"),

    # Services, deals, faq, blog, laptops
    path(f"show-{CONTENT}/", ShowContentAPIView.as_view(), name="show_content"),
    path(f"save-{CONTENT}/", SaveContentAPIView.as_view(), name="save_content"),
    path(f"edit-{CONTENT}/", EditContentAPIView.as_view(), name="edit_content"),
    path(f"delete-{CONTENT}/", DeleteContentAPIView.as_view(), name="delete_content"),
    path(f"move-{CONTENT}/", MoveContentAPIView.as_view(), name="move_content"),
]
