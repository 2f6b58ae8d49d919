"""
RENDER SYNCHRONIZER

One projection per view region. Each is a pure function
`(state, controls) -> presentation` that rebuilds the region from scratch;
nothing is diffed and no region keeps state between renders.

The synchronizer holds the live product controls, the set of regions that
are mounted in the current view tree and the last presentation of each.
"""
import logging
from dataclasses import dataclass, replace

from .utilities import format_timestamp, safe_parse_number

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"
SORT_DEFAULT = "default"
SORT_PRICE_ASC = "price-asc"
SORT_PRICE_DESC = "price-desc"

SITE_TITLE_FALLBACK = "MSA Tech Store"
SITE_TAG_FALLBACK = "Hardware • Services • Support"
HERO_HEADLINE_FALLBACK = "Modern IT hardware, built for performance"
HERO_SUB_FALLBACK = (
    "MSA brings reliable components, fast repairs and tailored IT services "
    "for gamers, creators and small businesses."
)
PRICE_FALLBACK = "USD 0"

TESTIMONIALS = (
    {"quote": "Quick turnaround and clear updates. I trust MSA.", "who": "Layla, Creator"},
    {"quote": "They fixed my motherboard when others failed.", "who": "Omar, Streamer"},
    {"quote": "Great bundles and fair prices.", "who": "Karim, Gamer"},
)


@dataclass(frozen=True)
class ViewControls:
    category: str = ALL_CATEGORIES
    search: str = ""
    sort: str = SORT_DEFAULT
    carousel_index: int = 0

    @classmethod
    def from_params(cls, params):
        return cls(
            category=(params.get("category") or ALL_CATEGORIES),
            search=(params.get("search") or ""),
            sort=(params.get("sort") or SORT_DEFAULT),
        )


# --------------------------
# Helpers
# --------------------------

def _items(state, key):
    items = state.get(key)
    return items if isinstance(items, list) else []


def _records(state, key):
    """Entity collections; anything that is not an object is not shown."""
    return [item for item in _items(state, key) if isinstance(item, dict)]


def _text(value):
    return "" if value is None else str(value)


def _background(img):
    return f"url({img}) center/cover no-repeat" if img else None


def _thumb_label(title, words=2):
    return " ".join(_text(title).split(" ")[:words])


def _categories(state):
    return [_text(c) for c in _items(state, "categories")]


# --------------------------
# Products: filter / search / sort
# --------------------------

def filter_products(products, controls):
    category = controls.category or ALL_CATEGORIES
    query = (controls.search or "").strip().lower()
    items = list(products)

    if category != ALL_CATEGORIES:
        items = [p for p in items if _text(p.get("category")).lower() == category.lower()]
    if query:
        items = [p for p in items if query in f"{p.get('title') or ''} {p.get('desc') or ''}".lower()]

    if controls.sort in (SORT_PRICE_ASC, SORT_PRICE_DESC):
        items.sort(key=lambda p: safe_parse_number(p.get("price")))
        if controls.sort == SORT_PRICE_DESC:
            items.reverse()
    return items


def _product_card(p):
    return {
        "id": p.get("id"),
        "title": p.get("title") or "",
        "desc": p.get("desc") or "",
        "category": p.get("category") or "",
        "price": p.get("price") or PRICE_FALLBACK,
        "old_price": p.get("oldPrice") or None,
        "thumb": {
            "background": _background(p.get("img")),
            "text": None if p.get("img") else _thumb_label(p.get("title")),
        },
    }


# --------------------------
# Projections
# --------------------------

def project_shop_info(state, controls=None):
    info = state.get("shopInfo")
    if not isinstance(info, dict):
        info = {}
    title = info.get("title") or ""
    tagline = info.get("tagline") or ""
    return {
        "site_title": title or SITE_TITLE_FALLBACK,
        "site_tag": tagline or SITE_TAG_FALLBACK,
        "hero_headline": title or HERO_HEADLINE_FALLBACK,
        "hero_sub": tagline or HERO_SUB_FALLBACK,
        "logo": info.get("logo"),
        "info": {
            "phone": info.get("phone") or "",
            "email": info.get("email") or "",
            "address": info.get("address") or "",
            "delivery": info.get("delivery") or "",
        },
        "footer": {
            "phone": info.get("phone") or "",
            "email": info.get("email") or "",
            "address": info.get("address") or "",
            "text": info.get("footerText") or "",
        },
        "admin_form": {
            "title": title,
            "tagline": tagline,
            "phone": info.get("phone") or "",
            "email": info.get("email") or "",
            "address": info.get("address") or "",
            "delivery": info.get("delivery") or "",
        },
        "admin_preview": f"{info.get('title')} - preview",
    }


def project_carousel(state, controls):
    slides = _records(state, "slider")
    count = len(slides)
    active = controls.carousel_index if count else None
    return {
        "slides": [
            {
                "id": s.get("id"),
                "title": s.get("title") or "",
                "desc": s.get("desc") or "",
                "background": _background(s.get("img")),
                "aria_label": f"{idx + 1} of {count}",
            }
            for idx, s in enumerate(slides)
        ],
        "dots": [{"index": idx, "active": idx == active} for idx in range(count)],
        "active": active,
    }


def project_category_chips(state, controls=None):
    return [{"label": c, "category": c} for c in _categories(state)]


def project_category_filter(state, controls):
    options = [{"value": ALL_CATEGORIES, "label": "All categories"}]
    options += [{"value": c, "label": c} for c in _categories(state)]
    return {"options": options, "selected": controls.category or ALL_CATEGORIES}


def project_category_admin(state, controls=None):
    categories = _categories(state)
    last = len(categories) - 1
    return [
        {"index": idx, "name": c, "can_move_up": idx > 0, "can_move_down": idx < last}
        for idx, c in enumerate(categories)
    ]


def project_products(state, controls):
    listed = filter_products(_records(state, "products"), controls)
    if not listed:
        return {"cards": [], "empty": True}
    return {"cards": [_product_card(p) for p in listed], "empty": False}


def project_product_modal(product):
    img = product.get("img")
    return {
        "id": product.get("id"),
        "title": product.get("title") or "Product",
        "desc": product.get("desc") or "",
        "price": product.get("price") or PRICE_FALLBACK,
        "image": {
            "background": _background(img),
            "text": "" if img else _thumb_label(product.get("title")),
        },
    }


def project_laptops(state, controls=None):
    return [
        {
            "id": p.get("id"),
            "title": p.get("title") or "",
            "price": p.get("price") or "",
            "thumb": {
                "background": _background(p.get("img")),
                "text": None if p.get("img") else _thumb_label(p.get("title")),
            },
        }
        for p in _records(state, "laptops")
    ]


def project_deals(state, controls=None):
    return [
        {"id": d.get("id"), "title": d.get("title") or "", "desc": d.get("desc") or "", "price": d.get("price") or ""}
        for d in _records(state, "deals")
    ]


def project_services(state, controls=None):
    return [
        {"id": s.get("id"), "title": s.get("title") or "", "desc": s.get("desc") or ""}
        for s in _records(state, "services")
    ]


def project_blog(state, controls=None):
    return [
        {"id": b.get("id"), "title": b.get("title") or "", "excerpt": b.get("excerpt") or ""}
        for b in _records(state, "blog")
    ]


def project_faq(state, controls=None):
    return [
        {"id": f.get("id"), "question": f.get("q") or "", "answer": f.get("a") or ""}
        for f in _records(state, "faq")
    ]


def project_testimonials(state=None, controls=None):
    return [dict(t) for t in TESTIMONIALS]


def project_slides_admin(state, controls=None):
    slides = _records(state, "slider")
    last = len(slides) - 1
    return [
        {
            "index": idx,
            "id": s.get("id"),
            "title": s.get("title") or "",
            "desc": s.get("desc") or "",
            "has_image": bool(s.get("img")),
            "can_move_up": idx > 0,
            "can_move_down": idx < last,
        }
        for idx, s in enumerate(slides)
    ]


def project_products_admin(state, controls=None):
    return [
        {
            "index": idx,
            "id": p.get("id"),
            "title": p.get("title") or "",
            "meta": f"{p.get('category') or ''} • {p.get('price') or ''}",
            "thumb": {
                "background": _background(p.get("img")),
                "text": _thumb_label(p.get("title"), words=1),
            },
        }
        for idx, p in enumerate(_records(state, "products"))
    ]


def project_messages_admin(state, controls=None):
    return [
        {
            "id": m.get("id"),
            "name": m.get("name") or "Anonymous",
            "contact": f"{m.get('email') or ''} {m.get('phone') or ''}".strip(),
            "time": format_timestamp(m.get("time")),
            "message": m.get("message") or "",
        }
        for m in reversed(_records(state, "messages"))
    ]


def project_admin_category_dropdown(state, controls=None):
    options = [{"value": ALL_CATEGORIES, "label": "All Products"}]
    options += [{"value": c, "label": c} for c in _categories(state)]
    return options


PROJECTIONS = {
    "shop_info": project_shop_info,
    "carousel": project_carousel,
    "category_chips": project_category_chips,
    "category_filter": project_category_filter,
    "category_admin": project_category_admin,
    "products": project_products,
    "laptops": project_laptops,
    "deals": project_deals,
    "services": project_services,
    "blog": project_blog,
    "faq": project_faq,
    "testimonials": project_testimonials,
    "slides_admin": project_slides_admin,
    "products_admin": project_products_admin,
    "messages_admin": project_messages_admin,
    "admin_category_dropdown": project_admin_category_dropdown,
}

# Region groups re-projected together after a change.
SHOP_REGIONS = ("shop_info",)
SLIDE_REGIONS = ("slides_admin", "carousel")
CATEGORY_REGIONS = (
    "category_chips", "category_filter", "category_admin",
    "admin_category_dropdown", "products_admin", "products",
)
PRODUCT_REGIONS = ("products_admin", "products")
MESSAGE_REGIONS = ("messages_admin",)


class RenderSynchronizer:
    def __init__(self, store, controls=None, scheduler=None, mounted=None):
        self.store = store
        self.controls = controls or ViewControls()
        self.scheduler = scheduler
        self.mounted = set(PROJECTIONS if mounted is None else mounted)
        self.views = {}
        self._rendered = []

    def set_controls(self, **changes):
        self.controls = replace(self.controls, **changes)
        return self.controls

    def reload_carousel(self):
        """Structural slide change (add/remove/reorder/replace): new count, first slide, restart."""
        if self.scheduler is not None:
            self.scheduler.reload(len(_records(self.store.state, "slider")))

    def _project(self, region):
        state = self.store.state
        if region == "carousel":
            index = 0
            if self.scheduler is not None:
                # Reading the carousel only adopts a slide count the scheduler has never seen.
                if self.scheduler.slide_count != len(_records(state, "slider")):
                    self.reload_carousel()
                index = self.scheduler.index
            self.controls = replace(self.controls, carousel_index=index)
        return PROJECTIONS[region](state, self.controls)

    def render(self, *regions):
        for region in regions:
            if region not in PROJECTIONS:
                logger.warning("No projection for region %r", region)
                continue
            if region not in self.mounted:
                logger.debug("Region %s not mounted; skipped", region)
                continue
            self.views[region] = self._project(region)
            if region not in self._rendered:
                self._rendered.append(region)

    def full_render(self):
        self.render(*PROJECTIONS)

    def drain(self):
        """Presentations re-projected since the previous drain."""
        rendered, self._rendered = self._rendered, []
        return {region: self.views[region] for region in rendered}
