"""
Demo seed for the storefront document.

Ids are generated once per process, so every copy handed out by
`default_state()` (first run, wipe, import merge) carries the same ids.
"""
import copy

from .utilities import uid

DEFAULT_STATE = {
    "shopInfo": {
        "title": "MSA Tech Store",
        "tagline": "Hardware • Services • Support",
        "phone": "0958096302",
        "email": "support@msashop.com",
        "address": "123 Tech Street",
        "delivery": "We deliver across Syria",
        "footerText": "MSA Tech Store - your trusted local IT partner.",
        "logo": None,
    },
    "categories": ["pc", "parts", "accessories", "phones"],
    "slider": [
        {"id": uid("s"), "title": "Gaming PCs", "desc": "High FPS builds ready to ship", "img": None},
        {"id": uid("s"), "title": "Creator Workstations", "desc": "Render and edit fast", "img": None},
        {"id": uid("s"), "title": "Monitors & Peripherals", "desc": "High refresh & precision", "img": None},
    ],
    "products": [
        {
            "id": uid("p"), "title": "MSA Fury - i7 / 32GB / 1TB", "category": "pc",
            "price": "USD 1,350", "oldPrice": "USD 1,499", "desc": "1440p gaming build", "img": None,
        },
        {
            "id": uid("p"), "title": "MSA Studio - Ryzen 9 / 64GB", "category": "pc",
            "price": "USD 2,450", "oldPrice": "", "desc": "Content creation workstation", "img": None,
        },
        {
            "id": uid("p"), "title": "MSA RTX 4070 Ti - 12GB", "category": "parts",
            "price": "USD 899", "oldPrice": "USD 999", "desc": "GPU for gaming & rendering", "img": None,
        },
    ],
    "deals": [],
    "services": [
        {"id": uid("sv"), "title": "Custom PC Builds", "desc": "Tailored configs for gaming & work"},
        {"id": uid("sv"), "title": "On-site Support", "desc": "Business plans & emergency visits"},
        {"id": uid("sv"), "title": "Data Recovery", "desc": "Secure data recovery attempts"},
    ],
    "faq": [
        {"id": uid("f"), "q": "Do you offer international shipping?", "a": "Yes, we ship to supported regions. Contact us for rates."},
        {"id": uid("f"), "q": "What is your return policy?", "a": "Returns accepted within 14 days (conditions apply)."},
    ],
    "blog": [
        {"id": uid("b"), "title": "Top 5 Laptops for 2025", "excerpt": "Our picks for students & creators."},
    ],
    "laptops": [],
    "messages": [],
    "settings": {
        "autoSave": True,
    },
}


def default_state():
    return copy.deepcopy(DEFAULT_STATE)


def merge_over_defaults(document):
    """Shallow merge: each top-level key of `document` replaces the seed's key whole."""
    state = default_state()
    state.update(document)
    return state
