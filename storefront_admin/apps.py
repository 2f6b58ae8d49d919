from django.apps import AppConfig

class StorefrontAdminConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'storefront_admin'
    verbose_name = 'Storefront Admin'
