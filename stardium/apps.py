from django.apps import AppConfig


class StardiumConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "stardium"
