from django.apps import AppConfig


class VenuesConfig(AppConfig):
    name = "venues"

    def ready(self) -> None:
        from venues import listings, signals  # noqa: F401

        listings.register()
