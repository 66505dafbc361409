from django.apps import AppConfig


class EarningsConfig(AppConfig):
    name = "earnings"
    verbose_name = "Shift earnings"

    def ready(self):
        """Fail fast on a malformed EARNINGS setting"""
        from earnings.conf import get_earnings_settings

        get_earnings_settings()
