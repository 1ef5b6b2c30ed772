from django.apps import AppConfig


class LaboratoriesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.laboratories'
    verbose_name = 'Лаборатории'
