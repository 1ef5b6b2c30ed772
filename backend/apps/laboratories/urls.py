from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import LaboratoryViewSet

app_name = 'laboratories'


class OptionalSlashRouter(DefaultRouter):
    """Маршруты доступны как со слэшем в конце, так и без него"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # DRF приводит trailing_slash к '/' или '', регулярное выражение задается здесь
        self.trailing_slash = '/?'


router = OptionalSlashRouter()
router.register('laboratories', LaboratoryViewSet, basename='laboratory')

urlpatterns = [
    path('', include(router.urls)),
]
