"""
Content negotiation для vendor media types
"""
from rest_framework.negotiation import DefaultContentNegotiation

from .versioning import VENDOR_MEDIA_TYPE_RE


class VendorMediaTypeNegotiation(DefaultContentNegotiation):
    """application/vnd.taskmanager.vN обслуживается JSON рендерером"""

    def get_accept_list(self, request):
        return [
            'application/json' if VENDOR_MEDIA_TYPE_RE.search(media_type) else media_type
            for media_type in super().get_accept_list(request)
        ]
