"""
Определение версии API по пути или по vendor media type в заголовке Accept
"""
import re

from django.conf import settings
from rest_framework import exceptions
from rest_framework.versioning import BaseVersioning

VENDOR_MEDIA_TYPE_RE = re.compile(
    r'application/vnd\.(?P<vendor>[\w-]+)\.(?P<version>v\d+)(?:\+json)?',
    re.IGNORECASE
)


def parse_vendor_version(accept_header):
    """Версия из заголовка вида application/vnd.taskmanager.v1"""
    if not accept_header:
        return None

    for media_type in accept_header.split(','):
        match = VENDOR_MEDIA_TYPE_RE.search(media_type.strip())
        if match and match.group('vendor').lower() == settings.API_VENDOR:
            return match.group('version').lower()
    return None


class VendorAcceptHeaderVersioning(BaseVersioning):
    """
    Версия берется из пути (/api/v1/...), затем из Accept,
    иначе используется DEFAULT_VERSION.

    GET /api/laboratories/ HTTP/1.1
    Accept: application/vnd.taskmanager.v1
    """
    invalid_version_message = 'Неподдерживаемая версия API.'

    def determine_version(self, request, *args, **kwargs):
        version = kwargs.get(self.version_param)
        if version is None:
            version = parse_vendor_version(request.META.get('HTTP_ACCEPT', ''))
        if version is None:
            version = self.default_version

        if not self.is_allowed_version(version):
            raise exceptions.NotAcceptable(self.invalid_version_message)
        return version
