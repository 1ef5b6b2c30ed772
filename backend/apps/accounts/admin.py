from django.contrib import admin

from .models import ClientToken


@admin.register(ClientToken)
class ClientTokenAdmin(admin.ModelAdmin):
    """Админка для токенов клиентов"""

    list_display = ['user', 'client', 'expires_at', 'created_at']
    list_filter = ['expires_at']
    search_fields = ['user__username', 'user__email', 'client']
    readonly_fields = ['token_digest', 'created_at', 'updated_at']
    ordering = ['-created_at']
