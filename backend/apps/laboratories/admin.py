from django.contrib import admin

from .models import Laboratory


@admin.register(Laboratory)
class LaboratoryAdmin(admin.ModelAdmin):
    """Админка для лабораторий"""

    list_display = ['title', 'user', 'deadline', 'done', 'created_at']
    list_filter = ['done', 'deadline', 'created_at']
    search_fields = ['title', 'description', 'user__username', 'user__email']
    readonly_fields = ['created_at', 'updated_at']
    list_select_related = ['user']
    ordering = ['-created_at']
    date_hierarchy = 'deadline'
    actions = ['mark_done', 'mark_not_done']

    fieldsets = (
        ('Основная информация', {
            'fields': ('title', 'description', 'user')
        }),
        ('Выполнение', {
            'fields': ('deadline', 'done')
        }),
        ('Аудит', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        })
    )

    @admin.action(description='Отметить как выполненные')
    def mark_done(self, request, queryset):
        updated = queryset.update(done=True)
        self.message_user(request, f'Отмечено выполненными: {updated}')

    @admin.action(description='Снять отметку о выполнении')
    def mark_not_done(self, request, queryset):
        updated = queryset.update(done=False)
        self.message_user(request, f'Снята отметка о выполнении: {updated}')
