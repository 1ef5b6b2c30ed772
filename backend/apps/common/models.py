"""
Общие модели и миксины для всех приложений
"""

from django.db import models


class TimeStampedModel(models.Model):
    """Миксин с датами создания и обновления записи"""
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Дата создания'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Дата обновления'
    )

    class Meta:
        abstract = True
