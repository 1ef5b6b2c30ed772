"""
Сериализаторы лабораторий: входные параметры и представления v1/v2
"""
from rest_framework import serializers

from .models import Laboratory, TITLE_BLANK_MESSAGE

WRITABLE_FIELDS = ('title', 'description', 'deadline', 'done')


def dasherize_keys(data):
    """user_id -> user-id"""
    return {key.replace('_', '-'): value for key, value in data.items()}


class LaboratoryParamsSerializer(serializers.ModelSerializer):
    """Валидация допустимых параметров перед сохранением"""

    title = serializers.CharField(
        max_length=255,
        trim_whitespace=False,
        error_messages={
            'required': TITLE_BLANK_MESSAGE,
            'blank': TITLE_BLANK_MESSAGE,
            'null': TITLE_BLANK_MESSAGE,
        }
    )
    description = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False
    )

    class Meta:
        model = Laboratory
        fields = list(WRITABLE_FIELDS)

    def validate_title(self, value):
        # Пробелы учитываются только при проверке, название сохраняется как передано
        if not value.strip():
            raise serializers.ValidationError(TITLE_BLANK_MESSAGE)
        return value

    def validate_description(self, value):
        return value or ''


class LaboratorySerializer(serializers.ModelSerializer):
    """Представление v1: плоский объект"""

    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Laboratory
        fields = [
            'id', 'title', 'description', 'deadline', 'done',
            'user_id', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class LaboratoryAttributesSerializer(LaboratorySerializer):

    class Meta(LaboratorySerializer.Meta):
        fields = [
            'title', 'description', 'deadline', 'done',
            'user_id', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class LaboratoryJSONAPISerializer(serializers.BaseSerializer):
    """
    Представление v2 в стиле JSON:API.

    Ресурс сериализуется как {id, type, attributes}, ключи атрибутов
    через дефис. Обертка {"data": ...} добавляется во view.
    """

    resource_type = 'laboratories'

    def to_representation(self, instance):
        attributes = LaboratoryAttributesSerializer(instance, context=self.context).data
        return {
            'id': str(instance.pk),
            'type': self.resource_type,
            'attributes': dasherize_keys(attributes),
        }
