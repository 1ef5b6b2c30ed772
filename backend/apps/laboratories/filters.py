"""
Фильтрация и сортировка списка лабораторий (API v2).

Параметры принимаются как q[title_cont]=note&q[s]=title+asc,
так и без обертки: title_cont=note&s=title+asc.
"""
import re

from django.http import QueryDict
from django_filters import rest_framework as filters

from .models import Laboratory

WRAPPED_PARAM_RE = re.compile(r'^q\[(?P<name>\w+)\]$')

SORTABLE_FIELDS = ('id', 'title', 'description', 'deadline', 'done', 'created_at', 'updated_at')
SORT_DIRECTIONS = ('asc', 'desc')


def parse_sort(value):
    """
    'deadline desc, title asc' -> ['-deadline', 'title']

    Неизвестные поля и направления пропускаются.
    """
    ordering = []
    for chunk in value.split(','):
        parts = chunk.split()
        if not parts:
            continue
        field = parts[0].lower()
        direction = parts[1].lower() if len(parts) > 1 else 'asc'
        if field not in SORTABLE_FIELDS or direction not in SORT_DIRECTIONS:
            continue
        ordering.append(f'-{field}' if direction == 'desc' else field)
    return ordering


def unwrap_query_params(query_params):
    """Снимает обертку q[...]; обернутые параметры имеют приоритет"""
    data = QueryDict(mutable=True)
    wrapped = []
    for key, values in query_params.lists():
        match = WRAPPED_PARAM_RE.match(key)
        if match:
            wrapped.append((match.group('name'), values))
        else:
            data.setlist(key, values)
    for name, values in wrapped:
        data.setlist(name, values)
    return data


class SortFilter(filters.CharFilter):

    def filter(self, qs, value):
        if not value:
            return qs
        ordering = parse_sort(value)
        return qs.order_by(*ordering) if ordering else qs


class LaboratoryFilter(filters.FilterSet):
    """Предикаты фильтрации по полям лаборатории"""

    title_cont = filters.CharFilter(field_name='title', lookup_expr='icontains')
    title_eq = filters.CharFilter(field_name='title', lookup_expr='exact')
    title_start = filters.CharFilter(field_name='title', lookup_expr='istartswith')
    title_end = filters.CharFilter(field_name='title', lookup_expr='iendswith')
    description_cont = filters.CharFilter(field_name='description', lookup_expr='icontains')

    deadline_eq = filters.DateFilter(field_name='deadline', lookup_expr='exact')
    deadline_lt = filters.DateFilter(field_name='deadline', lookup_expr='lt')
    deadline_lteq = filters.DateFilter(field_name='deadline', lookup_expr='lte')
    deadline_gt = filters.DateFilter(field_name='deadline', lookup_expr='gt')
    deadline_gteq = filters.DateFilter(field_name='deadline', lookup_expr='gte')

    done_eq = filters.BooleanFilter(field_name='done')

    s = SortFilter(label='Сортировка')

    class Meta:
        model = Laboratory
        fields = []


class WrappedParamsFilterBackend(filters.DjangoFilterBackend):
    """DjangoFilterBackend с поддержкой параметров вида q[...]"""

    def get_filterset_kwargs(self, request, queryset, view):
        kwargs = super().get_filterset_kwargs(request, queryset, view)
        kwargs['data'] = unwrap_query_params(request.query_params)
        return kwargs
